"""Light sources and the circle shadow used by the lighting setup."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from cardquest.vecmath import Vector2, Vector3, normalize

__all__ = ["DirectionalLight", "PointLight", "SpotLight", "CircleShadow"]


def _x_axis() -> Vector3:
    return Vector3(1.0, 0.0, 0.0)


def _white() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


def _unit_atten() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


def _default_factor_angle_cos() -> Vector2:
    return Vector2(0.2, 0.5)


def _cosines(factor_angle: Vector2) -> Vector2:
    return Vector2(math.cos(factor_angle.x), math.cos(factor_angle.y))


@dataclass
class DirectionalLight:
    """A parallel light; its direction is kept as a unit vector."""

    direction: Vector3 = field(default_factory=_x_axis)
    color: Vector3 = field(default_factory=_white)
    active: bool = False

    def set_direction(self, direction: Vector3) -> None:
        self.direction = normalize(direction)


@dataclass
class PointLight:
    """A light at a point, fading with distance."""

    position: Vector3 = field(default_factory=Vector3)
    color: Vector3 = field(default_factory=_white)
    atten: Vector3 = field(default_factory=_unit_atten)
    active: bool = False


@dataclass
class SpotLight:
    """A cone of light from a point along a direction."""

    direction: Vector3 = field(default_factory=_x_axis)
    position: Vector3 = field(default_factory=Vector3)
    color: Vector3 = field(default_factory=_white)
    atten: Vector3 = field(default_factory=_unit_atten)
    factor_angle_cos: Vector2 = field(default_factory=_default_factor_angle_cos)
    active: bool = False

    def set_direction(self, direction: Vector3) -> None:
        self.direction = normalize(direction)

    def set_factor_angle(self, factor_angle: Vector2) -> None:
        """Set the fade start (x) and end (y) angles, in radians; cosines are stored."""
        self.factor_angle_cos = _cosines(factor_angle)


@dataclass
class CircleShadow:
    """A round shadow cast by an object away from a virtual light."""

    direction: Vector3 = field(default_factory=_x_axis)
    distance_caster_light: float = 100.0
    caster_position: Vector3 = field(default_factory=Vector3)
    atten: Vector3 = field(default_factory=lambda: Vector3(0.5, 0.6, 0.0))
    factor_angle_cos: Vector2 = field(default_factory=_default_factor_angle_cos)
    active: bool = False

    def set_direction(self, direction: Vector3) -> None:
        self.direction = normalize(direction)

    def set_factor_angle(self, factor_angle: Vector2) -> None:
        """Set the fade start (x) and end (y) angles, in radians; cosines are stored."""
        self.factor_angle_cos = _cosines(factor_angle)