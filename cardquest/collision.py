"""Box shapes and the overlap tests used for stage collisions."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardquest.vecmath import Vector3

__all__ = [
    "ShortForm",
    "AABB",
    "short_form_from_bounds",
    "check_hit_vector3_max",
    "check_hit_vector3_min",
    "check_hit_side",
    "check_hit_vertical",
]


@dataclass
class ShortForm:
    """The eight corners of a box: the near face (min) and the far face (max)."""

    min_left_bottom: Vector3 = field(default_factory=Vector3)
    min_right_bottom: Vector3 = field(default_factory=Vector3)
    min_left_top: Vector3 = field(default_factory=Vector3)
    min_right_top: Vector3 = field(default_factory=Vector3)

    max_left_bottom: Vector3 = field(default_factory=Vector3)
    max_right_bottom: Vector3 = field(default_factory=Vector3)
    max_left_top: Vector3 = field(default_factory=Vector3)
    max_right_top: Vector3 = field(default_factory=Vector3)


@dataclass
class AABB:
    """An axis-aligned box given by its two extreme corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


def short_form_from_bounds(lower: Vector3, upper: Vector3) -> ShortForm:
    """Build the eight corners of the box spanning lower to upper."""
    return ShortForm(
        min_left_bottom=Vector3(lower.x, lower.y, lower.z),
        min_right_bottom=Vector3(upper.x, lower.y, lower.z),
        min_left_top=Vector3(lower.x, upper.y, lower.z),
        min_right_top=Vector3(upper.x, upper.y, lower.z),
        max_left_bottom=Vector3(lower.x, lower.y, upper.z),
        max_right_bottom=Vector3(upper.x, lower.y, upper.z),
        max_left_top=Vector3(lower.x, upper.y, upper.z),
        max_right_top=Vector3(upper.x, upper.y, upper.z),
    )


def check_hit_vector3_max(a: Vector3, b: Vector3) -> bool:
    """True when a is strictly greater than b on every axis."""
    return a.x > b.x and a.y > b.y and a.z > b.z


def check_hit_vector3_min(a: Vector3, b: Vector3) -> bool:
    """True when a is less than or equal to b on every axis."""
    return a.x <= b.x and a.y <= b.y and a.z <= b.z


def check_hit_side(a: ShortForm, b: ShortForm) -> bool:
    """Overlap test on all three axes, with touching faces counting as a hit."""
    lo_a, hi_a = a.min_left_bottom, a.min_right_top
    lo_b, hi_b = b.max_left_bottom, b.max_right_top
    return all(
        lo <= other_hi and hi >= other_lo
        for lo, hi, other_lo, other_hi in (
            (lo_a.x, hi_a.x, lo_b.x, hi_b.x),
            (lo_a.y, hi_a.y, lo_b.y, hi_b.y),
            (lo_a.z, hi_a.z, lo_b.z, hi_b.z),
        )
    )


def check_hit_vertical(a: ShortForm, b: ShortForm) -> bool:
    """Corner-ordering test between the top and bottom edges of two boxes."""
    top_hit = check_hit_vector3_max(a.min_left_top, b.min_right_top) and check_hit_vector3_min(
        a.min_right_top, b.min_left_top
    )
    if not top_hit:
        return False
    return check_hit_vector3_max(
        a.min_left_bottom, b.min_right_bottom
    ) and check_hit_vector3_min(a.min_right_bottom, b.min_left_bottom)