"""Enemies that patrol back and forth along the Z axis."""

from __future__ import annotations

from collections.abc import Sequence

from cardquest.characters import BaseCharacter
from cardquest.model import Model
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Vector3

__all__ = ["PatrollingEnemy", "Enemy", "Enemy2", "Enemy3", "EnemyRed"]


class PatrollingEnemy(BaseCharacter):
    """An enemy body that moves along Z and turns around at its bounds.

    Subclasses set the body scale, start position, speeds and bounds.
    """

    BODY_SCALE = 1.0
    START_X = 0.0
    INITIAL_SPEED = 0.055
    TURN_SPEED = 0.055
    UPPER_BOUND = 10.0
    LOWER_BOUND = -10.0

    def __init__(self) -> None:
        super().__init__()
        self.body = WorldTransform()
        self.speed = self.INITIAL_SPEED

    def initialize(self, models: Sequence[Model]) -> None:
        super().initialize(models)
        self.world_transform.initialize()
        s = self.BODY_SCALE
        self.body.scale = Vector3(s, s, s)
        self.body.initialize()
        self.body.translation.x = self.START_X
        self.body.translation.y = 0.0

    def update(self) -> None:
        self.body.translation.z += self.speed
        self.body.translation.z += self.speed
        if self.body.translation.z >= self.UPPER_BOUND:
            self.speed = -self.TURN_SPEED
        if self.body.translation.z <= self.LOWER_BOUND:
            self.speed = self.TURN_SPEED
        super().update()
        self.body.update_matrix()

    def draw(self, view_projection: ViewProjection) -> None:
        """Draw the first model at the body transform."""
        self.models[0].draw(self.body, view_projection)

    def world_position(self) -> Vector3:
        return self.body.world_position()

    def on_collision(self) -> None:
        """Enemies take no action when hit."""

    def reset(self, pos: Vector3) -> None:
        self.body.translation = pos.copy()


class Enemy(PatrollingEnemy):
    BODY_SCALE = 2.0
    START_X = 70.0
    INITIAL_SPEED = 0.055
    TURN_SPEED = 0.055


class Enemy2(PatrollingEnemy):
    BODY_SCALE = 1.0
    START_X = 15.0
    INITIAL_SPEED = -0.054
    TURN_SPEED = 0.055
    LOWER_BOUND = -0.0


class Enemy3(PatrollingEnemy):
    BODY_SCALE = 1.0
    START_X = -10.0
    INITIAL_SPEED = -0.054
    TURN_SPEED = 0.055
    LOWER_BOUND = -0.0


class EnemyRed(PatrollingEnemy):
    BODY_SCALE = 2.0
    START_X = 35.0
    INITIAL_SPEED = -0.054
    TURN_SPEED = 0.054