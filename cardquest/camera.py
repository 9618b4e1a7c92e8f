"""A camera that trails behind a target and turns with the right stick."""

from __future__ import annotations

from cardquest.gamepad import SHRT_MAX, Input
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import (
    Vector3,
    add,
    inverse,
    make_affine_matrix,
    make_rotate_matrix,
    transform_normal,
)

__all__ = ["FollowCamera"]

_OFFSET = (0.0, 15.0, -40.0)
_HEIGHT_DROP = 5.0
_ROTATION_SPEED = 0.05


class FollowCamera:
    """Keeps its view behind and above a target transform."""

    def __init__(self, input_hub: Input | None = None) -> None:
        self._input = input_hub or Input.instance()
        self.world_transform = WorldTransform()
        self.view_projection = ViewProjection()
        self._target: WorldTransform | None = None

    def initialize(self) -> None:
        self.world_transform.initialize()
        self.view_projection.initialize()

    def set_target(self, target: WorldTransform | None) -> None:
        self._target = target

    def update(self) -> None:
        view = self.view_projection
        if self._target is not None:
            offset = transform_normal(Vector3(*_OFFSET), make_rotate_matrix(view.rotation))
            view.translation = add(self._target.translation, offset)
            view.translation.y -= _HEIGHT_DROP

        state = self._input.joystick_state(0)
        if state is not None:
            view.rotation.y += state.thumb_rx / SHRT_MAX * _ROTATION_SPEED

        own = self.world_transform
        own.mat_world = make_affine_matrix(own.scale, own.rotation, own.translation)
        view.mat_view = inverse(own.mat_world)
        view.update_matrix()

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()