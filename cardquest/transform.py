"""World transforms for objects and the camera's view-projection data."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardquest.vecmath import (
    Matrix4x4,
    Vector3,
    inverse,
    make_affine_matrix,
    make_identity_matrix,
    make_perspective_fov_matrix,
    multiply,
)

__all__ = ["WorldTransform", "ViewProjection"]


def _unit_scale() -> Vector3:
    return Vector3(1.0, 1.0, 1.0)


def _default_camera_position() -> Vector3:
    return Vector3(0.0, 0.0, -50.0)


@dataclass(eq=False)
class WorldTransform:
    """Local scale, rotation and translation, plus the derived world matrix.

    ``transferred`` holds the matrix as last handed to the renderer.
    """

    scale: Vector3 = field(default_factory=_unit_scale)
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    mat_world: Matrix4x4 = field(default_factory=make_identity_matrix)
    parent: WorldTransform | None = None
    transferred: Matrix4x4 | None = field(default=None, repr=False)

    def initialize(self) -> None:
        """Prepare the transform for rendering and publish its current matrix."""
        self.transfer_matrix()

    def transfer_matrix(self) -> None:
        """Publish the current world matrix."""
        self.transferred = self.mat_world.copy()

    def update_matrix(self) -> None:
        """Rebuild the world matrix from scale, rotation and translation.

        When a parent is set, its world matrix is applied after the local one.
        """
        self.mat_world = make_affine_matrix(self.scale, self.rotation, self.translation)
        if self.parent is not None:
            self.mat_world = multiply(self.mat_world, self.parent.mat_world)
        self.transfer_matrix()

    def world_position(self) -> Vector3:
        """The translation row of the world matrix."""
        row = self.mat_world.m[3]
        return Vector3(row[0], row[1], row[2])


@dataclass(eq=False)
class ViewProjection:
    """Camera placement and projection settings with their matrices."""

    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=_default_camera_position)
    fov_angle_y: float = 45.0 * 3.141592654 / 180.0
    aspect_ratio: float = 16 / 9
    near_z: float = 0.1
    far_z: float = 1000.0
    mat_view: Matrix4x4 = field(default_factory=make_identity_matrix)
    mat_projection: Matrix4x4 = field(default_factory=make_identity_matrix)
    transferred_view: Matrix4x4 | None = field(default=None, repr=False)
    transferred_projection: Matrix4x4 | None = field(default=None, repr=False)
    transferred_camera_position: Vector3 | None = field(default=None, repr=False)

    def initialize(self) -> None:
        """Compute and publish the view and projection matrices."""
        self.update_matrix()

    def update_matrix(self) -> None:
        self.update_view_matrix()
        self.update_projection_matrix()
        self.transfer_matrix()

    def transfer_matrix(self) -> None:
        """Publish the current matrices and camera position."""
        self.transferred_view = self.mat_view.copy()
        self.transferred_projection = self.mat_projection.copy()
        self.transferred_camera_position = self.translation.copy()

    def update_view_matrix(self) -> None:
        """The view matrix is the inverse of the camera's own world matrix."""
        camera_world = make_affine_matrix(_unit_scale(), self.rotation, self.translation)
        self.mat_view = inverse(camera_world)

    def update_projection_matrix(self) -> None:
        self.mat_projection = make_perspective_fov_matrix(
            self.fov_angle_y, self.aspect_ratio, self.near_z, self.far_z
        )