"""Models as drawable handles that record the draw calls made on them."""

from __future__ import annotations

from dataclasses import dataclass, field

from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Matrix4x4

__all__ = ["DrawCall", "Model", "create_model", "create_model_from_obj", "DEFAULT_MODEL_NAME"]

DEFAULT_MODEL_NAME = "default"


@dataclass(frozen=True)
class DrawCall:
    """One request to draw a model, with the matrices in effect at the time."""

    model_name: str
    world_matrix: Matrix4x4
    view_matrix: Matrix4x4
    projection_matrix: Matrix4x4
    texture_handle: int | None = None


@dataclass(eq=False)
class Model:
    """A named model; each draw is kept in ``draw_calls`` until cleared."""

    name: str = DEFAULT_MODEL_NAME
    smoothing: bool = False
    draw_calls: list[DrawCall] = field(default_factory=list)

    def draw(
        self,
        world_transform: WorldTransform,
        view_projection: ViewProjection,
        texture_handle: int | None = None,
    ) -> DrawCall:
        """Record a draw of this model, optionally with a replacement texture."""
        call = DrawCall(
            model_name=self.name,
            world_matrix=world_transform.mat_world.copy(),
            view_matrix=view_projection.mat_view.copy(),
            projection_matrix=view_projection.mat_projection.copy(),
            texture_handle=texture_handle,
        )
        self.draw_calls.append(call)
        return call

    def clear(self) -> None:
        """Forget the recorded draw calls."""
        self.draw_calls.clear()


def create_model() -> Model:
    """The built-in default model."""
    return Model()


def create_model_from_obj(model_name: str, smoothing: bool = False) -> Model:
    """A model named after its OBJ asset; smoothing asks for smoothed normals."""
    if not model_name:
        raise ValueError("a model name is required")
    return Model(name=model_name, smoothing=smoothing)