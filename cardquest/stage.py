"""The stage scenery models."""

from __future__ import annotations

from cardquest.model import Model
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Vector3

__all__ = ["Stage", "Stage2"]


def _require_model(model: Model | None) -> Model:
    if model is None:
        raise ValueError("a stage needs a model")
    return model


class Stage:
    """The first stage: a scaled, turned model whose matrix is published each frame."""

    def __init__(self) -> None:
        self.world_transform = WorldTransform()
        self.model: Model | None = None
        self.goal_reached = False

    def initialize(self, model: Model | None) -> None:
        self.model = _require_model(model)
        self.world_transform.initialize()
        self.world_transform.rotation.y = 90.0
        self.world_transform.scale = Vector3(2.0, 2.0, 2.0)

    def update(self) -> None:
        """Publish the stage's current world matrix."""
        self.world_transform.transfer_matrix()

    def draw(self, view_projection: ViewProjection) -> None:
        if self.model is None:
            raise RuntimeError("stage has not been initialized")
        self.model.draw(self.world_transform, view_projection)


class Stage2:
    """The second stage: a static model that counts frames and hits."""

    def __init__(self) -> None:
        self.world_transform = WorldTransform()
        self.model: Model | None = None
        self.frames = 0
        self.hits = 0

    def initialize(self, model: Model | None) -> None:
        self.model = _require_model(model)
        self.world_transform.initialize()

    def update(self) -> None:
        """Advance one frame; the stage itself does not move."""
        self.frames += 1

    def draw(self, view_projection: ViewProjection) -> None:
        if self.model is None:
            raise RuntimeError("stage has not been initialized")
        self.model.draw(self.world_transform, view_projection)

    def on_collision(self) -> None:
        """Record a hit; the stage does not otherwise react."""
        self.hits += 1