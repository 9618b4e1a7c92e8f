"""The shared character base and the card projectile the player throws."""

from __future__ import annotations

from collections.abc import Sequence

from cardquest.model import Model, create_model
from cardquest.textures import TextureManager
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Vector3, add

__all__ = ["BaseCharacter", "Card"]


class BaseCharacter:
    """A character drawn as a list of models sharing one world transform."""

    def __init__(self) -> None:
        self.world_transform = WorldTransform()
        self.models: list[Model] = []

    def initialize(self, models: Sequence[Model]) -> None:
        self.models = list(models)
        self.world_transform.initialize()

    def update(self) -> None:
        self.world_transform.update_matrix()

    def draw(self, view_projection: ViewProjection) -> None:
        for model in self.models:
            model.draw(self.world_transform, view_projection)


class Card:
    """A thrown card that flies in a straight line and expires after a while."""

    LIFE_TIME = 20
    TEXTURE_NAME = "debugfont.png"

    def __init__(self, textures: TextureManager | None = None) -> None:
        self._textures = textures
        self.world_transform = WorldTransform()
        self.model: Model | None = None
        self.velocity = Vector3()
        self.texture_handle = 0
        self._death_timer = self.LIFE_TIME
        self._dead = False

    @property
    def is_dead(self) -> bool:
        return self._dead

    def initialize(self, position: Vector3, velocity: Vector3) -> None:
        textures = self._textures or TextureManager.instance()
        self.model = create_model()
        self.texture_handle = textures.load(self.TEXTURE_NAME)
        self.world_transform.scale = Vector3(0.5, 0.5, 0.5)
        self.world_transform.translation = position.copy()
        self.world_transform.initialize()
        self.velocity = velocity.copy()

    def update(self) -> None:
        """Publish the matrix, then move; the card dies when its timer runs out."""
        self.world_transform.update_matrix()
        self.world_transform.translation = add(self.world_transform.translation, self.velocity)
        self._death_timer -= 1
        if self._death_timer <= 0:
            self._dead = True

    def draw(self, view_projection: ViewProjection) -> None:
        if self.model is None:
            raise RuntimeError("card has not been initialized")
        self.model.draw(self.world_transform, view_projection, self.texture_handle)

    def on_collision(self) -> None:
        self._dead = True

    def world_position(self) -> Vector3:
        return self.world_transform.world_position()