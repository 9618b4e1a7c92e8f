"""The playing scene: player, enemies, camera and stage."""

from __future__ import annotations

from cardquest.camera import FollowCamera
from cardquest.enemies import Enemy, Enemy2, Enemy3, EnemyRed
from cardquest.gamepad import Input
from cardquest.model import Model, create_model_from_obj
from cardquest.player import Player
from cardquest.scenes import SceneType
from cardquest.stage import Stage, Stage2
from cardquest.textures import TextureManager
from cardquest.transform import ViewProjection, WorldTransform
from cardquest.vecmath import Vector3, length, subtract

__all__ = ["GameScene"]

BACKGROUND_TEXTURE = "BackGround2.png"
STAGE_MODEL = "stage"
PLAYER_MODELS = ("float_Body", "float_Head", "float_L_arm", "float_R_arm")
ENEMY_MODELS = ("BlackHead", "BlackL", "BlackR")
ENEMY_RED_MODELS = ("RedHead", "RedL", "RedR")
GOAL_X = 120.0

PLAYER_RADIUS = 15
ENEMY_RADIUS = 15
ENEMY_RADIUS_2 = 15
ENEMY_RADIUS_3 = 15
ENEMY_RADIUS_R = 15


def _within(a: Vector3, b: Vector3, radius: float) -> bool:
    return length(subtract(a, b)) <= radius


class GameScene:
    """Runs one stage until the player walks past the goal line."""

    def __init__(
        self,
        input_hub: Input | None = None,
        textures: TextureManager | None = None,
    ) -> None:
        self._input = input_hub or Input.instance()
        self._textures = textures or TextureManager.instance()
        self.world_transform = WorldTransform()
        self.view_projection = ViewProjection()
        self.camera = FollowCamera(self._input)
        self.player = Player(self._input, self._textures)
        self.enemy = Enemy()
        self.enemy2 = Enemy2()
        self.enemy3 = Enemy3()
        self.enemy_red = EnemyRed()
        self.stage1 = Stage()
        self.stage2 = Stage2()
        self.stage_model: Model | None = None
        self.background_handle: int | None = None
        self.last_background: int | None = None
        self._models: list[Model] = []
        self._goal_reached = False
        self._scene_end = False
        self._initialized = False

    def initialize(self) -> None:
        self.world_transform.initialize()
        self.background_handle = self._textures.load(BACKGROUND_TEXTURE)

        self.stage_model = create_model_from_obj(STAGE_MODEL, True)
        player_models = [create_model_from_obj(name, True) for name in PLAYER_MODELS]
        enemy_models = [create_model_from_obj(name, True) for name in ENEMY_MODELS]
        enemy_red_models = [create_model_from_obj(name, True) for name in ENEMY_RED_MODELS]
        self._models = [self.stage_model, *player_models, *enemy_models, *enemy_red_models]

        self.view_projection.initialize()
        self.camera.initialize()

        self.player.initialize(player_models)
        self.enemy.initialize(enemy_models)
        self.enemy_red.initialize(enemy_red_models)
        self.enemy2.initialize(enemy_models)
        self.enemy3.initialize(enemy_red_models)

        self.camera.set_target(self.player.body)
        self.player.set_view_projection(self.camera.view_projection)

        self.stage1.initialize(self.stage_model)
        self._initialized = True

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise RuntimeError("game scene has not been initialized")

    def update(self) -> None:
        self._require_initialized()
        for enemy in (self.enemy, self.enemy2, self.enemy3, self.enemy_red):
            enemy.update()
        self.stage1.update()
        self.stage2.update()
        self.player.update()
        self.camera.update()

        camera_view = self.camera.view_projection
        self.view_projection.mat_projection = camera_view.mat_projection.copy()
        self.view_projection.mat_view = camera_view.mat_view.copy()
        self.view_projection.transfer_matrix()

        if self.player.world_position().x >= GOAL_X:
            self._goal_reached = True

        if self._goal_reached:
            self._goal_reached = False
            self._scene_end = True
            self.player.reset()
        else:
            self._scene_end = False

    def check_all_collisions(self) -> None:
        """Player against the first enemy, and every card against every enemy."""
        self._require_initialized()
        if _within(
            self.player.world_position(),
            self.enemy.world_position(),
            PLAYER_RADIUS + ENEMY_RADIUS,
        ):
            self.player.on_collision()
            self.enemy.on_collision()

        targets = (
            (self.enemy, PLAYER_RADIUS + ENEMY_RADIUS),
            (self.enemy2, PLAYER_RADIUS + ENEMY_RADIUS_2),
            (self.enemy3, PLAYER_RADIUS + ENEMY_RADIUS),
            (self.enemy_red, PLAYER_RADIUS + ENEMY_RADIUS_R),
        )
        for enemy, radius in targets:
            for card in self.player.cards:
                if _within(card.world_position(), enemy.world_position(), radius):
                    card.on_collision()

    def draw(self) -> None:
        """Draw one frame; the scene's models keep only this frame's draw calls."""
        self._require_initialized()
        for model in self._models:
            model.clear()
        self.last_background = self.background_handle
        for enemy in (self.enemy, self.enemy_red, self.enemy2, self.enemy3):
            enemy.draw(self.view_projection)
        self.player.draw(self.view_projection)
        self.stage1.draw(self.view_projection)

    def reset(self) -> None:
        """Put the enemies back at their starting points."""
        self.enemy.reset(Vector3(0.0, 0.0, 5.0))
        self.enemy2.reset(Vector3(0.0, 0.0, 35.0))
        self.enemy3.reset(Vector3(0.0, 0.0, 30.0))
        self.enemy_red.reset(Vector3(0.0, 0.0, 5.0))

    def is_scene_end(self) -> bool:
        return self._scene_end

    def next_scene(self) -> SceneType:
        return SceneType.GAME_CLEAR