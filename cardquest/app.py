"""The game loop that moves between scenes."""

from __future__ import annotations

import argparse

from cardquest.game_scene import GameScene
from cardquest.gamepad import Input
from cardquest.scenes import ExplanationScene, GameClear, SceneType, TitleScene
from cardquest.textures import TextureManager

__all__ = ["Game", "main"]


class Game:
    """Owns every scene and runs the current one a frame at a time."""

    def __init__(
        self,
        input_hub: Input | None = None,
        textures: TextureManager | None = None,
    ) -> None:
        self.input = input_hub or Input.instance()
        textures = textures or TextureManager.instance()

        self.game_scene = GameScene(self.input, textures)
        self.game_scene.initialize()
        self.title = TitleScene(self.input, textures)
        self.title.initialize()
        self.game_clear = GameClear(self.input, textures)
        self.game_clear.initialize()
        self.explanation = ExplanationScene(self.input, textures)
        self.explanation.initialize()

        self._scenes = {
            SceneType.TITLE: self.title,
            SceneType.EXPLANATION: self.explanation,
            SceneType.GAME_PLAY: self.game_scene,
            SceneType.GAME_CLEAR: self.game_clear,
        }
        self.scene = SceneType.TITLE
        self.frame = 0

    def step(self) -> SceneType:
        """Read input, update the current scene, switch if it ended, and draw."""
        self.input.update()
        current = self._scenes[self.scene]
        current.update()
        if current.is_scene_end():
            self.scene = current.next_scene()
        self._scenes[self.scene].draw()
        self.frame += 1
        return self.scene

    def run(self, frames: int) -> SceneType:
        """Run a number of frames and return the scene the game ends in."""
        if frames < 0:
            raise ValueError("frame count must not be negative")
        for _ in range(frames):
            self.step()
        return self.scene


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="cardquest", description="Run the game loop.")
    parser.add_argument("--frames", type=int, default=60, help="number of frames to run")
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    game = Game(Input(), TextureManager())
    scene = game.run(args.frames)
    print(f"{scene.name.lower()} after {game.frame} frames")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())