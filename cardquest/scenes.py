"""Scene identifiers and the full-screen picture scenes (title, explanation, clear)."""

from __future__ import annotations

from enum import Enum, auto

from cardquest.gamepad import Button, Input
from cardquest.textures import TextureManager

__all__ = ["SceneType", "ImageScene", "TitleScene", "ExplanationScene", "GameClear"]


class SceneType(Enum):
    """The scenes the game moves between."""

    TITLE = auto()
    EXPLANATION = auto()
    GAME_PLAY = auto()
    GAME_CLEAR = auto()


class ImageScene:
    """A scene that shows one picture and ends when B is pressed on pad 0.

    After reporting its end for one frame, the next update clears the flag
    so the scene can be entered again.
    """

    TEXTURE_NAME = ""
    NEXT_SCENE = SceneType.TITLE

    def __init__(
        self,
        input_hub: Input | None = None,
        textures: TextureManager | None = None,
    ) -> None:
        self._input = input_hub or Input.instance()
        self._textures = textures or TextureManager.instance()
        self.texture_handle: int | None = None
        self.last_drawn: int | None = None
        self._scene_end = False

    def initialize(self) -> None:
        """Load the scene's picture."""
        self.texture_handle = self._textures.load(self.TEXTURE_NAME)

    def update(self) -> None:
        if self._scene_end:
            self._scene_end = False
            return
        if self._input.is_triggered(0, Button.B):
            self._scene_end = True

    def draw(self) -> int:
        """Draw the picture; returns the texture handle drawn."""
        if self.texture_handle is None:
            raise RuntimeError("scene has not been initialized")
        self.last_drawn = self.texture_handle
        return self.texture_handle

    def is_scene_end(self) -> bool:
        return self._scene_end

    def next_scene(self) -> SceneType:
        return self.NEXT_SCENE


class TitleScene(ImageScene):
    TEXTURE_NAME = "Title.png"
    NEXT_SCENE = SceneType.EXPLANATION


class ExplanationScene(ImageScene):
    TEXTURE_NAME = "setumei.png"
    NEXT_SCENE = SceneType.GAME_PLAY


class GameClear(ImageScene):
    TEXTURE_NAME = "GC.png"
    NEXT_SCENE = SceneType.TITLE