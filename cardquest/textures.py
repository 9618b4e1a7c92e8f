"""Texture handle allocation by file name."""

from __future__ import annotations

import os
from dataclasses import dataclass

__all__ = ["HandleBitset", "Texture", "TextureManager", "NUM_DESCRIPTORS"]

NUM_DESCRIPTORS = 1024
_BITS_PER_WORD = 64


class HandleBitset:
    """A fixed-size set of bits that can find its lowest clear bit."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        word_count = 1 if size == 0 else (size - 1) // _BITS_PER_WORD + 1
        self.capacity = word_count * _BITS_PER_WORD
        self._bits = 0

    def _check(self, bit_index: int) -> None:
        if not 0 <= bit_index < self.size:
            raise IndexError(f"bit index {bit_index} out of range 0..{self.size - 1}")

    def find_first(self) -> int:
        """Index of the lowest clear bit, or the storage capacity if none is clear."""
        first_zero = ((self._bits + 1) & ~self._bits).bit_length() - 1
        return min(first_zero, self.capacity)

    def set(self, bit_index: int, value: bool = True) -> None:
        self._check(bit_index)
        if value:
            self._bits |= 1 << bit_index
        else:
            self._bits &= ~(1 << bit_index)

    def reset(self, bit_index: int) -> None:
        self.set(bit_index, False)

    def clear(self) -> None:
        self._bits = 0

    def test(self, bit_index: int) -> bool:
        self._check(bit_index)
        return bool(self._bits >> bit_index & 1)


@dataclass
class Texture:
    """A loaded texture slot."""

    name: str = ""
    path: str = ""


class TextureManager:
    """Hands out one handle per distinct texture file name.

    With ``require_files`` set, loading a file that does not exist raises
    FileNotFoundError.
    """

    _shared: TextureManager | None = None

    def __init__(
        self,
        directory_path: str = "Resources/",
        capacity: int = NUM_DESCRIPTORS,
        require_files: bool = False,
    ) -> None:
        self.directory_path = directory_path
        self.capacity = capacity
        self.require_files = require_files
        self._textures = [Texture() for _ in range(capacity)]
        self._used = HandleBitset(capacity)

    @classmethod
    def instance(cls) -> TextureManager:
        """The texture manager shared across the game."""
        if cls._shared is None:
            cls._shared = cls()
        return cls._shared

    def reset_all(self) -> None:
        """Release every texture."""
        self._textures = [Texture() for _ in range(self.capacity)]
        self._used.clear()

    def _full_path(self, file_name: str) -> str:
        current_relative = len(file_name) > 2 and file_name.startswith("./")
        return file_name if current_relative else self.directory_path + file_name

    def load(self, file_name: str) -> int:
        """Handle for the named texture, loading it into a free slot if needed."""
        for handle, texture in enumerate(self._textures):
            if texture.name == file_name:
                return handle

        handle = self._used.find_first()
        if handle >= self.capacity:
            raise RuntimeError("no free texture slots")

        full_path = self._full_path(file_name)
        if self.require_files and not os.path.isfile(full_path):
            raise FileNotFoundError(
                f"texture {file_name!r} could not be loaded from {full_path!r}"
            )

        self._textures[handle] = Texture(name=file_name, path=full_path)
        self._used.set(handle)
        return handle

    def unload(self, texture_handle: int) -> bool:
        """Release a texture; False for a handle outside the table."""
        if not 0 <= texture_handle < self.capacity:
            return False
        if not self._textures[texture_handle].name:
            raise ValueError(f"texture handle {texture_handle} is not loaded")
        self._textures[texture_handle] = Texture()
        self._used.reset(texture_handle)
        return True

    def _slot(self, texture_handle: int) -> Texture:
        if not 0 <= texture_handle < self.capacity:
            raise IndexError(f"texture handle {texture_handle} out of range")
        return self._textures[texture_handle]

    def name_of(self, texture_handle: int) -> str:
        """File name held by a handle; empty for a free slot."""
        return self._slot(texture_handle).name

    def path_of(self, texture_handle: int) -> str:
        """Resolved path of the file held by a handle; empty for a free slot."""
        return self._slot(texture_handle).path