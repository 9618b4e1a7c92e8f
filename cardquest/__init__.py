"""A headless 3D card-throwing action game: vector math, collision, characters, camera and scenes."""

__version__ = "0.1.0"