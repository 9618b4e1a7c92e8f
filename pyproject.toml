[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "cardquest"
version = "0.1.0"
description = "A headless 3D card-throwing action game: vector math, characters, enemies, camera and scenes."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "3d", "matrix", "simulation", "collision", "gamepad"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cardquest = "cardquest.app:main"

[tool.setuptools]
packages = ["cardquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
