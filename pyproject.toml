[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sollong"
version = "0.1.0"
description = "Tile-map validation, XPM sprite decoding and scene layout for a small 2D collect-and-escape puzzle game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "tilemap", "xpm", "sprites", "x11-colors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sollong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
