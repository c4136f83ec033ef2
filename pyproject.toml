[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wadengine"
version = "0.1.0"
description = "Read WAD archives, decode level geometry, BSP trees, sounds and textures, and run a small game-world simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["wad", "doom", "bsp", "level", "game", "raycasting"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wadengine = "wadengine.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wadengine"]

[tool.pytest.ini_options]
addopts = "-ra"
