[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadetrio"
version = "0.1.0"
description = "Three small arcade games: Flappy Bird, Pong and Snake, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "flappy-bird", "pong", "snake", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadetrio-flappy = "arcadetrio.flappy:main"
arcadetrio-pong = "arcadetrio.pong:main"
arcadetrio-snake = "arcadetrio.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadetrio"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
