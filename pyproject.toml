[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hollowgame"
version = "0.1.0"
description = "A multi-level grid puzzle game: push boxes and stones, flip switches, open doors and take portals to reach the goal."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "game", "grid", "terminal", "boxes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hollowgame = "hollowgame.fairy:main"

[tool.hatch.build.targets.wheel]
packages = ["hollowgame"]

[tool.pytest.ini_options]
addopts = "-ra"
