[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "monkdungeon"
version = "0.1.0"
description = "A small text adventure: guide a monk through a randomly generated dungeon of goblins, upgrades and treasure."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dungeon", "text-adventure", "roguelike", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
monkdungeon = "monkdungeon.game:main"

[tool.hatch.build.targets.wheel]
packages = ["monkdungeon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
