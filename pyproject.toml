[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drillgame"
version = "0.1.0"
description = "A small side-scrolling drill platformer with a tile map editor"
requires-python = ">=3.10"
keywords = ["game", "platformer", "pygame", "tile map", "level editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
drillgame = "drillgame.game:main"
drillgame-editor = "drillgame.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["drillgame"]

[tool.pytest.ini_options]
addopts = "-ra"
