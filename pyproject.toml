[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "streetdash"
version = "0.1.0"
description = "A small pygame-based 2D game engine: points and collision helpers, objects and controls in groups, scenes, sprites, resource caching, audio and a game loop."
requires-python = ">=3.10"
keywords = ["game", "engine", "pygame", "2d", "arcade", "side-scroller", "sprites", "scenes"]
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
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["streetdash"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
