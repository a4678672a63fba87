"""A small 2D game engine on pygame: geometry, collisions, groups, scenes, sprites, resources, audio, logging and a game loop."""

__version__ = "0.1.0"