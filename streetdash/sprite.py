"""Images that can move, rotate and be tinted."""

from __future__ import annotations

import math
from typing import Any, Optional, Tuple

import pygame

from .geometry import Point
from .objects import GameObject
from .resources import Resources

_WHITE = (255, 255, 255, 255)


class Sprite(GameObject):
    """An image with rotation, velocity, tint and a collision radius.

    ``img`` is the image path under the resource image folder. A width or
    height of zero means the original size of the image. ``rotation`` is in
    radians, clockwise on screen; velocity is in pixels per second.
    """

    def __init__(
        self,
        img: str,
        x: float,
        y: float,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.5,
        anchor_y: float = 0.5,
        rotation: float = 0.0,
        vx: float = 0.0,
        vy: float = 0.0,
        r: int = 255,
        g: int = 255,
        b: int = 255,
        a: int = 255,
        *,
        resources: Optional[Resources] = None,
    ) -> None:
        super().__init__(x, y, w, h, anchor_x, anchor_y)
        cache = resources if resources is not None else Resources.get_instance()
        self.bitmap: Any = cache.get_bitmap(img)
        if self.size.x == 0:
            self.size.x = float(self.bitmap_width)
        if self.size.y == 0:
            self.size.y = float(self.bitmap_height)
        self.rotation = rotation
        self.velocity = Point(vx, vy)
        self.tint: Tuple[int, int, int, int] = (r, g, b, a)
        self.collision_radius = 10.0
        self.type = ""
        self.use_flag = False

    @property
    def bitmap_width(self) -> int:
        """Width of the underlying image in pixels."""
        return self.bitmap.get_width()

    @property
    def bitmap_height(self) -> int:
        """Height of the underlying image in pixels."""
        return self.bitmap.get_height()

    def draw(self, surface: Any) -> None:
        """Draw the image scaled to ``size``, tinted and rotated about its anchor at ``position``."""
        width = int(round(self.size.x))
        height = int(round(self.size.y))
        if width <= 0 or height <= 0:
            return
        image = self.bitmap
        if (width, height) != (self.bitmap_width, self.bitmap_height):
            image = pygame.transform.scale(image, (width, height))
        if tuple(self.tint) != _WHITE:
            image = image.copy()
            image.fill(self.tint, special_flags=pygame.BLEND_RGBA_MULT)
        if self.rotation:
            image = pygame.transform.rotate(image, -math.degrees(self.rotation))
        offset_x = self.anchor.x * width - width / 2
        offset_y = self.anchor.y * height - height / 2
        cos_r = math.cos(self.rotation)
        sin_r = math.sin(self.rotation)
        centre_x = self.position.x - (offset_x * cos_r - offset_y * sin_r)
        centre_y = self.position.y - (offset_x * sin_r + offset_y * cos_r)
        rect = image.get_rect(center=(round(centre_x), round(centre_y)))
        surface.blit(image, rect)

    def update(self, delta_time: float) -> None:
        """Move by ``velocity`` over ``delta_time`` seconds."""
        self.position.x += self.velocity.x * delta_time
        self.position.y += self.velocity.y * delta_time