"""Base classes for things that are drawn and updated, and for things that take input."""

from __future__ import annotations

from typing import Any

from .geometry import Point


class GameObject:
    """Something that has a position, a size and an anchor, and can be drawn and updated.

    ``size`` of zero means the original size of whatever is drawn. ``anchor``
    is the centre of the object: (0, 0) is the top-left, (1, 1) the bottom-right.
    """

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        w: float = 0.0,
        h: float = 0.0,
        anchor_x: float = 0.0,
        anchor_y: float = 0.0,
    ) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)

    def draw(self, surface: Any) -> None:
        """Draw onto ``surface``; does nothing by default."""

    def update(self, delta_time: float) -> None:
        """Advance game logic by ``delta_time`` seconds; does nothing by default."""


class Control:
    """Something that receives keyboard and mouse events; every handler does nothing by default."""

    def on_key_down(self, key_code: int) -> None:
        """Handle a key being pressed."""

    def on_key_up(self, key_code: int) -> None:
        """Handle a key being released."""

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button being pressed at window position (mx, my)."""

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button being released at window position (mx, my)."""

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Handle the mouse moving to window position (mx, my)."""

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Handle the mouse wheel turning by ``delta`` at window position (mx, my)."""