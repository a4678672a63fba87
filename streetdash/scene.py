"""Base class for the scenes a game switches between."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .group import Group

BACKGROUND_COLOUR = (0, 0, 0)


class Scene(Group, ABC):
    """A group that fills the whole window.

    Set-up belongs in :meth:`initialize` and tear-down in :meth:`terminate`
    rather than in the constructor, so one scene object can be entered many times.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Build the scene's contents when it becomes active."""

    def terminate(self) -> None:
        """Drop everything the scene holds when it stops being active."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear ``surface`` to black, then draw the scene's objects onto it."""
        surface.fill(BACKGROUND_COLOUR)
        super().draw(surface)