"""Helpers for overlap and containment checks between simple shapes."""

from __future__ import annotations

from typing import Any

from .geometry import Point


def is_point_in_bitmap(pnt: Point, bitmap: Any) -> bool:
    """Return whether the pixel of ``bitmap`` at ``pnt`` is not fully transparent.

    ``bitmap`` must offer ``get_at((x, y))`` returning an RGBA colour.
    """
    colour = bitmap.get_at((int(pnt.x), int(pnt.y)))
    return colour[3] != 0


def is_point_in_rect(pnt: Point, rect_pos: Point, rect_size: Point) -> bool:
    """Return whether ``pnt`` lies in the half-open rectangle at ``rect_pos`` of ``rect_size``."""
    return (
        rect_pos.x <= pnt.x < rect_pos.x + rect_size.x
        and rect_pos.y <= pnt.y < rect_pos.y + rect_size.y
    )


def is_rect_overlap(r1_min: Point, r1_max: Point, r2_min: Point, r2_max: Point) -> bool:
    """Return whether two axis-aligned rectangles, given by corners, strictly overlap."""
    return (
        r1_max.x > r2_min.x
        and r2_max.x > r1_min.x
        and r1_max.y > r2_min.y
        and r2_max.y > r1_min.y
    )


def is_circle_overlap(c1: Point, r1: float, c2: Point, r2: float) -> bool:
    """Return whether two circles strictly overlap."""
    return (c1 - c2).magnitude() < r1 + r2