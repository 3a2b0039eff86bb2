"""Polygon cutting for polycut."""

from .splitter import split_polygon, choose_piece

__all__ = [
    "split_polygon",
    "choose_piece",
]
