# -*- coding: utf-8 -*-
"""
Core of the tile packing puzzle.

It includes the ranked tile, the packing directions with their coordinate transform, the two-generation board and
the equivalent packing on plain rank matrices.
"""

from .board import Board
from .direction import Direction
from .ranks import merge_line, pack_ranks, slide_and_merge
from .tile import Tile

__all__ = [
    "Board",
    "Direction",
    "Tile",
    "merge_line",
    "slide_and_merge",
    "pack_ranks",
]
