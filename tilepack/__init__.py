# -*- coding: utf-8 -*-
"""
Python implementation of the packing rule of a sliding-tile merge puzzle.

This package provides the `Board` class, which packs ranked tiles toward one edge of a square grid and merges
adjacent tiles of equal rank.
"""

from .core import Board, Direction, Tile, pack_ranks

__all__ = ["Board", "Direction", "Tile", "pack_ranks"]
