# -*- coding: utf-8 -*-
"""
This module provides helpers to read rank grids from text and to dump boards for diagnostics.
"""

from .display import format_ranks, log_board
from .parsing import parse_ranks

__all__ = ["format_ranks", "log_board", "parse_ranks"]
