# -*- coding: utf-8 -*-
"""
Board specific configuration.
"""
from dataclasses import dataclass

from tilepack.core.board import Board

DEFAULT_SIDE_SIZE = 4
LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


@dataclass
class BoardConfiguration:
    """Data needed to set up a board and its diagnostics."""

    side_size: int = DEFAULT_SIDE_SIZE
    log_level: str = 'INFO'

    def build_board(self) -> Board:
        """Create an empty board of the configured size."""
        return Board(self.side_size)
