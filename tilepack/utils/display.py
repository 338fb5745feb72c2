"""Dump rank matrices and boards in a readable form."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from numpy import ndarray

if TYPE_CHECKING:
    from tilepack.core.board import Board


def format_ranks(ranks: ndarray) -> str:
    """
    Render a rank matrix, one line per row.

    Parameters
    ----------
    ranks : ndarray
        A 2D matrix of ranks, 0 for an empty cell.

    Returns
    -------
    str
        Rows rendered as ``1:{1 2 3}``, numbered from 1.

    Example
    -------
    >>> import numpy as np
    >>> print(format_ranks(np.array([[1, 0], [0, 2]])))
    1:{1 0}
    2:{0 2}
    """
    return '\n'.join(
        f'{number}:{{{" ".join(str(int(rank)) for rank in row)}}}' for number, row in enumerate(ranks, start=1)
    )


def log_board(board: Board, logger: logging.Logger, message: str, level: int = logging.INFO) -> None:
    """
    Write the current ranks of a board into a logger.

    Parameters
    ----------
    board : Board
        The board to dump.
    logger : logging.Logger
        Where to write.
    message : str
        Written first, before the board lines.
    level : int, optional
        Logging level of every record (default is INFO).
    """
    logger.log(level, message)
    for line in board.pretty().splitlines():
        logger.log(level, line)
