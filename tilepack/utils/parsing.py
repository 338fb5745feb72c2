"""Read rank grids written as text."""

from __future__ import annotations

from numpy import array, int64, ndarray


def parse_ranks(text: str) -> ndarray:
    """
    Parse a rank grid written as rows separated by ``;`` (or new lines) and ranks separated by ``,``.

    Parameters
    ----------
    text : str
        The grid, e.g. ``"1,2,3;1,1,0;0,0,3"``. Blank rows are ignored.

    Returns
    -------
    ndarray
        A square int64 matrix.

    Raises
    ------
    ValueError
        If a rank is not an integer, is negative, or the grid is not square.
    """
    rows = [row.strip() for row in text.replace('\n', ';').split(';') if row.strip()]
    try:
        matrix = [[int(rank) for rank in row.split(',')] for row in rows]
    except ValueError:
        raise ValueError(f'ranks must be integers, got {text!r}') from None

    side_size = len(matrix)
    if side_size == 0 or any(len(row) != side_size for row in matrix):
        raise ValueError(f'rank grid must be square, got {[len(row) for row in matrix]}')

    ranks = array(matrix, dtype=int64)
    if (ranks < 0).any():
        raise ValueError(f'ranks must be >= 0, got {int(ranks.min())}')
    return ranks
