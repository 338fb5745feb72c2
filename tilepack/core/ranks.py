"""
Packing on plain rank matrices.

These helpers work on numpy arrays of ranks (0 for an empty cell) and follow the same single left-to-right scan as
the board, rotating the matrix so that every direction becomes a left pack.
"""

from __future__ import annotations

from typing import Any

from numpy import asarray, int64, ndarray, rot90, zeros_like

from tilepack.core.direction import Direction


def merge_line(line: ndarray) -> ndarray:
    """
    Merge a line of ranks toward its start.

    Parameters
    ----------
    line : ndarray
        A 1D array of ranks, 0 for an empty cell.

    Returns
    -------
    ndarray
        The non-empty ranks after packing, without padding.

    Notes
    -----
    - Zeros (empty cells) are skipped.
    - A rank equal to the last written one merges into it (rank + 1) and the write position does not move.
    - Three equal ranks give one merged and one unmerged tile: ``[1, 1, 1]`` becomes ``[2, 1]``.
    - The comparison uses the already merged rank, so ``[1, 1, 2]`` becomes ``[3]``.
    """
    result: list[int] = []
    for rank in line[line != 0]:
        if result and result[-1] == rank:
            result[-1] += 1
        else:
            result.append(int(rank))
    return asarray(result, dtype=line.dtype)


def slide_and_merge(ranks: ndarray) -> ndarray:
    """
    Pack every row of a rank matrix to the left.

    Parameters
    ----------
    ranks : ndarray
        A 2D matrix of ranks.

    Returns
    -------
    ndarray
        A new matrix with each row packed left and zero-padded on the right.
    """
    result = zeros_like(ranks)
    for i, row in enumerate(ranks):
        merged_row = merge_line(row)
        result[i, : len(merged_row)] = merged_row
    return result


def pack_ranks(ranks: Any, direction: Direction | int | str) -> ndarray:
    """
    Pack a rank matrix toward one edge.

    Parameters
    ----------
    ranks : array_like
        A square matrix of ranks, 0 for an empty cell.
    direction : Direction | int | str
        Edge to pack into, or anything ``Direction.parse`` accepts.

    Returns
    -------
    ndarray
        The packed matrix. The input is not modified.
    """
    direction = Direction.parse(direction)
    matrix = asarray(ranks, dtype=int64)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f'ranks must be a square matrix, got shape {matrix.shape}')

    rotated = rot90(matrix, k=direction.value)
    return rot90(slide_and_merge(rotated), k=-direction.value)
