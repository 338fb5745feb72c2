"""
Square board hosting ranked tiles.

The board keeps two generations of its grid: the current one, which queries read, and the next one, which a pack
writes. A turn is a pack followed by a commit that promotes the next generation.
"""

from __future__ import annotations

import logging
from typing import Any

from numpy import argwhere, asarray, full, int64, integer, ndarray, zeros

from tilepack.core.direction import Direction
from tilepack.core.tile import Tile
from tilepack.utils.display import format_ranks

logger = logging.getLogger(__name__)

GENERATIONS = ('current', 'next')


def empty_grid(side_size: int) -> ndarray:
    """Allocate a grid with no tile in it."""
    return full((side_size, side_size), None, dtype=object)


class Board:
    """
    A square board of tiles with a two-generation grid.

    Coordinates are 1-based: lines and columns are in [1, side_size].
    """

    def __init__(self, side_size: int):
        """
        Create an empty board.

        Parameters
        ----------
        side_size : int
            Number of cells on a side, must be greater than 1.

        Raises
        ------
        ValueError
            If the side size is not an integer greater than 1.
        """
        if isinstance(side_size, bool) or not isinstance(side_size, int) or side_size <= 1:
            raise ValueError(f'side_size must be an integer > 1, got {side_size!r}')
        self._side_size = side_size
        self._current = empty_grid(side_size)
        self._next = empty_grid(side_size)

    @classmethod
    def from_ranks(cls, ranks: Any) -> Board:
        """
        Build a board from a square rank matrix (0 for an empty cell).

        Parameters
        ----------
        ranks : array_like
            Square matrix of non-negative ranks.

        Returns
        -------
        Board
            A board whose current generation holds the given ranks.
        """
        matrix = asarray(ranks)
        if matrix.ndim != 2:
            raise ValueError(f'ranks must be a square matrix, got shape {matrix.shape}')
        board = cls(matrix.shape[0])
        board.load_ranks(matrix)
        return board

    @property
    def side_size(self) -> int:
        """Number of cells on a side."""
        return self._side_size

    def get_side_size(self) -> int:
        return self._side_size

    def get_tile(self, line: int, column: int) -> Tile | None:
        """
        Return the tile at a given coordinate of the current generation.

        Parameters
        ----------
        line : int
            Line number, in [1, side_size].
        column : int
            Column number, in [1, side_size].

        Returns
        -------
        Tile | None
            The tile, or None if the cell is empty.

        Raises
        ------
        ValueError
            If a coordinate is not an integer or is out of the board's bounds.
        """
        self._check_bounds('line', line)
        self._check_bounds('column', column)
        return self._current[line - 1, column - 1]

    def pack_into_direction(self, direction: Direction | int | str) -> None:
        """
        Apply the only game action: pack every tile toward one edge.

        The next generation is rebuilt from scratch out of the current one, so calling this again before a
        commit discards the previous result. The current generation is left untouched.

        Parameters
        ----------
        direction : Direction | int | str
            Edge to pack into, or anything ``Direction.parse`` accepts.
        """
        direction = Direction.parse(direction)
        self._next = empty_grid(self._side_size)
        for line in range(1, self._side_size + 1):
            self._pack_line(direction, line)
        logger.debug('Packed %dx%d board into %s', self._side_size, self._side_size, direction.name)

    def commit(self) -> None:
        """
        Promote the next generation to current and start a fresh, empty next generation.

        Committing without a pack promotes an empty board.
        """
        self._current = self._next
        self._next = empty_grid(self._side_size)
        logger.debug('Committed board with %d tiles', len(self))

    def play(self, direction: Direction | int | str) -> None:
        """Play one turn: pack into ``direction`` then commit."""
        self.pack_into_direction(direction)
        self.commit()

    def load_ranks(self, ranks: Any) -> None:
        """
        Replace the current generation with tiles built from a rank matrix.

        Parameters
        ----------
        ranks : array_like
            Matrix of shape (side_size, side_size); 0 marks an empty cell, any positive value a tile of that rank.

        Raises
        ------
        ValueError
            If the matrix has the wrong shape, or holds negative or fractional ranks.

        Notes
        -----
        Meant for test setup and diagnostics. The next generation is emptied as well.
        """
        values = asarray(ranks)
        matrix = values.astype(int64)
        if (matrix != values).any():
            raise ValueError(f'ranks must be integers, got {values.tolist()}')
        if matrix.shape != (self._side_size, self._side_size):
            raise ValueError(
                f'ranks must have shape {(self._side_size, self._side_size)}, got {matrix.shape}'
            )
        if (matrix < 0).any():
            raise ValueError(f'ranks must be >= 0, got {int(matrix.min())}')

        grid = empty_grid(self._side_size)
        for row, column in argwhere(matrix):
            grid[row, column] = Tile(int(matrix[row, column]))
        self._current = grid
        self._next = empty_grid(self._side_size)
        logger.debug('Loaded %d tiles into current generation', len(self))

    def ranks(self, generation: str = 'current') -> ndarray:
        """
        Return the ranks of a generation as a matrix, 0 for an empty cell.

        Parameters
        ----------
        generation : str, optional
            Either ``current`` (default) or ``next``.

        Returns
        -------
        ndarray
            A (side_size, side_size) matrix of int64 ranks.
        """
        if generation not in GENERATIONS:
            raise ValueError(f'generation must be one of {GENERATIONS}, got {generation!r}')
        grid = self._current if generation == 'current' else self._next
        matrix = zeros((self._side_size, self._side_size), dtype=int64)
        for (row, column), tile in occupied_cells(grid):
            matrix[row, column] = tile.rank
        return matrix

    def pretty(self) -> str:
        """Human-readable dump of the current ranks, one ``line:{ranks}`` entry per line."""
        return format_ranks(self.ranks())

    def __len__(self) -> int:
        return sum(1 for _ in occupied_cells(self._current))

    def __repr__(self) -> str:
        return f'Board(side_size={self._side_size}, tiles={len(self)})'

    def _check_bounds(self, name: str, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, (int, integer)):
            raise ValueError(f'{name} must be an integer, got {index!r}')
        if not 1 <= index <= self._side_size:
            raise ValueError(f'{name} must be in [1, {self._side_size}], got {index}')

    def _read(self, grid: ndarray, direction: Direction, line: int, position: int) -> Tile | None:
        return grid[direction.locate(self._side_size, line, position)]

    def _write(self, grid: ndarray, direction: Direction, line: int, position: int, tile: Tile) -> None:
        grid[direction.locate(self._side_size, line, position)] = tile

    def _pack_line(self, direction: Direction, line: int) -> None:
        """
        Pack one line of the current generation toward position 1, writing into the next generation.

        Two consecutive tiles with the same rank are written as a single tile with rank + 1; any other tile is
        copied to the first free position. Positions go through the direction transform, so this single scan
        serves all four directions.
        """
        read_index = 1  # ##: Position of the tile to read.
        write_index = 0  # ##: Position of the last tile written, 0 when none.

        while read_index <= self._side_size:
            # ##: Find next tile.
            while read_index <= self._side_size and self._read(self._current, direction, line, read_index) is None:
                read_index += 1
            if read_index > self._side_size:
                break

            tile = self._read(self._current, direction, line, read_index)
            written = self._read(self._next, direction, line, write_index) if write_index > 0 else None
            if written is not None and written.can_merge(tile):
                # ##: The merged tile keeps its slot, so the write index does not move.
                written.increment_rank()
            else:
                write_index += 1
                self._write(self._next, direction, line, write_index, tile.copy())
            read_index += 1


def occupied_cells(grid: ndarray):
    """Yield ((row, column), tile) for every occupied cell of a grid, in row-major order."""
    for row in range(grid.shape[0]):
        for column in range(grid.shape[1]):
            tile = grid[row, column]
            if tile is not None:
                yield (row, column), tile
