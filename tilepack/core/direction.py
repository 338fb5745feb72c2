"""
Packing directions and the coordinate transform that reduces every direction to a left pack.
"""

from __future__ import annotations

from enum import Enum

# ##: Names accepted by Direction.parse, aligned on the classic 2048 action codes.
ACTIONS = {
    'left': 0,
    'up': 1,
    'top': 1,
    'right': 2,
    'down': 3,
    'bottom': 3,
}


class Direction(Enum):
    """
    Edge of the board toward which tiles are packed.

    The value of each member is the number of counter-clockwise quarter turns that bring the direction to LEFT,
    so ``numpy.rot90(board, k=direction.value)`` turns any pack into a left pack.
    """

    LEFT = 0
    TOP = 1
    RIGHT = 2
    BOTTOM = 3

    @classmethod
    def parse(cls, value: Direction | int | str) -> Direction:
        """
        Convert a member, an action code or a name into a direction.

        Parameters
        ----------
        value : Direction | int | str
            A member, its action code (0: left, 1: top, 2: right, 3: bottom) or a case-insensitive name.
            ``up`` and ``down`` are accepted as aliases of ``top`` and ``bottom``.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        ValueError
            If the value names no direction.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            code = ACTIONS.get(value.strip().lower())
            if code is None:
                raise ValueError(f'unknown direction, got {value!r}')
            return cls(code)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f'unknown direction code, got {value}') from None
        raise ValueError(f'unknown direction, got {value!r}')

    def locate(self, side_size: int, line: int, position: int) -> tuple[int, int]:
        """
        Map a canonical line coordinate to a board cell.

        The canonical frame packs every line toward position 1. Each direction turns that frame into a row or a
        column of the board, mirrored when the target edge is on the high-index side.

        Parameters
        ----------
        side_size : int
            Side of the board.
        line : int
            Line number, in [1, side_size].
        position : int
            Position along the line, in [1, side_size]; position 1 touches the target edge.

        Returns
        -------
        tuple[int, int]
            Zero-based (row, column) of the cell.

        Notes
        -----
        No bound checks are made here; the board only calls this with in-range values.
        """
        return _LOCATORS[self](side_size, line, position)


def _locate_left(side_size: int, line: int, position: int) -> tuple[int, int]:
    return line - 1, position - 1


def _locate_right(side_size: int, line: int, position: int) -> tuple[int, int]:
    # ##: Symmetry on a vertical axis.
    return line - 1, side_size - position


def _locate_top(side_size: int, line: int, position: int) -> tuple[int, int]:
    # ##: Transpose.
    return position - 1, line - 1


def _locate_bottom(side_size: int, line: int, position: int) -> tuple[int, int]:
    # ##: Transpose, then symmetry on a horizontal axis.
    return side_size - position, line - 1


_LOCATORS = {
    Direction.LEFT: _locate_left,
    Direction.RIGHT: _locate_right,
    Direction.TOP: _locate_top,
    Direction.BOTTOM: _locate_bottom,
}
