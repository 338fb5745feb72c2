"""
Tile held by a board cell.

A tile only knows its rank: the exponent of the displayed value, not the value itself.
"""

from __future__ import annotations

from numpy import integer


class Tile:
    """
    A ranked tile.

    Two tiles can be merged when their ranks are equal; the merge result has rank + 1.
    """

    def __init__(self, rank: int):
        """
        Create a tile.

        Parameters
        ----------
        rank : int
            Rank of the tile, must be at least 1.

        Raises
        ------
        ValueError
            If the rank is not an integer or is lower than 1.
        """
        if isinstance(rank, bool) or not isinstance(rank, (int, integer)):
            raise ValueError(f'rank must be an integer, got {rank!r}')
        if rank < 1:
            raise ValueError(f'rank must be >= 1, got {rank}')
        self._rank = int(rank)

    @property
    def rank(self) -> int:
        """Rank of the tile."""
        return self._rank

    def get_rank(self) -> int:
        return self._rank

    def increment_rank(self) -> None:
        """Raise the rank by one. Only the merge step of a pack calls this."""
        self._rank += 1

    def can_merge(self, other: Tile | None) -> bool:
        """Check if this tile can absorb ``other``."""
        return other is not None and self._rank == other.rank

    def copy(self) -> Tile:
        return Tile(self._rank)

    def __repr__(self) -> str:
        return f'Tile(rank={self._rank})'
