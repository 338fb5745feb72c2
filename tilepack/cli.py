# -*- coding: utf-8 -*-
"""
Replay a sequence of turns on a rank grid.

Example
-------
    python -m tilepack --board "1,2,3;1,1,0;0,0,3" --moves bottom
"""
import logging
from argparse import ArgumentParser
from typing import Sequence

from numpy import ndarray

from tilepack.addons.config import DEFAULT_SIDE_SIZE, LOG_FORMAT, BoardConfiguration
from tilepack.core import Board, Direction
from tilepack.utils import format_ranks, log_board, parse_ranks

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='tilepack', description='Pack a rank grid toward a sequence of edges.')
    parser.add_argument('--board', type=str, default=None, help='rows separated by ";", ranks by ","; 0 is empty')
    parser.add_argument('--size', type=int, default=None, help=f'side of an empty board (default {DEFAULT_SIDE_SIZE})')
    parser.add_argument('--moves', nargs='*', default=[], help='left, right, top (up) or bottom (down)')
    parser.add_argument('--log-level', type=str.upper, default='INFO', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def replay(board: Board, moves: Sequence[Direction]) -> ndarray:
    """
    Play every move on the board, one turn each.

    Parameters
    ----------
    board : Board
        The board to play on, modified in place.
    moves : Sequence[Direction]
        Directions to pack into, in order.

    Returns
    -------
    ndarray
        The ranks of the board after the last turn.
    """
    log_board(board, logger, 'Before')
    for direction in moves:
        board.play(direction)
        log_board(board, logger, f'After {direction.name}')
    return board.ranks()


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    try:
        ranks = parse_ranks(args.board) if args.board is not None else None
        if ranks is not None and args.size is not None and args.size != ranks.shape[0]:
            raise ValueError(f'--size {args.size} does not match the {ranks.shape[0]}x{ranks.shape[0]} board')
        if ranks is not None:
            side_size = ranks.shape[0]
        else:
            side_size = args.size if args.size is not None else DEFAULT_SIDE_SIZE
        configuration = BoardConfiguration(
            side_size=side_size,
            log_level=args.log_level,
        )
        board = configuration.build_board()
        if ranks is not None:
            board.load_ranks(ranks)
        moves = [Direction.parse(move) for move in args.moves]
    except ValueError as error:
        parser.error(str(error))

    print(format_ranks(replay(board, moves)))
    return 0
