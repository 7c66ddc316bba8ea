from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .board import Board, Color
from .config import debug_enabled
from .coord import Coord
from .errors import HiveError
from .hive import one_hive_movable_pieces, pillbug_throws, spawn_locations
from .moves import available_moves, piece_moves
from .notation import board_from_json


def _parse_coord(text: str) -> Coord:
    """Parses 'q,r' or 'q r'."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.strip().split(sep) if t != '']
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f'expected q,r but got {text!r}')
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected q,r but got {text!r}') from None


def _load_board(path: str) -> Board:
    if path == '-':
        data = json.load(sys.stdin)
    else:
        with open(path, 'r', encoding='utf-8') as fh:
            data = json.load(fh)
    return board_from_json(data)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Hive rules oracle: legal moves, lifts, placements and pillbug throws')
    parser.add_argument('board', help="JSON board file, or '-' for stdin")
    parser.add_argument('--moves', type=_parse_coord, metavar='Q,R', help='List destinations for the piece at Q,R')
    parser.add_argument('--insect', default=None, help='Move the piece at --moves as this insect instead of its own kind')
    parser.add_argument('--movable', action='store_true', help='List pieces that can be lifted without splitting the hive')
    parser.add_argument('--spawn', choices=[c.value for c in Color], help='List placement cells for a color')
    parser.add_argument('--throws', type=_parse_coord, metavar='Q,R', help='List throws for the pillbug at Q,R')
    parser.add_argument('--show', action='store_true', help='Print the board')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    debug = debug_enabled()

    try:
        board = _load_board(args.board)
    except (OSError, ValueError) as e:
        print(f'error: could not read board: {e}')
        return 1
    if debug:
        print(f'[hive] loaded {len(board)} stacks from {args.board}')

    if args.show:
        print(board.pretty())

    try:
        if args.moves is not None:
            if args.insect:
                dests = available_moves(board, args.insect, args.moves)
            else:
                dests = piece_moves(board, args.moves)
            print(f'Moves from {args.moves}:', sorted(dests))
        if args.movable:
            print('Movable pieces:', sorted(one_hive_movable_pieces(board)))
        if args.spawn:
            print(f'Spawn locations for {args.spawn}:', sorted(spawn_locations(board, Color(args.spawn))))
        if args.throws is not None:
            print(f'Pillbug throws from {args.throws}:', sorted(pillbug_throws(board, args.throws)))
    except HiveError as e:
        if debug:
            print(f'[hive] {type(e).__name__}: {e}')
        print(f'error: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
