from __future__ import annotations

from collections import deque
from functools import partial
from typing import Callable, Dict, List, Mapping, Optional, Set, Union

from .board import Board, Insect
from .coord import DIRECTIONS, Coord, add, flanking_pair, neighbors, sub
from .errors import EmptyCellError, UnknownInsectError

MoveFn = Callable[[Board, Coord], Set[Coord]]


def can_slide(board: Board, frm: Coord, to: Coord) -> bool:
    """
    Freedom-to-move check for a single step from `frm` to `to`.

    Flanked by cells c and d, the piece may pass only if the taller of its
    source (not counting itself) and destination is at least as tall as the
    shorter of c and d.
    """
    c, d = flanking_pair(frm, sub(to, frm))
    a_b = (board.stack_size(frm) - 1, board.stack_size(to))
    c_d = (board.stack_size(c), board.stack_size(d))
    return max(a_b) >= min(c_d)


def grasshopper_moves(board: Board, coord: Coord) -> Set[Coord]:
    """Jumps in a straight line over at least one piece to the first empty cell."""
    results: Set[Coord] = set()
    for direction in DIRECTIONS:
        cur = add(coord, direction)
        if cur not in board:
            continue
        while cur in board:
            cur = add(cur, direction)
        results.add(cur)
    return results


def beetle_moves(board: Board, coord: Coord) -> Set[Coord]:
    """
    One step in any direction, climbing onto occupied cells allowed.

    Lifting the beetle must leave the hive in one piece, and the cell it
    lands on must touch what is left.
    """
    if not board.without_top(coord).is_connected():
        return set()
    return {
        nxt for nxt in neighbors(coord)
        if can_slide(board, coord, nxt) and board.apply_move(coord, nxt).is_connected()
    }


def queen_moves(board: Board, coord: Coord) -> Set[Coord]:
    """One step onto an unoccupied cell."""
    return {nxt for nxt in beetle_moves(board, coord) if nxt not in board}


pillbug_moves = queen_moves


def ant_moves(board: Board, coord: Coord) -> Set[Coord]:
    """
    Any number of queen steps.
    Breadth-first search; each node is expanded on a board where the ant stands there.
    """
    seen: Set[Coord] = {coord}
    queue = deque([coord])
    while queue:
        node = queue.popleft()
        for child in queen_moves(board.apply_move(coord, node), node):
            if child not in seen:
                seen.add(child)
                queue.append(child)
    seen.discard(coord)
    return seen


def spider_moves(board: Board, coord: Coord) -> Set[Coord]:
    """
    Exactly three queen steps, never stepping straight back (A -> B -> A).

    A three-step loop may bring the spider back to its origin; that
    destination is kept.
    """
    paths: List[List[Coord]] = [[coord]]
    for _ in range(3):
        extended: List[List[Coord]] = []
        for path in paths:
            tip = path[-1]
            prev = path[-2] if len(path) > 1 else None
            for nxt in queen_moves(board.apply_move(coord, tip), tip):
                if nxt != prev:
                    extended.append(path + [nxt])
        paths = extended
    return {path[-1] for path in paths}


def ladybug_moves(board: Board, coord: Coord) -> Set[Coord]:
    """Two steps across the top of the hive, then one step down."""
    lifted = board.without_top(coord)
    results: Set[Coord] = set()
    for first in board.occupied_neighbors(coord):
        for second in lifted.occupied_neighbors(first):
            results.update(board.unoccupied_neighbors(second))
    return results


def mosquito_moves(
    board: Board,
    coord: Coord,
    handlers: Optional[Mapping[Insect, MoveFn]] = None,
) -> Set[Coord]:
    """Moves like any non-mosquito insect on top of an adjacent stack."""
    table = handlers if handlers is not None else MOVE_HANDLERS
    insects: Set[Insect] = set()
    for n in board.occupied_neighbors(coord):
        insects.add(board.stack(n)[-1].insect)
    insects.discard(Insect.MOSQUITO)
    results: Set[Coord] = set()
    for insect in insects:
        results |= table[insect](board, coord)
    return results


def _build_move_handlers() -> Dict[Insect, MoveFn]:
    handlers: Dict[Insect, MoveFn] = {
        Insect.GRASSHOPPER: grasshopper_moves,
        Insect.BEETLE: beetle_moves,
        Insect.QUEEN: queen_moves,
        Insect.ANT: ant_moves,
        Insect.SPIDER: spider_moves,
        Insect.LADYBUG: ladybug_moves,
        Insect.PILLBUG: pillbug_moves,
    }
    handlers[Insect.MOSQUITO] = partial(mosquito_moves, handlers=handlers)
    return handlers


MOVE_HANDLERS: Dict[Insect, MoveFn] = _build_move_handlers()


def available_moves(board: Board, insect: Union[Insect, str], coord: Coord) -> Set[Coord]:
    """Destinations for a piece of kind `insect` standing at `coord`."""
    try:
        kind = Insect(insect)
    except ValueError:
        raise UnknownInsectError(insect) from None
    return MOVE_HANDLERS[kind](board, coord)


def piece_moves(board: Board, coord: Coord) -> Set[Coord]:
    """Destinations for whatever piece is on top of `coord`."""
    piece = board.top(coord)
    if piece is None:
        raise EmptyCellError(coord)
    return available_moves(board, piece.insect, coord)
