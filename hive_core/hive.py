from __future__ import annotations

from typing import Callable, Dict, List, Optional, Set, Tuple, TypeVar

from .board import Board, Color, Move
from .coord import Coord

T = TypeVar("T")


def iterate_until_fixed(f: Callable[[T], T], initial: T, max_steps: Optional[int] = None) -> T:
    """
    Applies `f` until the result stops changing.
    Raises RuntimeError if no fixed point is reached within `max_steps` applications.
    """
    accum = initial
    steps = 0
    while max_steps is None or steps < max_steps:
        nxt = f(accum)
        steps += 1
        if nxt == accum:
            return accum
        accum = nxt
    raise RuntimeError(f"No fixed point after {max_steps} steps")


def leaf_nodes(board: Board) -> List[Coord]:
    """Occupied cells with exactly one occupied neighbour."""
    return [c for c in board if len(board.occupied_neighbors(c)) == 1]


def _without_leaves(board: Board) -> Board:
    return board.without(leaf_nodes(board))


def one_hive_movable_pieces(board: Board) -> Set[Coord]:
    """
    Cells whose piece can be lifted without splitting the hive.

    Pieces with a single neighbour may move. Pieces on a cycle may move,
    except those that also touch a non-cyclic part of the board.
    """
    orig_leaves = leaf_nodes(board)
    # each pass drops at least one cell or stops
    minimal = iterate_until_fixed(_without_leaves, board, max_steps=len(board) + 1)
    # drop core cells that still touch a pruned cell
    core = [c for c in minimal if all(n in minimal for n in board.occupied_neighbors(c))]
    return set(orig_leaves) | set(core)


def spawn_locations(board: Board, color: Color) -> Set[Coord]:
    """
    Empty cells touching the hive that touch only stacks topped by `color`.

    The very first placements of a game (empty board) are handled by the caller.
    """
    by_color: Dict[Color, Set[Coord]] = {}
    for coord, stack in board.items():
        by_color.setdefault(stack[-1].color, set()).update(board.unoccupied_neighbors(coord))
    wanted = Color(color)
    results = set(by_color.get(wanted, set()))
    for other, cells in by_color.items():
        if other != wanted:
            results -= cells
    return results


def pillbug_throws(board: Board, coord: Coord) -> Set[Move]:
    """
    Special moves the pillbug at `coord` can make: (piece, destination) pairs.

    Only unstacked pieces that would not break the hive may be thrown, and
    both the piece and its destination must touch the pillbug.
    """
    movable = one_hive_movable_pieces(board)
    empty_spots = board.unoccupied_neighbors(coord)
    throws: Set[Tuple[Coord, Coord]] = set()
    for neighbor in board.occupied_neighbors(coord):
        if neighbor in movable and board.stack_size(neighbor) == 1:
            throws.update((neighbor, spot) for spot in empty_spots)
    return throws
