from __future__ import annotations

from typing import List, Tuple

Coord = Tuple[int, int]  # axial (q, r)

# Ring order: each direction is adjacent to the next one (cyclically).
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def add(c: Coord, d: Coord) -> Coord:
    return c[0] + d[0], c[1] + d[1]


def sub(c: Coord, d: Coord) -> Coord:
    return c[0] - d[0], c[1] - d[1]


def neighbors(c: Coord) -> List[Coord]:
    """Gets the six adjacent coordinates, in direction order."""
    return [add(c, d) for d in DIRECTIONS]


def flanking_pair(frm: Coord, direction: Coord) -> Tuple[Coord, Coord]:
    """
    Returns the two cells adjacent to both `frm` and `frm + direction`.
    These are the cells a piece squeezes between when it slides that way.
    """
    try:
        i = DIRECTIONS.index(direction)
    except ValueError:
        raise ValueError(f"Not a hex direction: {direction}") from None
    return add(frm, DIRECTIONS[i - 1]), add(frm, DIRECTIONS[(i + 1) % 6])


def hex_distance(a: Coord, b: Coord) -> int:
    """Number of single steps between two cells on the grid."""
    dq, dr = sub(a, b)
    return (abs(dq) + abs(dr) + abs(dq + dr)) // 2
