from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Set, Tuple

from .coord import Coord, neighbors
from .errors import EmptyCellError


class Insect(str, Enum):
    QUEEN = "queen"
    ANT = "ant"
    SPIDER = "spider"
    BEETLE = "beetle"
    GRASSHOPPER = "grasshopper"
    LADYBUG = "ladybug"
    PILLBUG = "pillbug"
    MOSQUITO = "mosquito"

    @property
    def letter(self) -> str:
        return _INSECT_LETTERS[self]


class Color(str, Enum):
    WHITE = "white"  # moves first
    BLACK = "black"

    @property
    def letter(self) -> str:
        return self.value[0]


_INSECT_LETTERS: Dict[Insect, str] = {
    Insect.QUEEN: "Q",
    Insect.ANT: "A",
    Insect.SPIDER: "S",
    Insect.BEETLE: "B",
    Insect.GRASSHOPPER: "G",
    Insect.LADYBUG: "L",
    Insect.PILLBUG: "P",
    Insect.MOSQUITO: "M",
}


@dataclass(frozen=True)
class Piece:
    insect: Insect
    color: Color

    @property
    def code(self) -> str:
        """Short code such as 'wQ' or 'bM'."""
        return self.color.letter + self.insect.letter


Stack = Tuple[Piece, ...]  # bottom to top
Move = Tuple[Coord, Coord]  # (source, destination)


class Board:
    """
    Immutable snapshot of the hive: a mapping from coordinate to a non-empty stack.

    Every transform returns a new Board; an absent coordinate is an empty cell.
    """

    __slots__ = ("_stacks", "_hash")

    def __init__(self, stacks: Optional[Mapping[Coord, Iterable[Piece]]] = None) -> None:
        cells: Dict[Coord, Stack] = {}
        for coord, pieces in (stacks or {}).items():
            stack = tuple(pieces)
            if stack:
                cells[(int(coord[0]), int(coord[1]))] = stack
        self._stacks = cells
        self._hash: Optional[int] = None

    @classmethod
    def _from_cells(cls, cells: Dict[Coord, Stack]) -> 'Board':
        board = cls.__new__(cls)
        board._stacks = cells
        board._hash = None
        return board

    def __contains__(self, coord: object) -> bool:
        return coord in self._stacks

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._stacks)

    def __len__(self) -> int:
        return len(self._stacks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._stacks == other._stacks

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._stacks.items()))
        return self._hash

    def __repr__(self) -> str:
        cells = ", ".join(
            f"{coord}: [{' '.join(p.code for p in stack)}]"
            for coord, stack in sorted(self._stacks.items())
        )
        return f"Board({{{cells}}})"

    def items(self) -> Iterable[Tuple[Coord, Stack]]:
        return self._stacks.items()

    def stack(self, coord: Coord) -> Stack:
        return self._stacks.get(coord, ())

    def top(self, coord: Coord) -> Optional[Piece]:
        stack = self._stacks.get(coord)
        return stack[-1] if stack else None

    def stack_size(self, coord: Coord) -> int:
        return len(self._stacks.get(coord, ()))

    def occupied_neighbors(self, coord: Coord) -> List[Coord]:
        return [n for n in neighbors(coord) if n in self._stacks]

    def unoccupied_neighbors(self, coord: Coord) -> List[Coord]:
        return [n for n in neighbors(coord) if n not in self._stacks]

    def place(self, coord: Coord, piece: Piece) -> 'Board':
        """Returns a new board with `piece` pushed on top of `coord`."""
        cells = dict(self._stacks)
        cells[coord] = cells.get(coord, ()) + (piece,)
        return Board._from_cells(cells)

    def without_top(self, coord: Coord) -> 'Board':
        """Returns a new board with the top piece at `coord` lifted off."""
        stack = self._stacks.get(coord)
        if not stack:
            raise EmptyCellError(coord)
        cells = dict(self._stacks)
        if len(stack) > 1:
            cells[coord] = stack[:-1]
        else:
            del cells[coord]
        return Board._from_cells(cells)

    def apply_move(self, frm: Coord, to: Coord) -> 'Board':
        """Pops the top piece of `frm` and pushes it onto `to`."""
        stack = self._stacks.get(frm)
        if not stack:
            raise EmptyCellError(frm, f"Cannot move from empty cell {frm}")
        return self.without_top(frm).place(to, stack[-1])

    def without(self, coords: Iterable[Coord]) -> 'Board':
        """Returns a new board with the whole stacks at `coords` removed."""
        drop = set(coords)
        return Board._from_cells({c: s for c, s in self._stacks.items() if c not in drop})

    def is_connected(self) -> bool:
        """True if the occupied cells form a single component (an empty board is connected)."""
        if not self._stacks:
            return True
        start = next(iter(self._stacks))
        seen: Set[Coord] = {start}
        queue = deque([start])
        while queue:
            for n in self.occupied_neighbors(queue.popleft()):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return len(seen) == len(self._stacks)

    def pretty(self) -> str:
        """Generates a human-readable hex dump: top piece codes, '.' for empty cells."""
        if not self._stacks:
            return ""
        qs = [q for q, _ in self._stacks]
        rs = [r for _, r in self._stacks]
        min_q, max_q = min(qs), max(qs)
        min_r, max_r = min(rs), max(rs)
        lines: List[str] = []
        for r in range(min_r, max_r + 1):
            # Each row is shifted half a cell so that axial neighbours line up.
            row: List[str] = ["  " * (r - min_r)]
            for q in range(min_q, max_q + 1):
                piece = self.top((q, r))
                row.append(f"{piece.code}  " if piece else ".   ")
            lines.append("".join(row).rstrip())
        return "\n".join(lines)
