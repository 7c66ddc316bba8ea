from __future__ import annotations

from typing import Any, Dict, Iterable, List

from .board import Board, Color, Insect, Piece
from .coord import Coord

_LETTER_TO_INSECT: Dict[str, Insect] = {i.letter: i for i in Insect}
_LETTER_TO_COLOR: Dict[str, Color] = {c.letter: c for c in Color}


def piece_code(piece: Piece) -> str:
    return piece.code


def parse_piece(code: str) -> Piece:
    """Parses a short piece code such as 'wQ' (white queen) or 'bM' (black mosquito)."""
    text = str(code).strip()
    if len(text) != 2:
        raise ValueError(f"Bad piece code: {code!r}")
    color = _LETTER_TO_COLOR.get(text[0].lower())
    insect = _LETTER_TO_INSECT.get(text[1].upper())
    if color is None or insect is None:
        raise ValueError(f"Bad piece code: {code!r}")
    return Piece(insect=insect, color=color)


def coord_to_json(c: Coord) -> List[int]:
    return [int(c[0]), int(c[1])]


def coord_from_json(obj: Any) -> Coord:
    try:
        q, r = obj
        return int(q), int(r)
    except (TypeError, ValueError):
        raise ValueError(f"Bad coordinate: {obj!r}") from None


def coords_to_json(coords: Iterable[Coord]) -> List[List[int]]:
    return [coord_to_json(c) for c in sorted(coords)]


def board_to_json(board: Board) -> Dict[str, Any]:
    return {
        "stacks": [
            {"coord": coord_to_json(coord), "pieces": [p.code for p in stack]}
            for coord, stack in sorted(board.items())
        ]
    }


def board_from_json(obj: Dict[str, Any]) -> Board:
    """Builds a board from {"stacks": [{"coord": [q, r], "pieces": ["wQ", ...]}, ...]}."""
    if not isinstance(obj, dict) or not isinstance(obj.get("stacks", []), list):
        raise ValueError("board must be an object with a 'stacks' list")
    stacks: Dict[Coord, List[Piece]] = {}
    for entry in obj.get("stacks", []):
        if not isinstance(entry, dict):
            raise ValueError(f"Bad stack entry: {entry!r}")
        coord = coord_from_json(entry.get("coord"))
        if coord in stacks:
            raise ValueError(f"Duplicate stack at {coord}")
        pieces = [parse_piece(code) for code in entry.get("pieces", [])]
        if not pieces:
            raise ValueError(f"Empty stack at {coord}")
        stacks[coord] = pieces
    return Board(stacks)
