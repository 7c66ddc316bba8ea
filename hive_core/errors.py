from __future__ import annotations

from typing import Any, Optional

from .coord import Coord


class HiveError(Exception):
    """Base class for rules engine errors."""
    pass


class EmptyCellError(HiveError):
    """A stack operation was asked to lift a piece from an empty cell."""

    def __init__(self, coord: Coord, message: Optional[str] = None):
        self.coord = coord
        self.message = message or f"No piece at {coord}"
        super().__init__(self.message)


class UnknownInsectError(HiveError):
    """The move dispatcher was handed an insect kind it does not know."""

    def __init__(self, insect: Any):
        self.insect = insect
        self.message = f"Unknown insect: {insect!r}"
        super().__init__(self.message)
