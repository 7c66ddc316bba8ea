from __future__ import annotations

# Facade module that re-exports the Hive core functionality.
# Used by the Flask app and tests; single-responsibility modules live under hive_core/*.

from hive_core.board import Board, Color, Insect, Move, Piece, Stack  # noqa: F401
from hive_core.coord import (  # noqa: F401
    DIRECTIONS,
    Coord,
    add,
    flanking_pair,
    hex_distance,
    neighbors,
    sub,
)
from hive_core.errors import EmptyCellError, HiveError, UnknownInsectError  # noqa: F401
from hive_core.moves import (  # noqa: F401
    MOVE_HANDLERS,
    available_moves,
    ant_moves,
    beetle_moves,
    can_slide,
    grasshopper_moves,
    ladybug_moves,
    mosquito_moves,
    piece_moves,
    pillbug_moves,
    queen_moves,
    spider_moves,
)
from hive_core.hive import (  # noqa: F401
    iterate_until_fixed,
    leaf_nodes,
    one_hive_movable_pieces,
    pillbug_throws,
    spawn_locations,
)
from hive_core.notation import (  # noqa: F401
    board_from_json,
    board_to_json,
    coord_from_json,
    coord_to_json,
    coords_to_json,
    parse_piece,
    piece_code,
)
