from __future__ import annotations

from typing import Any, Dict, Tuple

from flask import Flask, jsonify, request

from game import (
    Color,
    HiveError,
    available_moves,
    board_from_json,
    board_to_json,
    coord_from_json,
    coord_to_json,
    coords_to_json,
    one_hive_movable_pieces,
    piece_moves,
    pillbug_throws,
    spawn_locations,
)
from hive_core.config import debug_enabled, env_flag, server_port

app = Flask(__name__)


def _body(*required: str) -> Dict[str, Any]:
    """Parsed JSON body; raises ValueError naming the first missing required field."""
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        body = {}
    for name in required:
        if name not in body:
            raise ValueError(f"missing field: {name}")
    return body


def _bad_request(message: str) -> Tuple[Any, int]:
    if debug_enabled():
        print(f"[hive] {request.path}: {message}")
    return jsonify({"ok": False, "error": message}), 400


@app.errorhandler(HiveError)
def _rules_error(e: HiveError) -> Tuple[Any, int]:
    return _bad_request(str(e))


@app.errorhandler(ValueError)
def _value_error(e: ValueError) -> Tuple[Any, int]:
    return _bad_request(f"bad request: {e}")


# ---------- Rules API ----------

@app.post("/api/moves")
def api_moves() -> Any:
    body = _body("board", "coord")
    board = board_from_json(body["board"])
    coord = coord_from_json(body["coord"])
    insect = body.get("insect")
    if insect:
        moves = available_moves(board, insect, coord)
    else:
        moves = piece_moves(board, coord)
    return jsonify({"ok": True, "moves": coords_to_json(moves)})


@app.post("/api/movable")
def api_movable() -> Any:
    board = board_from_json(_body("board")["board"])
    return jsonify({"ok": True, "movable": coords_to_json(one_hive_movable_pieces(board))})


@app.post("/api/spawn")
def api_spawn() -> Any:
    body = _body("board", "color")
    board = board_from_json(body["board"])
    color = Color(str(body["color"]))
    return jsonify({"ok": True, "spawn": coords_to_json(spawn_locations(board, color))})


@app.post("/api/throws")
def api_throws() -> Any:
    body = _body("board", "coord")
    board = board_from_json(body["board"])
    coord = coord_from_json(body["coord"])
    throws = [[coord_to_json(src), coord_to_json(dst)] for src, dst in sorted(pillbug_throws(board, coord))]
    return jsonify({"ok": True, "throws": throws})


@app.post("/api/apply")
def api_apply() -> Any:
    body = _body("board", "from", "to")
    board = board_from_json(body["board"])
    frm = coord_from_json(body["from"])
    to = coord_from_json(body["to"])
    return jsonify({"ok": True, "board": board_to_json(board.apply_move(frm, to))})


@app.post("/api/pretty")
def api_pretty() -> Any:
    board = board_from_json(_body("board")["board"])
    return jsonify({"ok": True, "text": board.pretty()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    debug = env_flag("FLASK_DEBUG") or env_flag("DEBUG")
    app.run(host="0.0.0.0", port=server_port(), debug=debug)
