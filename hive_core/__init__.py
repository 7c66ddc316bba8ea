"""
Hive core Python package.

This package contains the pure-logic rules engine for a Hive board: given an
immutable snapshot it answers which moves, lifts, placements and pillbug throws
are legal. Modules:
- coord.py: axial hex geometry
- board.py: Insect, Color, Piece, Board
- moves.py: sliding rule and per-insect move generation
- hive.py: one-hive analysis, spawn locations, pillbug throws
- notation.py: JSON / short-code notation used by the CLI and the Flask app
"""
