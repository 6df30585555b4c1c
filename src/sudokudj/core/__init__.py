"""Core domain layer — cells, boards and the wire codec, no Qt or network.

Quick start::

    from sudokudj.core import decode_board, set_value

    board = decode_board({"cells": {"01": {"value": 5, "notes": [], "status": "s"}}})
    board = board.update_cell(0, 1, lambda cell: set_value(cell, 7))
"""

from sudokudj.core.board import Board
from sudokudj.core.cell import (
    EMPTY_CELL,
    Cell,
    CellStatus,
    classify_status,
    set_value,
    toggle_note,
)
from sudokudj.core.codec import (
    decode_board,
    decode_cell,
    decode_puzzle,
    decode_summaries,
    encode_board,
    encode_cell,
)
from sudokudj.core.coords import (
    CELL_COUNT,
    GRID_SIZE,
    KEY_WIDTH,
    Coord,
    from_linear_key,
    to_linear_key,
)
from sudokudj.core.puzzle import PuzzleRecord, PuzzleSummary, short_id_for

__all__ = [
    # Geometry
    "CELL_COUNT",
    "GRID_SIZE",
    "KEY_WIDTH",
    "Coord",
    "from_linear_key",
    "to_linear_key",
    # Values
    "Board",
    "Cell",
    "CellStatus",
    "EMPTY_CELL",
    "PuzzleRecord",
    "PuzzleSummary",
    "classify_status",
    "set_value",
    "short_id_for",
    "toggle_note",
    # Codec
    "decode_board",
    "decode_cell",
    "decode_puzzle",
    "decode_summaries",
    "encode_board",
    "encode_cell",
]
