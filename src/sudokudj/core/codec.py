"""Conversion between wire payloads and :class:`Board`.

Decoding never raises: any payload that is not understood degrades to
empty cells (or an entirely empty board), so callers always receive a
well-formed 9×9 grid.

Two inbound shapes are accepted:

* sparse: ``{"cells": {"01": {"value": 5, "notes": [], "status": "s"}, ...}}``
  (a bare ``{"01": {...}}`` mapping is read the same way);
* legacy dense: a 9×9 list of raw integers or cell-like mappings.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from sudokudj.core.board import Board
from sudokudj.core.cell import EMPTY_CELL, Cell, CellStatus, classify_status
from sudokudj.core.coords import DIGITS, GRID_SIZE, from_linear_key, to_linear_key
from sudokudj.core.puzzle import (
    DEFAULT_SHORT_ID_LENGTH,
    PuzzleRecord,
    PuzzleSummary,
    short_id_for,
)

_LOGGER = logging.getLogger(__name__)

WirePayload = dict[str, Any]


# ── Scalars ──────────────────────────────────────────────────────────────────


def _as_int(raw: object) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    return None


def _decode_value(raw: object) -> int:
    value = _as_int(raw)
    if value is None or not 0 <= value <= GRID_SIZE:
        return 0
    return value


def _decode_notes(raw: object) -> tuple[int, ...]:
    if not isinstance(raw, Sequence) or isinstance(raw, str | bytes):
        return ()
    notes = {n for n in map(_as_int, raw) if n is not None and n in DIGITS}
    return tuple(sorted(notes))


def _identifier(payload: Mapping[str, Any]) -> str | None:
    for field in ("uuid", "id"):
        raw = payload.get(field)
        if isinstance(raw, str) and raw:
            return raw
    return None


def _timestamp(raw: object) -> datetime | None:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


# ── Cells ────────────────────────────────────────────────────────────────────


def decode_cell(raw: object) -> Cell:
    """Decode one cell record (or a bare integer)."""
    if isinstance(raw, Mapping):
        cell = Cell(
            value=_decode_value(raw.get("value")),
            notes=_decode_notes(raw.get("notes")),
        )
        status = CellStatus.from_wire(raw.get("status"))
        if status is None:
            status = classify_status(cell)
        return Cell(cell.value, cell.notes, status)
    value = _as_int(raw)
    if value is not None:
        return Cell(value=_decode_value(value))
    return EMPTY_CELL


def encode_cell(cell: Cell) -> dict[str, Any]:
    status = cell.status
    if status == CellStatus.EMPTY and cell.value:
        status = CellStatus.USER
    return {"value": cell.value, "notes": list(cell.notes), "status": str(status)}


# ── Boards ───────────────────────────────────────────────────────────────────


def _decode_sparse(cells: Mapping[Any, Any]) -> Board:
    rows = [[EMPTY_CELL] * GRID_SIZE for _ in range(GRID_SIZE)]
    skipped = 0
    for key, raw in cells.items():
        try:
            row, col = from_linear_key(key)
        except ValueError:
            skipped += 1
            continue
        rows[row][col] = decode_cell(raw)
    if skipped:
        _LOGGER.debug("Skipped %d malformed cell keys", skipped)
    return Board.from_cells(rows)


def _decode_dense(grid: Sequence[Any]) -> Board:
    rows = [[EMPTY_CELL] * GRID_SIZE for _ in range(GRID_SIZE)]
    for r, raw_row in enumerate(grid[:GRID_SIZE]):
        if not isinstance(raw_row, Sequence) or isinstance(raw_row, str | bytes):
            continue
        for c, raw in enumerate(raw_row[:GRID_SIZE]):
            rows[r][c] = decode_cell(raw)
    return Board.from_cells(rows)


def _is_dense(payload: object) -> bool:
    return (
        isinstance(payload, Sequence)
        and not isinstance(payload, str | bytes)
        and len(payload) > 0
        and isinstance(payload[0], Sequence)
        and not isinstance(payload[0], str | bytes)
    )


def decode_board(payload: object) -> Board:
    """Decode a board from any supported wire shape."""
    if isinstance(payload, Mapping):
        cells = payload.get("cells")
        if isinstance(cells, Mapping):
            return _decode_sparse(cells)
        if "cells" in payload:
            _LOGGER.debug("Unusable 'cells' field of type %s", type(cells).__name__)
            return Board.empty()
        return _decode_sparse(payload)
    if _is_dense(payload):
        return _decode_dense(payload)  # type: ignore[arg-type]
    _LOGGER.debug("Unrecognised board payload of type %s", type(payload).__name__)
    return Board.empty()


def encode_cells(board: Board) -> dict[str, dict[str, Any]]:
    return {
        to_linear_key(row, col): encode_cell(cell) for (row, col), cell in board.items()
    }


def encode_board(board: Board, puzzle_id: str | None, difficulty: int) -> WirePayload:
    """Build the request body shared by save and validate."""
    return {
        "uuid": puzzle_id,
        "cells": encode_cells(board),
        "difficulty": difficulty,
    }


# ── Puzzles ──────────────────────────────────────────────────────────────────


def decode_puzzle(payload: object) -> PuzzleRecord:
    """Decode a full puzzle record (identifier, board, difficulty)."""
    board = decode_board(payload)
    if not isinstance(payload, Mapping):
        return PuzzleRecord(id=None, board=board)
    return PuzzleRecord(
        id=_identifier(payload),
        board=board,
        difficulty=_as_int(payload.get("difficulty")),
    )


def decode_summary(
    raw: object, *, short_id_length: int = DEFAULT_SHORT_ID_LENGTH
) -> PuzzleSummary | None:
    if not isinstance(raw, Mapping):
        return None
    puzzle_id = _identifier(raw)
    if puzzle_id is None:
        return None
    short_id = raw.get("shortId")
    if not isinstance(short_id, str) or not short_id:
        short_id = short_id_for(puzzle_id, short_id_length)
    return PuzzleSummary(
        id=puzzle_id,
        short_id=short_id,
        difficulty=_as_int(raw.get("difficulty")) or 0,
        created_at=_timestamp(raw.get("date")) or _timestamp(raw.get("createdAt")),
    )


def decode_summaries(
    payload: object, *, short_id_length: int = DEFAULT_SHORT_ID_LENGTH
) -> list[PuzzleSummary]:
    """Decode a puzzle listing, preserving server order and dropping bad entries."""
    if not isinstance(payload, list):
        _LOGGER.debug("Puzzle listing is not a list: %s", type(payload).__name__)
        return []
    summaries = []
    for raw in payload:
        summary = decode_summary(raw, short_id_length=short_id_length)
        if summary is not None:
            summaries.append(summary)
    return summaries
