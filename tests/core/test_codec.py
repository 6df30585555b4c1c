"""Tests for the wire codec."""

from datetime import datetime

import pytest

from sudokudj.core.board import Board
from sudokudj.core.cell import EMPTY_CELL, Cell, CellStatus
from sudokudj.core.codec import (
    decode_board,
    decode_cell,
    decode_puzzle,
    decode_summaries,
    decode_summary,
    encode_board,
    encode_cell,
    encode_cells,
)
from sudokudj.core.coords import iter_coords


def _sparse(**cells: dict) -> dict:
    return {"cells": {key.lstrip("k"): value for key, value in cells.items()}}


_VALUED_STATUSES = (
    CellStatus.STATIC,
    CellStatus.USER,
    CellStatus.CORRECT,
    CellStatus.WRONG,
)


def _full_board() -> Board:
    board = Board.empty()
    for coord in iter_coords():
        row, col = coord
        value = (row * 3 + row // 3 + col) % 9 + 1
        status = _VALUED_STATUSES[(row + col) % len(_VALUED_STATUSES)]
        board = board.with_cell(row, col, Cell(value, (), status))
    return board


def _pencilled_board() -> Board:
    board = Board.empty()
    for coord in iter_coords():
        row, col = coord
        notes = tuple(sorted({row % 9 + 1, col % 9 + 1}))
        board = board.with_cell(row, col, Cell(0, notes))
    return board


class TestDecodeCell:
    def test_full_record(self) -> None:
        raw = {"value": 5, "notes": [], "status": "s"}
        assert decode_cell(raw) == Cell(5, (), CellStatus.STATIC)

    def test_notes_are_sorted_and_deduplicated(self) -> None:
        raw = {"value": 0, "notes": [7, 3, 7, 12, "x"], "status": ""}
        assert decode_cell(raw).notes == (3, 7)

    def test_unknown_status_is_derived_from_value(self) -> None:
        assert decode_cell({"value": 4, "status": "?"}).status is CellStatus.USER
        assert decode_cell({"value": 0, "status": "?"}).status is CellStatus.EMPTY

    def test_missing_fields_default(self) -> None:
        assert decode_cell({}) == EMPTY_CELL

    def test_bare_integer(self) -> None:
        assert decode_cell(6) == Cell(6)
        assert decode_cell(6.0) == Cell(6)

    @pytest.mark.parametrize("raw", [None, "5", True, 5.5, 42])
    def test_garbage_degrades_to_empty(self, raw: object) -> None:
        assert decode_cell(raw).value == 0


class TestDecodeBoard:
    def test_sparse_payload(self) -> None:
        payload = _sparse(
            k01={"value": 5, "notes": [], "status": "s"},
            k81={"value": 0, "notes": [1, 2], "status": ""},
        )
        board = decode_board(payload)
        assert board.cell(0, 0) == Cell(5, (), CellStatus.STATIC)
        assert board.cell(8, 8) == Cell(0, (1, 2), CellStatus.EMPTY)
        assert board.cell(4, 4) == EMPTY_CELL

    def test_bare_sparse_mapping(self) -> None:
        board = decode_board({"05": {"value": 3, "notes": [], "status": "u"}})
        assert board.cell(0, 4) == Cell(3, (), CellStatus.USER)

    def test_malformed_keys_are_skipped(self) -> None:
        payload = _sparse(
            k00={"value": 1},
            k99={"value": 2},
            k10={"value": 3, "status": "u"},
        )
        payload["cells"]["abc"] = {"value": 4}
        board = decode_board(payload)
        assert board.cell(1, 0).value == 3
        assert sum(1 for _c, cell in board.items() if cell.value) == 1

    def test_legacy_dense_grid(self) -> None:
        grid = [[0] * 9 for _ in range(9)]
        grid[0][1] = 5
        grid[2][2] = {"value": 7, "notes": [], "status": "s"}
        board = decode_board(grid)
        assert board.cell(0, 1) == Cell(5, (), CellStatus.EMPTY)
        assert board.cell(2, 2) == Cell(7, (), CellStatus.STATIC)

    def test_short_dense_grid_is_padded(self) -> None:
        board = decode_board([[1, 2]])
        assert board.cell(0, 1).value == 2
        assert board.cell(8, 8) == EMPTY_CELL

    @pytest.mark.parametrize(
        "payload", [None, "board", 7, [], [1, 2, 3], {"cells": None}, {"cells": []}]
    )
    def test_unusable_payload_gives_empty_board(self, payload: object) -> None:
        assert decode_board(payload) == Board.empty()


class TestEncode:
    def test_encode_cell(self) -> None:
        assert encode_cell(Cell(0, (2, 8))) == {
            "value": 0,
            "notes": [2, 8],
            "status": "",
        }
        assert encode_cell(Cell(5, (), CellStatus.STATIC))["status"] == "s"

    def test_value_without_status_is_sent_as_user(self) -> None:
        assert encode_cell(Cell(5))["status"] == "u"

    def test_encode_cells_covers_every_key(self) -> None:
        cells = encode_cells(Board.empty())
        assert len(cells) == 81
        assert "01" in cells and "81" in cells

    def test_encode_board_body(self) -> None:
        board = Board.empty().with_cell(0, 4, Cell(5, (), CellStatus.USER))
        body = encode_board(board, "abc", 3)
        assert body["uuid"] == "abc"
        assert body["difficulty"] == 3
        assert body["cells"]["05"] == {"value": 5, "notes": [], "status": "u"}

    @pytest.mark.parametrize(
        "board",
        [
            Board.empty(),
            *(
                Board.empty().with_cell(4, 7, Cell(6, (), status))
                for status in _VALUED_STATUSES
            ),
            Board.empty().with_cell(3, 3, Cell(0, (1, 9))),
            _full_board(),
            _pencilled_board(),
        ],
        ids=[
            "empty",
            *(status.name.lower() for status in _VALUED_STATUSES),
            "notes",
            "full",
            "all-notes",
        ],
    )
    def test_encoded_board_decodes_to_same_board(self, board: Board) -> None:
        assert decode_board(encode_board(board, "x", 1)) == board


class TestDecodePuzzle:
    def test_reads_uuid_board_and_difficulty(self) -> None:
        payload = {"uuid": "u-1", "difficulty": 3, "cells": {"01": {"value": 2}}}
        record = decode_puzzle(payload)
        assert record.id == "u-1"
        assert record.difficulty == 3
        assert record.board.cell(0, 0).value == 2

    def test_falls_back_to_id_field(self) -> None:
        assert decode_puzzle({"id": "i-1", "cells": {}}).id == "i-1"

    def test_missing_identifier(self) -> None:
        record = decode_puzzle({"cells": {}})
        assert record.id is None
        assert record.board == Board.empty()

    def test_non_mapping_payload(self) -> None:
        record = decode_puzzle(None)
        assert record.id is None
        assert record.board == Board.empty()


class TestDecodeSummaries:
    def test_full_entry(self) -> None:
        summary = decode_summary(
            {
                "uuid": "0123456789",
                "shortId": "0123",
                "difficulty": 4,
                "date": "2024-03-01T10:00:00+00:00",
            }
        )
        assert summary is not None
        assert summary.id == "0123456789"
        assert summary.short_id == "0123"
        assert summary.difficulty == 4
        expected = datetime.fromisoformat("2024-03-01T10:00:00+00:00")
        assert summary.created_at == expected

    def test_defaults_for_missing_fields(self) -> None:
        summary = decode_summary({"id": "abcdefghijkl", "createdAt": "bad"})
        assert summary is not None
        assert summary.short_id == "abcdefgh"
        assert summary.difficulty == 0
        assert summary.created_at is None

    def test_created_at_fallback(self) -> None:
        summary = decode_summary({"uuid": "a", "createdAt": "2024-01-02T00:00:00"})
        assert summary is not None
        assert summary.created_at == datetime(2024, 1, 2)

    def test_listing_keeps_order_and_drops_bad_entries(self) -> None:
        payload = [
            {"uuid": "b", "difficulty": 2},
            "junk",
            {"difficulty": 1},
            {"uuid": "a", "difficulty": 1},
        ]
        assert [s.id for s in decode_summaries(payload)] == ["b", "a"]

    @pytest.mark.parametrize("payload", [None, {}, "x", {"puzzles": []}])
    def test_non_list_listing_is_empty(self, payload: object) -> None:
        assert decode_summaries(payload) == []
