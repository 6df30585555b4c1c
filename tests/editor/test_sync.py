"""Tests for PuzzleSync orchestration against an in-memory service."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from sudokudj.core.board import Board
from sudokudj.core.cell import Cell, CellStatus
from sudokudj.core.coords import iter_coords, to_linear_key
from sudokudj.core.puzzle import PuzzleSummary
from sudokudj.editor.actions import (
    CellClicked,
    CellTextEntered,
    DeleteRequested,
    DigitEntered,
)
from sudokudj.editor.state import EditorState, MessageKind
from sudokudj.editor.store import EditorStore
from sudokudj.editor.sync import (
    ERR_DELETE,
    ERR_GENERATE,
    ERR_LOAD,
    ERR_NOTHING_TO_SAVE,
    ERR_NOTHING_TO_VALIDATE,
    ERR_SAVE,
    MSG_DELETE_FAILED,
    MSG_DELETED,
    MSG_SAVE_FAILED,
    MSG_SAVED,
    MSG_STARTUP_FAILED,
    MSG_STARTUP_LOADED,
    PuzzleSync,
)
from sudokudj.remote.client import PuzzleServiceError


def _generated_cells() -> dict[str, dict[str, Any]]:
    cells = {}
    for row, col in iter_coords():
        if row == col:
            cells[to_linear_key(row, col)] = {
                "value": row + 1,
                "notes": [],
                "status": "s",
            }
        else:
            cells[to_linear_key(row, col)] = {"value": 0, "notes": [], "status": ""}
    return cells


class _FakeService:
    def __init__(self, listing: list[dict[str, Any]] | None = None) -> None:
        self.listing = list(listing or [])
        self.puzzles: dict[str, dict[str, Any]] = {}
        self.responses: dict[str, Any] = {}
        self.failing: set[str] = set()
        self.calls: list[tuple[str, Any]] = []
        self._counter = 0

    def _enter(self, name: str, arg: Any = None) -> None:
        self.calls.append((name, arg))
        if name in self.failing:
            raise PuzzleServiceError(f"{name} failed")

    def call_names(self) -> list[str]:
        return [name for name, _arg in self.calls]

    def list_puzzles(self) -> Any:
        self._enter("list")
        return self.responses.get("list", list(self.listing))

    def create_puzzle(self, difficulty: int) -> Any:
        self._enter("create", difficulty)
        self._counter += 1
        puzzle_id = f"generated-{self._counter:04d}-0000"
        record = {
            "uuid": puzzle_id,
            "cells": _generated_cells(),
            "difficulty": difficulty,
        }
        self.puzzles[puzzle_id] = record
        return record

    def get_puzzle(self, puzzle_id: str) -> Any:
        self._enter("get", puzzle_id)
        if puzzle_id not in self.puzzles:
            raise PuzzleServiceError("HTTP 404", status_code=404)
        return self.puzzles[puzzle_id]

    def save_puzzle(self, puzzle_id: str, body: dict[str, Any]) -> Any:
        self._enter("save", (puzzle_id, body))
        return self.responses.get("save", body)

    def check_puzzle(self, puzzle_id: str | None, body: dict[str, Any]) -> Any:
        self._enter("check", (puzzle_id, body))
        return self.responses.get("check", body)

    def delete_puzzle(self, puzzle_id: str) -> Any:
        self._enter("delete", puzzle_id)
        self.puzzles.pop(puzzle_id, None)
        self.listing = [p for p in self.listing if p.get("uuid") != puzzle_id]
        return None


class _ImmediateRunner:
    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[str], None],
    ) -> None:
        try:
            result = call()
        except Exception as exc:
            on_failure(str(exc))
            return
        on_success(result)


class _DeferredRunner:
    def __init__(self) -> None:
        self.pending: list[tuple[Callable[[], Any], Any, Any]] = []

    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[str], None],
    ) -> None:
        self.pending.append((call, on_success, on_failure))

    def resolve(self, index: int = 0) -> None:
        call, on_success, on_failure = self.pending.pop(index)
        try:
            result = call()
        except Exception as exc:
            on_failure(str(exc))
            return
        on_success(result)


class _Harness:
    def __init__(
        self,
        service: _FakeService | None = None,
        *,
        state: EditorState | None = None,
        runner: Any = None,
    ) -> None:
        self.service = service or _FakeService()
        self.store = EditorStore(state)
        self.runner = runner or _ImmediateRunner()
        self.messages: list[tuple[str, MessageKind]] = []
        self.sync = PuzzleSync(
            store=self.store,
            service=self.service,
            runner=self.runner,
            notify=lambda text, kind: self.messages.append((text, kind)),
        )

    @property
    def state(self) -> EditorState:
        return self.store.state


def _editing_state(**changes: Any) -> EditorState:
    board = (
        Board.empty()
        .with_cell(0, 0, Cell(5, (), CellStatus.STATIC))
        .with_cell(0, 4, Cell(3, (), CellStatus.USER))
    )
    return EditorState(board=board, puzzle_id="p-1", difficulty=2).evolve(**changes)


class TestGenerate:
    def test_generate_on_empty_list(self) -> None:
        h = _Harness()
        h.sync.generate(3)

        state = h.state
        assert len(state.puzzles) == 1
        assert state.puzzles[0].difficulty == 3
        assert state.puzzles[0].id == state.puzzle_id
        assert state.puzzle_id is not None
        assert state.puzzles[0].short_id == state.puzzle_id[:8]
        assert state.board is not None
        for _coord, cell in state.board.items():
            assert (cell.is_static and cell.value) or (
                cell.status == CellStatus.EMPTY and cell.value == 0
            )
        assert not state.busy
        assert state.error is None

    def test_uses_state_difficulty_by_default(self) -> None:
        h = _Harness(state=EditorState(difficulty=6))
        h.sync.generate()
        assert h.service.calls == [("create", 6)]

    def test_difficulty_passed_through_unclamped(self) -> None:
        h = _Harness()
        h.sync.generate(12)
        assert h.service.calls == [("create", 12)]
        assert h.state.puzzles[0].difficulty == 12

    def test_failure_sets_error(self) -> None:
        service = _FakeService()
        service.failing.add("create")
        h = _Harness(service)
        h.sync.generate(1)
        assert h.state.error == ERR_GENERATE
        assert not h.state.busy
        assert h.state.board is None

    def test_new_entry_goes_first(self) -> None:
        old = PuzzleSummary("old-puzzle", "old-puzz", 1)
        h = _Harness(state=EditorState(puzzles=(old,)))
        h.sync.generate(2)
        assert [p.id for p in h.state.puzzles][1:] == ["old-puzzle"]


class TestLoad:
    def test_static_clue_is_locked(self) -> None:
        service = _FakeService()
        service.puzzles["abc"] = {
            "uuid": "abc",
            "cells": {"01": {"value": 5, "notes": [], "status": "s"}},
        }
        h = _Harness(service)
        h.sync.load("abc")

        assert h.state.puzzle_id == "abc"
        assert h.state.board is not None
        assert h.state.board.cell(0, 0) == Cell(5, (), CellStatus.STATIC)

        h.store.dispatch(CellTextEntered(0, 0, "7"))
        h.store.dispatch(CellClicked(0, 0))
        h.store.dispatch(DigitEntered(7))
        assert h.state.board.cell(0, 0).value == 5

    def test_load_hides_puzzle_list(self) -> None:
        service = _FakeService()
        service.puzzles["abc"] = {"uuid": "abc", "cells": {}}
        h = _Harness(service, state=EditorState(show_puzzle_list=True))
        h.sync.load("abc")
        assert not h.state.show_puzzle_list

    def test_failure_keeps_current_board(self) -> None:
        h = _Harness(state=_editing_state())
        board = h.state.board
        h.sync.load("missing")
        assert h.state.error == ERR_LOAD
        assert h.state.board is board
        assert h.state.puzzle_id == "p-1"


class TestSave:
    def test_requires_board_and_id(self) -> None:
        h = _Harness()
        h.sync.save()
        assert h.state.error == ERR_NOTHING_TO_SAVE
        assert h.service.calls == []

        h = _Harness(state=_editing_state(puzzle_id=None))
        h.sync.save()
        assert h.state.error == ERR_NOTHING_TO_SAVE
        assert h.service.calls == []

    def test_sends_encoded_board(self) -> None:
        h = _Harness(state=_editing_state())
        h.sync.save()

        assert len(h.service.calls) == 1
        name, (puzzle_id, body) = h.service.calls[0]
        assert name == "save"
        assert puzzle_id == "p-1"
        assert body["uuid"] == "p-1"
        assert body["difficulty"] == 2
        assert body["cells"]["05"] == {"value": 3, "notes": [], "status": "u"}
        assert h.messages == [(MSG_SAVED, MessageKind.SUCCESS)]

    def test_server_board_wins(self) -> None:
        service = _FakeService()
        service.responses["save"] = {
            "uuid": "p-1",
            "cells": {"05": {"value": 3, "notes": [], "status": "c"}},
        }
        h = _Harness(service, state=_editing_state())
        h.sync.save()
        assert h.state.board is not None
        assert h.state.board.cell(0, 4).status == CellStatus.CORRECT
        assert h.state.board.cell(0, 0).value == 0

    def test_failure_reports_and_notifies(self) -> None:
        service = _FakeService()
        service.failing.add("save")
        h = _Harness(service, state=_editing_state())
        board = h.state.board
        h.sync.save()
        assert h.state.error == ERR_SAVE
        assert h.state.board is board
        assert h.messages == [(MSG_SAVE_FAILED, MessageKind.ERROR)]


class TestValidate:
    def test_wrong_mark_then_edit_resets_status(self) -> None:
        service = _FakeService()
        service.responses["check"] = {
            "uuid": "p-1",
            "cells": {
                "01": {"value": 5, "notes": [], "status": "s"},
                "05": {"value": 3, "notes": [], "status": "w"},
            },
        }
        h = _Harness(service, state=_editing_state())
        h.sync.validate()

        assert h.state.board is not None
        assert h.state.board.cell(0, 4).status == CellStatus.WRONG
        assert h.service.call_names() == ["check"]

        h.store.dispatch(CellClicked(0, 4))
        h.store.dispatch(DigitEntered(6))
        assert h.state.board.cell(0, 4) == Cell(6, (), CellStatus.USER)

    def test_keeps_selection(self) -> None:
        h = _Harness(state=_editing_state())
        h.store.dispatch(CellClicked(0, 4))
        h.sync.validate()
        assert h.state.selected == (0, 4)

    def test_requires_board(self) -> None:
        h = _Harness()
        h.sync.validate()
        assert h.state.error == ERR_NOTHING_TO_VALIDATE
        assert h.service.calls == []


class TestDelete:
    def _harness(self, *, current: str) -> _Harness:
        summaries = (PuzzleSummary("X", "X", 1), PuzzleSummary("Y", "Y", 2))
        return _Harness(state=_editing_state(puzzle_id=current, puzzles=summaries))

    def test_deleting_open_puzzle_generates_replacement(self) -> None:
        h = self._harness(current="X")
        h.sync.delete_puzzle("X")

        assert "X" not in [p.id for p in h.state.puzzles]
        assert h.state.puzzle_id is not None
        assert h.state.puzzle_id != "X"
        assert h.service.call_names() == ["delete", "create"]
        assert h.messages == [(MSG_DELETED, MessageKind.SUCCESS)]

    def test_deleting_other_puzzle_keeps_current(self) -> None:
        h = self._harness(current="X")
        h.sync.delete_puzzle("Y")
        assert [p.id for p in h.state.puzzles] == ["X"]
        assert h.state.puzzle_id == "X"
        assert h.service.call_names() == ["delete"]

    def test_failure_keeps_list_and_notifies(self) -> None:
        h = self._harness(current="X")
        h.service.failing.add("delete")
        h.sync.delete_puzzle("Y")
        assert [p.id for p in h.state.puzzles] == ["X", "Y"]
        assert h.state.error == ERR_DELETE
        assert h.messages == [(MSG_DELETE_FAILED, MessageKind.ERROR)]

    def test_confirm_delete_uses_pending_request(self) -> None:
        h = self._harness(current="X")
        h.sync.confirm_delete()
        assert h.service.calls == []

        h.store.dispatch(DeleteRequested("Y", "Y"))
        h.sync.confirm_delete()
        assert h.service.calls == [("delete", "Y")]
        assert h.state.pending_delete is None


class TestStartup:
    def test_loads_most_recent_puzzle(self) -> None:
        service = _FakeService(
            listing=[
                {"uuid": "newest", "difficulty": 2},
                {"uuid": "older", "difficulty": 1},
            ]
        )
        service.puzzles["newest"] = {"uuid": "newest", "cells": {}}
        h = _Harness(service)
        h.sync.start()

        assert h.service.call_names() == ["list", "get"]
        assert h.state.puzzle_id == "newest"
        assert [p.id for p in h.state.puzzles] == ["newest", "older"]
        assert h.messages == [(MSG_STARTUP_LOADED, MessageKind.SUCCESS)]

    def test_empty_list_generates(self) -> None:
        h = _Harness()
        h.sync.start()
        assert h.service.call_names() == ["list", "create"]
        assert h.state.board is not None
        assert len(h.state.puzzles) == 1

    def test_malformed_listing_generates(self) -> None:
        service = _FakeService()
        service.responses["list"] = {"unexpected": True}
        h = _Harness(service)
        h.sync.start()
        assert h.service.call_names() == ["list", "create"]

    def test_list_failure_notifies_and_generates(self) -> None:
        service = _FakeService()
        service.failing.add("list")
        h = _Harness(service)
        h.sync.start()

        assert h.service.call_names() == ["list", "create"]
        assert h.messages == [(MSG_STARTUP_FAILED, MessageKind.ERROR)]
        assert h.state.board is not None
        assert h.state.error is None

    def test_load_failure_generates(self) -> None:
        service = _FakeService(listing=[{"uuid": "gone", "difficulty": 1}])
        h = _Harness(service)
        h.sync.start()
        assert h.service.call_names() == ["list", "get", "create"]
        assert h.state.board is not None
        assert h.state.puzzle_id != "gone"

    def test_list_refresh_failure_generates(self) -> None:
        service = _FakeService()
        service.failing.add("list")
        h = _Harness(service)
        h.sync.list_puzzles()
        assert h.service.call_names() == ["list", "create"]
        assert h.messages == []


class TestAsyncBehaviour:
    def test_busy_while_in_flight(self) -> None:
        runner = _DeferredRunner()
        h = _Harness(state=_editing_state(error="stale"), runner=runner)
        h.sync.save()
        assert h.state.busy
        assert h.state.error is None
        assert not h.state.can_save

        runner.resolve()
        assert not h.state.busy

    def test_overlapping_calls_last_resolved_wins(self) -> None:
        service = _FakeService()
        runner = _DeferredRunner()
        h = _Harness(service, state=_editing_state(), runner=runner)

        service.responses["save"] = {"cells": {"02": {"value": 1, "status": "u"}}}
        h.sync.save()
        h.sync.save()
        runner.resolve(1)
        service.responses["save"] = {"cells": {"03": {"value": 2, "status": "u"}}}
        runner.resolve(0)

        assert h.state.board is not None
        assert h.state.board.cell(0, 2).value == 2
        assert h.state.board.cell(0, 1).value == 0

    def test_closed_editor_ignores_late_results(self) -> None:
        runner = _DeferredRunner()
        h = _Harness(runner=runner)
        h.sync.generate(2)
        h.sync.close()
        runner.resolve()

        assert h.sync.is_closed
        assert h.state.board is None
        assert h.state.puzzles == ()

    def test_closed_editor_issues_no_calls(self) -> None:
        runner = _DeferredRunner()
        h = _Harness(state=_editing_state(), runner=runner)
        h.sync.close()
        h.sync.save()
        h.sync.generate()
        assert runner.pending == []
        assert not h.state.busy
