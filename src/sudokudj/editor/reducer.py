"""State transitions for the editor.

``reduce(state, action)`` is the single place an :class:`EditorState` is
turned into its successor.  Handlers are pure; anything that talks to the
network lives in :mod:`sudokudj.editor.sync` and feeds its results back in
as actions.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from sudokudj.core.cell import set_value, toggle_note
from sudokudj.core.coords import DIGITS, GRID_SIZE
from sudokudj.editor import actions as a
from sudokudj.editor.selection import clear_interaction, highlight_for, select
from sudokudj.editor.state import EditorState, PendingDelete, TransientMessage

_F = TypeVar("_F", bound=Callable[..., EditorState])

_HANDLERS: dict[type, Callable[..., EditorState]] = {}


def _handles(action_type: type) -> Callable[[_F], _F]:
    def register(fn: _F) -> _F:
        _HANDLERS[action_type] = fn
        return fn

    return register


def reduce(state: EditorState, action: a.Action) -> EditorState:
    """Return the state that follows *state* after *action*."""
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise TypeError(f"Unhandled editor action: {action!r}")
    return handler(state, action)


# ── Editing helpers ──────────────────────────────────────────────────────────


def _editable(state: EditorState, row: int, col: int) -> bool:
    return state.board is not None and not state.board.cell(row, col).is_static


def _set_value(state: EditorState, row: int, col: int, value: int) -> EditorState:
    assert state.board is not None
    board = state.board.update_cell(row, col, lambda cell: set_value(cell, value))
    return state.evolve(board=board)


def _toggle_note(state: EditorState, row: int, col: int, digit: int) -> EditorState:
    assert state.board is not None
    board = state.board.update_cell(row, col, lambda cell: toggle_note(cell, digit))
    return state.evolve(board=board)


# ── User interaction ─────────────────────────────────────────────────────────


@_handles(a.CellClicked)
def _on_cell_clicked(state: EditorState, action: a.CellClicked) -> EditorState:
    state = select(state, action.row, action.col)
    return highlight_for(state, action.row, action.col)


@_handles(a.DigitEntered)
def _on_digit(state: EditorState, action: a.DigitEntered) -> EditorState:
    if state.selected is None or action.digit not in DIGITS:
        return state
    row, col = state.selected
    if not _editable(state, row, col):
        return state
    if state.notes_mode:
        return _toggle_note(state, row, col, action.digit)
    state = _set_value(state, row, col, action.digit)
    return state.evolve(highlighted=action.digit)


@_handles(a.CellCleared)
def _on_cleared(state: EditorState, _action: a.CellCleared) -> EditorState:
    if state.selected is None:
        return state
    row, col = state.selected
    if not _editable(state, row, col):
        return state
    state = _set_value(state, row, col, 0)
    return state.evolve(highlighted=None)


@_handles(a.CellTextEntered)
def _on_text(state: EditorState, action: a.CellTextEntered) -> EditorState:
    if not _editable(state, action.row, action.col):
        return state
    text = action.text.strip()
    if not text:
        value = 0
    elif text.isascii() and text.isdigit():
        value = int(text)
    else:
        return state
    if not 0 <= value <= GRID_SIZE:
        return state

    if state.notes_mode and value > 0:
        return _toggle_note(state, action.row, action.col, value)
    state = _set_value(state, action.row, action.col, value)
    return highlight_for(state, action.row, action.col)


@_handles(a.NoteClicked)
def _on_note_clicked(state: EditorState, action: a.NoteClicked) -> EditorState:
    if not _editable(state, action.row, action.col) or action.digit not in DIGITS:
        return state
    if state.notes_mode:
        return _toggle_note(state, action.row, action.col, action.digit)
    # Outside notes mode a pencilled digit is promoted to the cell value.
    return _set_value(state, action.row, action.col, action.digit)


@_handles(a.NotesModeToggled)
def _on_notes_mode(state: EditorState, _action: a.NotesModeToggled) -> EditorState:
    return state.evolve(notes_mode=not state.notes_mode)


@_handles(a.OutsideClicked)
def _on_outside(state: EditorState, _action: a.OutsideClicked) -> EditorState:
    return clear_interaction(state)


@_handles(a.DifficultyChanged)
def _on_difficulty(state: EditorState, action: a.DifficultyChanged) -> EditorState:
    return state.evolve(difficulty=action.difficulty)


@_handles(a.PuzzleListToggled)
def _on_list_toggled(state: EditorState, _action: a.PuzzleListToggled) -> EditorState:
    return state.evolve(show_puzzle_list=not state.show_puzzle_list)


@_handles(a.DeleteRequested)
def _on_delete_requested(state: EditorState, action: a.DeleteRequested) -> EditorState:
    return state.evolve(pending_delete=PendingDelete(action.puzzle_id, action.short_id))


@_handles(a.DeleteCancelled)
def _on_delete_cancelled(state: EditorState, _action: a.DeleteCancelled) -> EditorState:
    return state.evolve(pending_delete=None)


# ── Notifications ────────────────────────────────────────────────────────────


@_handles(a.MessageShown)
def _on_message(state: EditorState, action: a.MessageShown) -> EditorState:
    return state.evolve(message=TransientMessage(action.text, action.kind))


@_handles(a.MessageCleared)
def _on_message_cleared(state: EditorState, _action: a.MessageCleared) -> EditorState:
    return state.evolve(message=None)


# ── Remote lifecycle ─────────────────────────────────────────────────────────


@_handles(a.OperationStarted)
def _on_started(state: EditorState, _action: a.OperationStarted) -> EditorState:
    return state.evolve(busy=True, error=None)


@_handles(a.OperationFinished)
def _on_finished(state: EditorState, _action: a.OperationFinished) -> EditorState:
    return state.evolve(busy=False)


@_handles(a.OperationFailed)
def _on_failed(state: EditorState, action: a.OperationFailed) -> EditorState:
    return state.evolve(busy=False, error=action.error)


@_handles(a.PuzzlesListed)
def _on_listed(state: EditorState, action: a.PuzzlesListed) -> EditorState:
    return state.evolve(puzzles=action.puzzles)


@_handles(a.PuzzleGenerated)
def _on_generated(state: EditorState, action: a.PuzzleGenerated) -> EditorState:
    puzzles = state.puzzles
    if action.summary is not None:
        puzzles = (action.summary, *puzzles)
    return state.evolve(
        board=action.board,
        puzzle_id=action.puzzle_id if action.puzzle_id is not None else state.puzzle_id,
        puzzles=puzzles,
        selected=None,
        highlighted=None,
    )


@_handles(a.PuzzleLoaded)
def _on_loaded(state: EditorState, action: a.PuzzleLoaded) -> EditorState:
    return state.evolve(
        board=action.board,
        puzzle_id=action.puzzle_id,
        show_puzzle_list=False,
        selected=None,
        highlighted=None,
    )


@_handles(a.BoardReplaced)
def _on_board_replaced(state: EditorState, action: a.BoardReplaced) -> EditorState:
    return state.evolve(board=action.board)


@_handles(a.PuzzleDeleted)
def _on_deleted(state: EditorState, action: a.PuzzleDeleted) -> EditorState:
    puzzles = tuple(p for p in state.puzzles if p.id != action.puzzle_id)
    puzzle_id = None if state.puzzle_id == action.puzzle_id else state.puzzle_id
    return state.evolve(puzzles=puzzles, puzzle_id=puzzle_id, pending_delete=None)
