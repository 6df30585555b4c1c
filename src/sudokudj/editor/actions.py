"""Actions understood by :func:`sudokudj.editor.reducer.reduce`.

Two families: user interactions (dispatched by the views and the input
filter) and remote results (dispatched by :class:`PuzzleSync` once the
service has answered).
"""

from __future__ import annotations

from dataclasses import dataclass

from sudokudj.core.board import Board
from sudokudj.core.puzzle import PuzzleSummary
from sudokudj.editor.state import MessageKind

# ── User interaction ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CellClicked:
    row: int
    col: int


@dataclass(frozen=True, slots=True)
class DigitEntered:
    """Digit key pressed while a cell is selected."""

    digit: int


@dataclass(frozen=True, slots=True)
class CellCleared:
    """Delete/Backspace pressed while a cell is selected."""


@dataclass(frozen=True, slots=True)
class CellTextEntered:
    """Raw text typed into a cell editor (``""`` clears)."""

    row: int
    col: int
    text: str


@dataclass(frozen=True, slots=True)
class NoteClicked:
    row: int
    col: int
    digit: int


@dataclass(frozen=True, slots=True)
class NotesModeToggled:
    pass


@dataclass(frozen=True, slots=True)
class OutsideClicked:
    pass


@dataclass(frozen=True, slots=True)
class DifficultyChanged:
    difficulty: int


@dataclass(frozen=True, slots=True)
class PuzzleListToggled:
    pass


@dataclass(frozen=True, slots=True)
class DeleteRequested:
    puzzle_id: str
    short_id: str


@dataclass(frozen=True, slots=True)
class DeleteCancelled:
    pass


# ── Notifications ────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class MessageShown:
    text: str
    kind: MessageKind


@dataclass(frozen=True, slots=True)
class MessageCleared:
    pass


# ── Remote lifecycle ─────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class OperationStarted:
    pass


@dataclass(frozen=True, slots=True)
class OperationFinished:
    pass


@dataclass(frozen=True, slots=True)
class OperationFailed:
    """Record a user-visible error and leave the busy state."""

    error: str


@dataclass(frozen=True, slots=True)
class PuzzlesListed:
    puzzles: tuple[PuzzleSummary, ...]


@dataclass(frozen=True, slots=True)
class PuzzleGenerated:
    board: Board
    puzzle_id: str | None
    summary: PuzzleSummary | None


@dataclass(frozen=True, slots=True)
class PuzzleLoaded:
    board: Board
    puzzle_id: str


@dataclass(frozen=True, slots=True)
class BoardReplaced:
    """Server-authoritative board returned by save or validate."""

    board: Board


@dataclass(frozen=True, slots=True)
class PuzzleDeleted:
    puzzle_id: str


Action = (
    CellClicked
    | DigitEntered
    | CellCleared
    | CellTextEntered
    | NoteClicked
    | NotesModeToggled
    | OutsideClicked
    | DifficultyChanged
    | PuzzleListToggled
    | DeleteRequested
    | DeleteCancelled
    | MessageShown
    | MessageCleared
    | OperationStarted
    | OperationFinished
    | OperationFailed
    | PuzzlesListed
    | PuzzleGenerated
    | PuzzleLoaded
    | BoardReplaced
    | PuzzleDeleted
)
