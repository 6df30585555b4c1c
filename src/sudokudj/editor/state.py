"""Editor state value.

:class:`EditorState` is immutable; every change produces a new instance via
:func:`sudokudj.editor.reducer.reduce`.  Anything a view needs that can be
computed from it (highlight marks, button enablement) is derived on demand
rather than stored.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from sudokudj.core.board import Board
from sudokudj.core.coords import Coord
from sudokudj.core.puzzle import PuzzleSummary


class MessageKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class TransientMessage:
    """Short-lived status line; cleared by the notifier after a delay."""

    text: str
    kind: MessageKind = MessageKind.SUCCESS


@dataclass(frozen=True, slots=True)
class PendingDelete:
    """A delete the user asked for but has not confirmed yet."""

    puzzle_id: str
    short_id: str


@dataclass(frozen=True, slots=True)
class EditorState:
    """Everything the editor shows, in one value."""

    board: Board | None = None
    puzzle_id: str | None = None
    difficulty: int = 1
    puzzles: tuple[PuzzleSummary, ...] = ()

    # UI-only
    selected: Coord | None = None
    highlighted: int | None = None
    notes_mode: bool = False
    show_puzzle_list: bool = False
    pending_delete: PendingDelete | None = None
    busy: bool = False
    error: str | None = None
    message: TransientMessage | None = None

    @property
    def has_board(self) -> bool:
        return self.board is not None

    @property
    def can_save(self) -> bool:
        return not self.busy and self.board is not None and self.puzzle_id is not None

    @property
    def can_validate(self) -> bool:
        return not self.busy and self.board is not None

    def evolve(self, **changes: object) -> EditorState:
        return replace(self, **changes)  # type: ignore[arg-type]
