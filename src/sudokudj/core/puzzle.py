"""Puzzle metadata records exchanged with the remote service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from sudokudj.core.board import Board

DEFAULT_SHORT_ID_LENGTH = 8


def short_id_for(puzzle_id: str, length: int = DEFAULT_SHORT_ID_LENGTH) -> str:
    """Display prefix of a puzzle identifier."""
    return puzzle_id[:length]


@dataclass(frozen=True, slots=True)
class PuzzleSummary:
    """One entry of the puzzle list."""

    id: str
    short_id: str
    difficulty: int
    created_at: datetime | None = None

    @classmethod
    def synthesize(
        cls,
        puzzle_id: str,
        difficulty: int,
        *,
        short_id_length: int = DEFAULT_SHORT_ID_LENGTH,
        now: datetime | None = None,
    ) -> PuzzleSummary:
        """Build the optimistic list entry for a freshly generated puzzle."""
        return cls(
            id=puzzle_id,
            short_id=short_id_for(puzzle_id, short_id_length),
            difficulty=difficulty,
            created_at=now or datetime.now(UTC),
        )

    @property
    def date_display(self) -> str:
        if self.created_at is None:
            return ""
        return self.created_at.astimezone().strftime("%Y-%m-%d")


@dataclass(frozen=True, slots=True)
class PuzzleRecord:
    """A decoded puzzle: identifier plus its full board."""

    id: str | None
    board: Board
    difficulty: int | None = None
