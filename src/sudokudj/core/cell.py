"""Cell value type and its edit transitions."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from sudokudj.core.coords import DIGITS, GRID_SIZE


class CellStatus(StrEnum):
    """Cell classification.  Member values are the wire codes."""

    EMPTY = ""
    STATIC = "s"  # server-provided clue
    USER = "u"
    CORRECT = "c"  # assigned by validate only
    WRONG = "w"  # assigned by validate only

    @classmethod
    def from_wire(cls, code: object) -> CellStatus | None:
        """Return the status for *code*, or ``None`` if it is not a known code."""
        if code is None:
            return cls.EMPTY
        try:
            return cls(code)
        except (TypeError, ValueError):
            return None


@dataclass(frozen=True, slots=True)
class Cell:
    """One grid position.

    ``notes`` is kept sorted and duplicate-free; it is only meaningful while
    ``value`` is 0.
    """

    value: int = 0
    notes: tuple[int, ...] = ()
    status: CellStatus = CellStatus.EMPTY

    @property
    def is_static(self) -> bool:
        return self.status == CellStatus.STATIC

    @property
    def is_empty(self) -> bool:
        return self.value == 0

    @property
    def has_notes(self) -> bool:
        return bool(self.notes)


EMPTY_CELL = Cell()


def classify_status(cell: Cell) -> CellStatus:
    """Status a locally edited cell should carry.

    Static is sticky; anything else is ``USER`` when it holds a value and
    ``EMPTY`` otherwise.  ``CORRECT``/``WRONG`` never survive a local edit.
    """
    if cell.is_static:
        return CellStatus.STATIC
    return CellStatus.USER if cell.value else CellStatus.EMPTY


def set_value(cell: Cell, value: int) -> Cell:
    """Enter *value* (0 clears) and drop any notes.  Clues are left untouched."""
    if cell.is_static:
        return cell
    if not 0 <= value <= GRID_SIZE:
        raise ValueError(f"Cell value must be in 0..{GRID_SIZE}, got {value}")
    return Cell(
        value=value,
        notes=(),
        status=CellStatus.USER if value else CellStatus.EMPTY,
    )


def toggle_note(cell: Cell, digit: int) -> Cell:
    """Add or remove *digit* from the cell's notes, clearing its value."""
    if cell.is_static:
        return cell
    if digit not in DIGITS:
        raise ValueError(f"Note must be in 1..{GRID_SIZE}, got {digit}")
    if digit in cell.notes:
        notes = tuple(n for n in cell.notes if n != digit)
    else:
        notes = tuple(sorted((*cell.notes, digit)))
    return replace(cell, value=0, notes=notes, status=CellStatus.EMPTY)
