"""Immutable 9×9 board of :class:`Cell`."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from sudokudj.core.cell import EMPTY_CELL, Cell
from sudokudj.core.coords import GRID_SIZE, Coord, is_valid_coord, iter_coords

Rows = tuple[tuple[Cell, ...], ...]


def _empty_rows() -> Rows:
    return tuple((EMPTY_CELL,) * GRID_SIZE for _ in range(GRID_SIZE))


@dataclass(frozen=True, slots=True)
class Board:
    """Always holds exactly ``GRID_SIZE`` × ``GRID_SIZE`` cells.

    Edits return a new board; instances are never mutated, so the editor
    can swap boards wholesale when the server answers.
    """

    rows: Rows

    def __post_init__(self) -> None:
        if len(self.rows) != GRID_SIZE or any(
            len(row) != GRID_SIZE for row in self.rows
        ):
            raise ValueError(f"Board must be {GRID_SIZE}x{GRID_SIZE}")

    @classmethod
    def empty(cls) -> Board:
        return cls(_empty_rows())

    @classmethod
    def from_cells(cls, cells: Iterable[Iterable[Cell]]) -> Board:
        return cls(tuple(tuple(row) for row in cells))

    def __getitem__(self, coord: tuple[int, int]) -> Cell:
        row, col = coord
        return self.cell(row, col)

    def cell(self, row: int, col: int) -> Cell:
        if not is_valid_coord(row, col):
            raise IndexError(f"No cell at ({row}, {col})")
        return self.rows[row][col]

    def with_cell(self, row: int, col: int, cell: Cell) -> Board:
        """Return a copy with the cell at *(row, col)* replaced."""
        if not is_valid_coord(row, col):
            raise IndexError(f"No cell at ({row}, {col})")
        new_row = self.rows[row][:col] + (cell,) + self.rows[row][col + 1 :]
        return Board(self.rows[:row] + (new_row,) + self.rows[row + 1 :])

    def update_cell(self, row: int, col: int, edit: Callable[[Cell], Cell]) -> Board:
        """Apply *edit* to one cell; returns ``self`` when nothing changed."""
        current = self.cell(row, col)
        updated = edit(current)
        if updated == current:
            return self
        return self.with_cell(row, col, updated)

    def items(self) -> Iterator[tuple[Coord, Cell]]:
        """Yield ``(coord, cell)`` pairs in row-major order."""
        for coord in iter_coords():
            yield coord, self.rows[coord.row][coord.col]

    def positions_with_value(self, value: int) -> frozenset[Coord]:
        if value == 0:
            return frozenset()
        return frozenset(coord for coord, cell in self.items() if cell.value == value)

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(cell.value) if cell.value else "." for cell in row)
            for row in self.rows
        )
