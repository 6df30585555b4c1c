"""Grid geometry and the linear cell-key mapping used on the wire.

Cells are addressed locally as 0-based ``(row, col)`` pairs.  The remote
service keys cells by their 1-based linear index, zero-padded to the width
of the largest index (``"01"`` .. ``"81"`` on a 9×9 grid).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final, NamedTuple

GRID_SIZE: Final = 9
BOX_SIZE: Final = 3
CELL_COUNT: Final = GRID_SIZE * GRID_SIZE
KEY_WIDTH: Final = len(str(CELL_COUNT))

DIGITS: Final = range(1, GRID_SIZE + 1)


class Coord(NamedTuple):
    """0-based grid position."""

    row: int
    col: int


def is_valid_coord(row: int, col: int) -> bool:
    return 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE


def to_linear_key(row: int, col: int) -> str:
    """Return the wire key for *(row, col)*, e.g. ``(0, 0) -> "01"``."""
    if not is_valid_coord(row, col):
        raise ValueError(f"Coordinate out of range: ({row}, {col})")
    return str(row * GRID_SIZE + col + 1).zfill(KEY_WIDTH)


def from_linear_key(key: object) -> Coord:
    """Parse a wire key back into a :class:`Coord`.

    Raises:
        ValueError: *key* is not a decimal string in ``1..CELL_COUNT``.
    """
    if not isinstance(key, str) or not key.strip().isdigit():
        raise ValueError(f"Malformed cell key: {key!r}")
    index = int(key) - 1
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"Cell key out of range: {key!r}")
    return Coord(index // GRID_SIZE, index % GRID_SIZE)


def iter_coords() -> Iterator[Coord]:
    """All grid positions in row-major (wire) order."""
    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            yield Coord(row, col)


def all_linear_keys() -> tuple[str, ...]:
    return tuple(to_linear_key(row, col) for row, col in iter_coords())
