"""Selection and value-highlight rules.

Only one editable cell can be selected.  The highlight is a digit, not a set
of cells: a view marks every cell whose value equals it.
"""

from __future__ import annotations

from sudokudj.core.coords import Coord
from sudokudj.editor.state import EditorState


def select(state: EditorState, row: int, col: int) -> EditorState:
    """Make *(row, col)* the editable selection.

    Clues are never selected, but a clue's digit still becomes the
    highlight.
    """
    if state.board is None:
        return state
    cell = state.board.cell(row, col)
    if cell.is_static:
        highlighted = cell.value if cell.value else state.highlighted
        return state.evolve(selected=None, highlighted=highlighted)
    return state.evolve(selected=Coord(row, col))


def highlight_for(state: EditorState, row: int, col: int) -> EditorState:
    """Highlight the current value at *(row, col)*, or clear it for an empty cell."""
    if state.board is None:
        return state.evolve(highlighted=None)
    value = state.board.cell(row, col).value
    return state.evolve(highlighted=value or None)


def clear_interaction(state: EditorState) -> EditorState:
    if state.selected is None and state.highlighted is None:
        return state
    return state.evolve(selected=None, highlighted=None)


def is_highlighted(state: EditorState, row: int, col: int) -> bool:
    if state.board is None or state.highlighted is None:
        return False
    return state.board.cell(row, col).value == state.highlighted


def highlighted_positions(state: EditorState) -> frozenset[Coord]:
    if state.board is None or state.highlighted is None:
        return frozenset()
    return state.board.positions_with_value(state.highlighted)


def is_selected(state: EditorState, row: int, col: int) -> bool:
    return state.selected == (row, col)
