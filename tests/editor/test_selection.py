"""Tests for selection and highlight rules."""

from sudokudj.core.board import Board
from sudokudj.core.cell import Cell, CellStatus
from sudokudj.core.coords import Coord
from sudokudj.editor.selection import (
    clear_interaction,
    highlight_for,
    highlighted_positions,
    is_highlighted,
    is_selected,
    select,
)
from sudokudj.editor.state import EditorState


def _board() -> Board:
    return (
        Board.empty()
        .with_cell(0, 1, Cell(5, (), CellStatus.STATIC))
        .with_cell(3, 3, Cell(5, (), CellStatus.USER))
        .with_cell(6, 6, Cell(2, (), CellStatus.USER))
    )


class TestSelect:
    def test_static_cell_never_selected(self) -> None:
        state = select(EditorState(board=_board(), selected=Coord(2, 2)), 0, 1)
        assert state.selected is None
        assert state.highlighted == 5

    def test_editable_cell_selected(self) -> None:
        state = select(EditorState(board=_board()), 3, 3)
        assert is_selected(state, 3, 3)
        assert not is_selected(state, 0, 1)

    def test_empty_static_cell_keeps_highlight(self) -> None:
        board = Board.empty().with_cell(0, 0, Cell(0, (), CellStatus.STATIC))
        state = select(EditorState(board=board, highlighted=4), 0, 0)
        assert state.selected is None
        assert state.highlighted == 4


class TestHighlight:
    def test_highlight_marks_every_matching_cell(self) -> None:
        state = highlight_for(EditorState(board=_board()), 0, 1)
        assert highlighted_positions(state) == {Coord(0, 1), Coord(3, 3)}
        assert is_highlighted(state, 3, 3)
        assert not is_highlighted(state, 6, 6)

    def test_empty_cell_clears_highlight(self) -> None:
        state = highlight_for(EditorState(board=_board(), highlighted=5), 4, 4)
        assert state.highlighted is None
        assert highlighted_positions(state) == frozenset()

    def test_no_board_means_no_highlight(self) -> None:
        state = EditorState(highlighted=5)
        assert not is_highlighted(state, 0, 0)
        assert highlighted_positions(state) == frozenset()


def test_clear_interaction() -> None:
    state = EditorState(board=_board(), selected=Coord(3, 3), highlighted=5)
    cleared = clear_interaction(state)
    assert cleared.selected is None
    assert cleared.highlighted is None
    assert clear_interaction(cleared) is cleared
