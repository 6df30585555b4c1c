"""BoardScene/BoardView — draws the 9×9 grid and reports clicks."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtCore import QObject, QPointF, QRectF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen, QResizeEvent
from PyQt6.QtWidgets import (
    QGraphicsLineItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
    QGraphicsView,
    QLineEdit,
    QSizePolicy,
    QWidget,
)

from sudokudj.core.cell import CellStatus
from sudokudj.core.coords import BOX_SIZE, DIGITS, GRID_SIZE, Coord, iter_coords
from sudokudj.editor.selection import is_highlighted, is_selected
from sudokudj.editor.state import EditorState
from sudokudj.ui.styles.theme import BoardTheme


@dataclass(frozen=True, slots=True)
class CellView:
    """Render flags for one cell, derived from the editor state."""

    text: str
    notes: tuple[int, ...]
    is_static: bool
    is_correct: bool
    is_wrong: bool
    is_selected: bool
    is_highlighted: bool

    @property
    def has_notes(self) -> bool:
        return bool(self.notes)


def cell_view(state: EditorState, row: int, col: int) -> CellView:
    assert state.board is not None
    cell = state.board.cell(row, col)
    return CellView(
        text=str(cell.value) if cell.value else "",
        notes=cell.notes if not cell.value else (),
        is_static=cell.status == CellStatus.STATIC,
        is_correct=cell.status == CellStatus.CORRECT,
        is_wrong=cell.status == CellStatus.WRONG,
        is_selected=is_selected(state, row, col),
        is_highlighted=is_highlighted(state, row, col),
    )


class BoardScene(QGraphicsScene):
    """Renders cells, notes and highlight marks.

    Signals:
        cell_clicked(int, int): a cell was pressed.
        note_clicked(int, int, int): a note slot of a pencilled cell was pressed.
        cell_double_clicked(int, int): an editable cell was double-clicked.
    """

    cell_clicked = pyqtSignal(int, int)
    note_clicked = pyqtSignal(int, int, int)
    cell_double_clicked = pyqtSignal(int, int)

    TILE = 56  # px per cell

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: EditorState | None = None

        self._cell_items: dict[Coord, QGraphicsRectItem] = {}
        self._value_items: dict[Coord, QGraphicsSimpleTextItem] = {}
        self._note_items: dict[Coord, list[QGraphicsSimpleTextItem]] = {}
        self._line_items: list[QGraphicsLineItem] = []

        self._draw_grid()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: EditorState) -> None:
        """Redraw cell contents and marks for *state*."""
        self._state = state
        self._sync_cells()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_grid()
        self._sync_cells()

    def value_text(self, row: int, col: int) -> str:
        return self._value_items[Coord(row, col)].text()

    def cell_brush_color(self, row: int, col: int) -> QColor:
        return self._cell_items[Coord(row, col)].brush().color()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _draw_grid(self) -> None:
        for item in (
            *self._cell_items.values(),
            *self._value_items.values(),
            *(n for notes in self._note_items.values() for n in notes),
            *self._line_items,
        ):
            self.removeItem(item)
        self._cell_items.clear()
        self._value_items.clear()
        self._note_items.clear()
        self._line_items.clear()

        t = self.TILE
        value_font = QFont("Adwaita Sans", t // 2)
        note_font = QFont("Adwaita Sans", max(7, t // 6))

        for coord in iter_coords():
            x, y = coord.col * t, coord.row * t
            rect = QGraphicsRectItem(x, y, t, t)
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._cell_items[coord] = rect

            value = QGraphicsSimpleTextItem("")
            value.setFont(value_font)
            value.setZValue(1)
            self.addItem(value)
            self._value_items[coord] = value

            notes = []
            sub = t / BOX_SIZE
            for digit in DIGITS:
                note = QGraphicsSimpleTextItem(str(digit))
                note.setFont(note_font)
                note.setBrush(QBrush(self._theme.note_text))
                sr, sc = divmod(digit - 1, BOX_SIZE)
                note.setPos(x + sc * sub + sub / 3, y + sr * sub)
                note.setZValue(1)
                note.setVisible(False)
                self.addItem(note)
                notes.append(note)
            self._note_items[coord] = notes

        size = GRID_SIZE * t
        for i in range(GRID_SIZE + 1):
            thick = i % BOX_SIZE == 0
            pen = QPen(
                self._theme.thick_line if thick else self._theme.thin_line,
                3 if thick else 1,
            )
            for line in (
                QGraphicsLineItem(i * t, 0, i * t, size),
                QGraphicsLineItem(0, i * t, size, i * t),
            ):
                line.setPen(pen)
                line.setZValue(2)
                self.addItem(line)
                self._line_items.append(line)

        self.setSceneRect(0, 0, size, size)

    def _background(self, coord: Coord, view: CellView) -> QColor:
        theme = self._theme
        if view.is_wrong:
            return theme.wrong
        if view.is_correct:
            return theme.correct
        if view.is_selected:
            return theme.selected
        if view.is_highlighted:
            return theme.highlighted
        if view.is_static:
            return theme.static_cell
        box = coord.row // BOX_SIZE + coord.col // BOX_SIZE
        return theme.cell_alt_box if box % 2 else theme.cell

    def _sync_cells(self) -> None:
        state = self._state
        t = self.TILE
        for coord in iter_coords():
            rect = self._cell_items[coord]
            value = self._value_items[coord]
            notes = self._note_items[coord]

            if state is None or state.board is None:
                rect.setBrush(QBrush(self._theme.cell))
                value.setText("")
                for note in notes:
                    note.setVisible(False)
                continue

            view = cell_view(state, coord.row, coord.col)
            rect.setBrush(QBrush(self._background(coord, view)))

            value.setText(view.text)
            theme = self._theme
            value.setBrush(
                QBrush(theme.static_text if view.is_static else theme.value_text)
            )
            bounds = value.boundingRect()
            value.setPos(
                coord.col * t + (t - bounds.width()) / 2,
                coord.row * t + (t - bounds.height()) / 2,
            )
            for digit, note in zip(DIGITS, notes, strict=True):
                note.setVisible(digit in view.notes)

    # ── Mouse ────────────────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        state = self._state
        if event is None or state is None or state.board is None:
            return super().mousePressEvent(event)

        pos = event.scenePos()
        coord = self._pos_to_coord(pos)
        if coord is None:
            return super().mousePressEvent(event)

        cell = state.board.cell(*coord)
        if cell.has_notes and not cell.value:
            self.note_clicked.emit(coord.row, coord.col, self._pos_to_note(pos, coord))
            return
        self.cell_clicked.emit(coord.row, coord.col)

    def mouseDoubleClickEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        state = self._state
        if event is None or state is None or state.board is None:
            return super().mouseDoubleClickEvent(event)

        coord = self._pos_to_coord(event.scenePos())
        if coord is None or state.board.cell(*coord).status == CellStatus.STATIC:
            return super().mouseDoubleClickEvent(event)
        self.cell_double_clicked.emit(coord.row, coord.col)

    def _pos_to_coord(self, pos: QPointF) -> Coord | None:
        """Scene position → grid coordinate."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE):
            return None
        return Coord(row, col)

    def _pos_to_note(self, pos: QPointF, coord: Coord) -> int:
        """Scene position inside a cell → note digit of the 3×3 slot."""
        sub = self.TILE / BOX_SIZE
        sc = min(BOX_SIZE - 1, int((pos.x() - coord.col * self.TILE) // sub))
        sr = min(BOX_SIZE - 1, int((pos.y() - coord.row * self.TILE) // sub))
        return sr * BOX_SIZE + sc + 1


class BoardView(QGraphicsView):
    """Displays the board scene, scaled to fit the widget.

    Double-clicking an editable cell opens a one-character inline editor
    over it. The editor mirrors the cell value, so text the editor state
    rejects is reverted on the next keystroke.

    Signals:
        cell_clicked(int, int), note_clicked(int, int, int): bubbled from the scene.
        cell_text_entered(int, int, str): the inline editor text changed.
    """

    cell_clicked = pyqtSignal(int, int)
    note_clicked = pyqtSignal(int, int, int)
    cell_text_entered = pyqtSignal(int, int, str)

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(360, 360)

        self._editing: Coord | None = None
        self._editor = QLineEdit(self.viewport())
        self._editor.setObjectName("cellEditor")
        self._editor.setMaxLength(1)
        self._editor.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._editor.hide()

        self._scene.cell_clicked.connect(self.cell_clicked.emit)
        self._scene.note_clicked.connect(self.note_clicked.emit)
        self._scene.cell_double_clicked.connect(self.open_editor)
        self._editor.textEdited.connect(self._on_editor_text)
        self._editor.editingFinished.connect(self.close_editor)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    @property
    def editing(self) -> Coord | None:
        """Cell under the inline editor, or None when it is closed."""
        return self._editing

    @property
    def editor_text(self) -> str:
        return self._editor.text()

    def set_state(self, state: EditorState) -> None:
        self._scene.set_state(state)
        coord = self._editing
        if coord is None:
            return
        if state.board is None or state.board.cell(*coord).status == CellStatus.STATIC:
            self.close_editor()
        else:
            self._sync_editor()

    # ── Inline editor ────────────────────────────────────────────────────

    def open_editor(self, row: int, col: int) -> None:
        self._editing = Coord(row, col)
        self._sync_editor()
        self._place_editor()
        self._editor.show()
        self._editor.setFocus()
        self._editor.selectAll()

    def close_editor(self) -> None:
        if self._editing is None:
            return
        self._editing = None
        self._editor.hide()

    def _on_editor_text(self, text: str) -> None:
        coord = self._editing
        if coord is None:
            return
        self.cell_text_entered.emit(coord.row, coord.col, text)
        # Listeners run synchronously, so the scene already shows the result.
        self._sync_editor()

    def _sync_editor(self) -> None:
        coord = self._editing
        if coord is None:
            return
        text = self._scene.value_text(coord.row, coord.col)
        if self._editor.text() != text:
            self._editor.setText(text)

    def _place_editor(self) -> None:
        coord = self._editing
        if coord is None:
            return
        t = BoardScene.TILE
        rect = QRectF(coord.col * t, coord.row * t, t, t)
        self._editor.setGeometry(self.mapFromScene(rect).boundingRect())

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
        self._place_editor()
