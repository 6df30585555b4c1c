"""PuzzleListPanel — saved puzzles with load and delete buttons."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from sudokudj.core.puzzle import PuzzleSummary
from sudokudj.ui.i18n import t


class PuzzleListPanel(QWidget):
    """Lists puzzle summaries in the order the service returned them."""

    load_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(str, str)  # id, short id

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._puzzles: tuple[PuzzleSummary, ...] = ()
        self._busy = False
        self._row_buttons: dict[str, tuple[QPushButton, QPushButton]] = {}
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Adwaita Sans", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().puzzles_header)
        self._rebuild_list()

    @property
    def count(self) -> int:
        return len(self._puzzles)

    def set_puzzles(self, puzzles: tuple[PuzzleSummary, ...], *, busy: bool) -> None:
        if puzzles == self._puzzles and busy == self._busy:
            return
        self._puzzles = puzzles
        self._busy = busy
        self._rebuild_list()

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._row_buttons.clear()
        s = t()
        if not self._puzzles:
            self._list.addItem(QListWidgetItem(s.puzzles_empty))
            return
        for puzzle in self._puzzles:
            item = QListWidgetItem()
            row = self._make_row(puzzle)
            item.setSizeHint(row.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row)

    def _make_row(self, puzzle: PuzzleSummary) -> QWidget:
        s = t()
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(2, 2, 2, 2)

        label = QLabel(
            s.puzzle_item.format(
                short_id=puzzle.short_id,
                date=puzzle.date_display,
                difficulty=puzzle.difficulty,
            )
        )
        layout.addWidget(label, stretch=1)

        btn_load = QPushButton(s.btn_load)
        btn_load.setEnabled(not self._busy)
        btn_load.clicked.connect(
            lambda _checked=False, pid=puzzle.id: self.load_requested.emit(pid)
        )
        layout.addWidget(btn_load)

        btn_delete = QPushButton(s.btn_delete)
        btn_delete.setEnabled(not self._busy)
        btn_delete.clicked.connect(
            lambda _checked=False, pid=puzzle.id, short=puzzle.short_id: (
                self.delete_requested.emit(pid, short)
            )
        )
        layout.addWidget(btn_delete)
        self._row_buttons[puzzle.id] = (btn_load, btn_delete)
        return row
