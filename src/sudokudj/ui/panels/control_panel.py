"""ControlPanel — difficulty selector and puzzle action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from sudokudj.core.coords import GRID_SIZE
from sudokudj.editor.state import EditorState
from sudokudj.ui.i18n import t


class ControlPanel(QWidget):
    """Buttons for puzzle actions: generate, notes, validate, save, list."""

    difficulty_changed = pyqtSignal(int)
    generate_clicked = pyqtSignal()
    notes_toggled = pyqtSignal()
    validate_clicked = pyqtSignal()
    save_clicked = pyqtSignal()
    puzzles_toggled = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        row1 = QHBoxLayout()
        self._difficulty_label = QLabel()
        row1.addWidget(self._difficulty_label)
        self._difficulty = QSpinBox()
        self._difficulty.setRange(1, GRID_SIZE)
        self._difficulty.valueChanged.connect(self.difficulty_changed)
        row1.addWidget(self._difficulty)

        self._btn_generate = self._make_button(btn_font)
        self._btn_generate.clicked.connect(self.generate_clicked)
        row1.addWidget(self._btn_generate)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_notes = self._make_button(btn_font)
        self._btn_notes.setCheckable(True)
        # Checked state mirrors the editor state; clicks only request a toggle.
        self._btn_notes.clicked.connect(
            lambda _checked=False: self.notes_toggled.emit()
        )
        row2.addWidget(self._btn_notes)

        self._btn_puzzles = self._make_button(btn_font)
        self._btn_puzzles.setCheckable(True)
        self._btn_puzzles.clicked.connect(
            lambda _checked=False: self.puzzles_toggled.emit()
        )
        row2.addWidget(self._btn_puzzles)
        layout.addLayout(row2)

        row3 = QHBoxLayout()
        self._btn_validate = self._make_button(btn_font)
        self._btn_validate.clicked.connect(self.validate_clicked)
        row3.addWidget(self._btn_validate)

        self._btn_save = self._make_button(btn_font)
        self._btn_save.clicked.connect(self.save_clicked)
        row3.addWidget(self._btn_save)
        layout.addLayout(row3)

    @staticmethod
    def _make_button(font: QFont) -> QPushButton:
        btn = QPushButton()
        btn.setFont(font)
        btn.setMinimumHeight(36)
        return btn

    def retranslate_ui(self) -> None:
        s = t()
        self._difficulty_label.setText(s.label_difficulty)
        self._btn_generate.setText(s.btn_generate)
        self._btn_notes.setText(s.btn_notes)
        self._btn_puzzles.setText(s.btn_puzzles)
        self._btn_validate.setText(s.btn_validate)
        self._btn_save.setText(s.btn_save)

    def set_state(self, state: EditorState) -> None:
        """Mirror *state*: enablement follows the busy flag and board presence."""
        if self._difficulty.value() != state.difficulty:
            self._difficulty.blockSignals(True)
            self._difficulty.setValue(state.difficulty)
            self._difficulty.blockSignals(False)
        self._btn_generate.setEnabled(not state.busy)
        self._btn_validate.setEnabled(state.can_validate)
        self._btn_save.setEnabled(state.can_save)
        self._btn_notes.setChecked(state.notes_mode)
        self._btn_puzzles.setChecked(state.show_puzzle_list)

    @property
    def generate_enabled(self) -> bool:
        return self._btn_generate.isEnabled()

    @property
    def save_enabled(self) -> bool:
        return self._btn_save.isEnabled()

    @property
    def validate_enabled(self) -> bool:
        return self._btn_validate.isEnabled()
