"""Visual theme constants and QSS styles for Sudoku DJ."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the puzzle grid."""

    cell: QColor
    cell_alt_box: QColor  # every other 3×3 box
    static_cell: QColor  # clue background
    selected: QColor
    highlighted: QColor  # same-value marker
    correct: QColor
    wrong: QColor
    value_text: QColor
    static_text: QColor
    note_text: QColor
    thin_line: QColor
    thick_line: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            cell=QColor(250, 250, 247),
            cell_alt_box=QColor(240, 242, 238),
            static_cell=QColor(222, 226, 230),
            selected=QColor(255, 236, 150),
            highlighted=QColor(187, 222, 251),
            correct=QColor(200, 230, 201),
            wrong=QColor(255, 205, 210),
            value_text=QColor(38, 79, 120),
            static_text=QColor(30, 30, 30),
            note_text=QColor(110, 110, 110),
            thin_line=QColor(170, 170, 170),
            thick_line=QColor(40, 40, 40),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#errorLabel {
    color: #ff8a80;
}

QLabel#messageLabel[kind="success"] {
    color: #9bc700;
}
QLabel#messageLabel[kind="error"] {
    color: #ff8a80;
}

QListWidget {
    background: #1e1e1e;
    color: #d4d4d4;
    border: 1px solid #3c3c3c;
    font-family: "Adwaita Sans", "Consolas", monospace;
    font-size: 13px;
}

QListWidget::item:selected {
    background: #264f78;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed, QPushButton:checked {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QSpinBox {
    background: #1e1e1e;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
    padding: 4px;
}

QLineEdit#cellEditor {
    background: #ffffff;
    color: #1a3d7c;
    border: 2px solid #264f78;
    font-size: 24px;
}
"""
