"""Application-wide keyboard and pointer handling for the editor.

The filter is only active between :meth:`EditorInputFilter.attach` and
:meth:`EditorInputFilter.detach`; the main window detaches it on close so
no key press reaches a torn-down editor.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from PyQt6.QtCore import QEvent, QObject, QPoint, Qt
from PyQt6.QtGui import QKeyEvent, QMouseEvent, QWindow
from PyQt6.QtWidgets import QAbstractSpinBox, QApplication, QLineEdit, QWidget

from sudokudj.editor.actions import (
    Action,
    CellCleared,
    DigitEntered,
    NotesModeToggled,
    OutsideClicked,
)

_CHORD_MODIFIERS = (
    Qt.KeyboardModifier.ControlModifier
    | Qt.KeyboardModifier.AltModifier
    | Qt.KeyboardModifier.MetaModifier
)
_CLEAR_KEYS = frozenset({Qt.Key.Key_Delete.value, Qt.Key.Key_Backspace.value})


def _key_code(key: int | Qt.Key) -> int:
    return key.value if isinstance(key, Enum) else int(key)


class EditorInputFilter(QObject):
    """Turns raw key/mouse events into editor actions."""

    def __init__(
        self,
        *,
        dispatch: Callable[[Action], object],
        board_widget: QWidget,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._dispatch = dispatch
        self._board_widget = board_widget
        self._is_attached = False

    @property
    def is_attached(self) -> bool:
        return self._is_attached

    def attach(self) -> None:
        app = QApplication.instance()
        if self._is_attached or app is None:
            return
        app.installEventFilter(self)
        self._is_attached = True

    def detach(self) -> None:
        app = QApplication.instance()
        if not self._is_attached:
            return
        if app is not None:
            app.removeEventFilter(self)
        self._is_attached = False

    # ── Event routing ────────────────────────────────────────────────────

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:
        # Window-level delivery happens exactly once per input event. Other
        # top-level windows, such as the delete confirmation, keep their input.
        if event is None or not isinstance(obj, QWindow):
            return False
        if obj is not self._editor_window():
            return False
        if event.type() == QEvent.Type.KeyPress and isinstance(event, QKeyEvent):
            if self._focus_is_text_input():
                return False
            return self.handle_key(event.key(), event.text(), event.modifiers())
        if event.type() == QEvent.Type.MouseButtonPress and isinstance(
            event, QMouseEvent
        ):
            self.handle_press(event.globalPosition().toPoint())
        return False

    def handle_key(
        self,
        key: int | Qt.Key,
        text: str,
        modifiers: Qt.KeyboardModifier = Qt.KeyboardModifier.NoModifier,
    ) -> bool:
        """Dispatch the action for a key press; returns True when consumed."""
        if modifiers & _CHORD_MODIFIERS:
            return False
        if text == "n":
            self._dispatch(NotesModeToggled())
            return True
        if len(text) == 1 and text in "123456789":
            self._dispatch(DigitEntered(int(text)))
            return True
        if _key_code(key) in _CLEAR_KEYS:
            self._dispatch(CellCleared())
            return True
        return False

    def handle_press(self, global_pos: QPoint) -> None:
        """Clear selection and highlight for presses outside the board."""
        if not self._is_inside_board(global_pos):
            self._dispatch(OutsideClicked())

    # ── Internal ─────────────────────────────────────────────────────────

    def _editor_window(self) -> QWindow | None:
        return self._board_widget.window().windowHandle()

    def _is_inside_board(self, global_pos: QPoint) -> bool:
        widget = self._board_widget
        if not widget.isVisible():
            return False
        return widget.rect().contains(widget.mapFromGlobal(global_pos))

    @staticmethod
    def _focus_is_text_input() -> bool:
        focus = QApplication.focusWidget()
        return isinstance(focus, QLineEdit | QAbstractSpinBox)
