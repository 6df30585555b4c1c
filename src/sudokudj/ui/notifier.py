"""Auto-expiring status messages."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from sudokudj.editor.actions import Action, MessageCleared, MessageShown
from sudokudj.editor.state import MessageKind


class Notifier:
    """Shows one transient message at a time.

    A new message replaces the pending one and restarts the countdown; there
    is no queue.
    """

    DEFAULT_DURATION_MS = 3000

    __slots__ = ("__weakref__", "_dispatch", "_duration_ms", "_timer")

    def __init__(
        self,
        *,
        dispatch: Callable[[Action], object],
        duration_ms: int = DEFAULT_DURATION_MS,
        parent: QObject | None = None,
    ) -> None:
        self._dispatch = dispatch
        self._duration_ms = duration_ms
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._expire)

    @property
    def is_pending(self) -> bool:
        return self._timer.isActive()

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    def notify(self, text: str, kind: MessageKind = MessageKind.SUCCESS) -> None:
        """Show *text* and (re)start the expiry countdown."""
        self._dispatch(MessageShown(text, kind))
        self._timer.start(self._duration_ms)

    def stop(self) -> None:
        """Cancel the countdown without clearing the message."""
        self._timer.stop()

    def _expire(self) -> None:
        self._dispatch(MessageCleared())
