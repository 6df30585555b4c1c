"""Runs blocking service calls on a worker thread for the UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QObject, QThread, pyqtSignal, pyqtSlot

_LOGGER = logging.getLogger(__name__)


class _RemoteCommandBus(QObject):
    call_requested = pyqtSignal(int, object)  # request_id, zero-arg callable
    call_finished = pyqtSignal(int, object)
    call_failed = pyqtSignal(int, str)

    # Worker results hop through here so callbacks run on the bus thread.
    @pyqtSlot(int, object)
    def relay_finished(self, request_id: int, result: object) -> None:
        self.call_finished.emit(request_id, result)

    @pyqtSlot(int, str)
    def relay_failed(self, request_id: int, message: str) -> None:
        self.call_failed.emit(request_id, message)


class _RemoteWorker(QObject):
    finished = pyqtSignal(int, object)  # request_id, decoded body
    failed = pyqtSignal(int, str)  # request_id, message

    @pyqtSlot(int, object)
    def run(self, request_id: int, call_obj: object) -> None:
        if not callable(call_obj):
            self.failed.emit(request_id, "Invalid remote call")
            return
        try:
            result = call_obj()
        except Exception as exc:
            self.failed.emit(request_id, str(exc))
            return
        self.finished.emit(request_id, result)


class RemoteSession:
    """Owns the worker-thread lifecycle and routes results to callbacks.

    In-flight calls cannot be cancelled.  After :meth:`shutdown` their results
    are dropped instead of being delivered.
    """

    __slots__ = (
        "__weakref__",
        "_command_bus",
        "_thread",
        "_worker",
        "_callbacks",
        "_next_request_id",
        "_is_started",
        "_is_shutting_down",
    )

    def __init__(self, parent: QObject | None = None) -> None:
        self._command_bus = _RemoteCommandBus(parent)
        self._thread = QThread(parent)
        self._worker = _RemoteWorker()
        self._callbacks: dict[
            int, tuple[Callable[[Any], None], Callable[[str], None]]
        ] = {}
        self._next_request_id = 0
        self._is_started = False
        self._is_shutting_down = False

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def setup(self) -> None:
        """Start worker thread and connect cross-thread signals."""
        if self._is_started or self._is_shutting_down:
            return
        self._worker.moveToThread(self._thread)
        self._command_bus.call_requested.connect(self._worker.run)
        self._worker.finished.connect(self._command_bus.relay_finished)
        self._worker.failed.connect(self._command_bus.relay_failed)
        self._command_bus.call_finished.connect(self._on_worker_finished)
        self._command_bus.call_failed.connect(self._on_worker_failed)
        self._thread.start()
        self._is_started = True

    def shutdown(self) -> None:
        """Stop the worker thread; late results are discarded."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        if self._callbacks:
            _LOGGER.info("Dropping %d unfinished remote calls", len(self._callbacks))
        self._callbacks.clear()
        self._thread.quit()
        self._thread.wait(2000)
        self._is_started = False

    def submit(
        self,
        call: Callable[[], Any],
        on_success: Callable[[Any], None],
        on_failure: Callable[[str], None],
    ) -> None:
        """Run *call* on the worker thread and report back on this thread."""
        if self._is_shutting_down:
            _LOGGER.debug("Remote session is shut down; call not issued")
            return
        if not self._is_started:
            self.setup()
        self._next_request_id += 1
        request_id = self._next_request_id
        self._callbacks[request_id] = (on_success, on_failure)
        self._command_bus.call_requested.emit(request_id, call)

    def _on_worker_finished(self, request_id: int, result: object) -> None:
        if self._is_shutting_down:
            return
        callbacks = self._callbacks.pop(request_id, None)
        if callbacks is None:
            return
        callbacks[0](result)

    def _on_worker_failed(self, request_id: int, message: str) -> None:
        if self._is_shutting_down:
            return
        callbacks = self._callbacks.pop(request_id, None)
        if callbacks is None:
            return
        callbacks[1](message)
