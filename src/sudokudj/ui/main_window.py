"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from sudokudj.config import EditorConfig
from sudokudj.editor.actions import (
    CellClicked,
    CellTextEntered,
    DeleteCancelled,
    DeleteRequested,
    DifficultyChanged,
    NoteClicked,
    NotesModeToggled,
    PuzzleListToggled,
)
from sudokudj.editor.state import EditorState
from sudokudj.editor.store import EditorStore
from sudokudj.editor.sync import PuzzleService, PuzzleSync, RequestRunner
from sudokudj.remote.client import PuzzleServiceClient
from sudokudj.ui.board_view import BoardView
from sudokudj.ui.i18n import t
from sudokudj.ui.input_filter import EditorInputFilter
from sudokudj.ui.notifier import Notifier
from sudokudj.ui.panels.control_panel import ControlPanel
from sudokudj.ui.panels.puzzle_list import PuzzleListPanel
from sudokudj.ui.remote_session import RemoteSession

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for Sudoku DJ.

    *service* and *runner* default to an HTTP client and a worker-thread
    session built from *config*; tests pass in synchronous fakes.
    """

    def __init__(
        self,
        config: EditorConfig | None = None,
        *,
        service: PuzzleService | None = None,
        runner: RequestRunner | None = None,
        autostart: bool = True,
    ) -> None:
        super().__init__()
        self._config = config or EditorConfig()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(720, 560)
        self.resize(960, 680)

        self._store = EditorStore(
            EditorState(difficulty=self._config.default_difficulty)
        )

        self._client: PuzzleServiceClient | None = None
        if service is None:
            self._client = PuzzleServiceClient(
                self._config.api_base_url,
                timeout=self._config.request_timeout_s,
            )
            service = self._client

        self._remote_session: RemoteSession | None = None
        if runner is None:
            self._remote_session = RemoteSession(self)
            self._remote_session.setup()
            runner = self._remote_session

        self._notifier = Notifier(
            dispatch=self._store.dispatch,
            duration_ms=self._config.message_duration_ms,
            parent=self,
        )
        self._sync = PuzzleSync(
            store=self._store,
            service=service,
            runner=runner,
            notify=self._notifier.notify,
            short_id_length=self._config.short_id_length,
        )
        self._is_closed = False

        self._setup_ui()
        self._input_filter = EditorInputFilter(
            dispatch=self._store.dispatch,
            board_widget=self._board_view,
            parent=self,
        )
        self._connect_signals()
        self._store.subscribe(self._on_state_changed)
        self._render(self._store.state)
        self._input_filter.attach()

        if autostart:
            self._sync.start()

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def store(self) -> EditorStore:
        return self._store

    @property
    def sync(self) -> PuzzleSync:
        return self._sync

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        # Board (center)
        left = QVBoxLayout()
        self._board_view = BoardView()
        left.addWidget(self._board_view, stretch=1)

        self._error_label = QLabel()
        self._error_label.setObjectName("errorLabel")
        self._error_label.setWordWrap(True)
        left.addWidget(self._error_label)
        root.addLayout(left, stretch=3)

        # Right panel
        right = QVBoxLayout()
        right.setSpacing(6)

        self._control_panel = ControlPanel()
        right.addWidget(self._control_panel)

        self._message_label = QLabel()
        self._message_label.setObjectName("messageLabel")
        self._message_label.setWordWrap(True)
        right.addWidget(self._message_label)

        self._puzzle_list = PuzzleListPanel()
        right.addWidget(self._puzzle_list, stretch=1)
        right.addStretch()

        right_widget = QWidget()
        right_widget.setLayout(right)
        right_widget.setFixedWidth(320)
        root.addWidget(right_widget)

        # Status bar
        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel(t().status_ready)
        self._status.addWidget(self._status_label)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        dispatch = self._store.dispatch
        self._board_view.cell_clicked.connect(
            lambda row, col: dispatch(CellClicked(row, col))
        )
        self._board_view.note_clicked.connect(
            lambda row, col, digit: dispatch(NoteClicked(row, col, digit))
        )
        self._board_view.cell_text_entered.connect(
            lambda row, col, text: dispatch(CellTextEntered(row, col, text))
        )
        panel = self._control_panel
        panel.difficulty_changed.connect(
            lambda value: dispatch(DifficultyChanged(value))
        )
        panel.generate_clicked.connect(self._on_generate)
        panel.notes_toggled.connect(lambda: dispatch(NotesModeToggled()))
        panel.validate_clicked.connect(self._sync.validate)
        panel.save_clicked.connect(self._sync.save)
        panel.puzzles_toggled.connect(lambda: dispatch(PuzzleListToggled()))
        self._puzzle_list.load_requested.connect(self._on_load_requested)
        self._puzzle_list.delete_requested.connect(self._on_delete_requested)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_generate(self) -> None:
        self._sync.generate()

    def _on_load_requested(self, puzzle_id: str) -> None:
        self._sync.load(puzzle_id)

    def _on_delete_requested(self, puzzle_id: str, short_id: str) -> None:
        """Ask for confirmation before removing the puzzle from the service."""
        self._store.dispatch(DeleteRequested(puzzle_id, short_id))
        s = t()
        reply = QMessageBox.question(
            self,
            s.delete_title,
            s.delete_confirm.format(short_id=short_id),
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.No,
        )
        if reply == QMessageBox.StandardButton.Yes:
            self._sync.confirm_delete()
        else:
            self._store.dispatch(DeleteCancelled())

    # ── Rendering ────────────────────────────────────────────────────────

    def _on_state_changed(self, new: EditorState, _old: EditorState) -> None:
        self._render(new)

    def _render(self, state: EditorState) -> None:
        if state.board is not None:
            self._board_view.set_state(state)
        self._control_panel.set_state(state)
        self._puzzle_list.set_puzzles(state.puzzles, busy=state.busy)
        self._puzzle_list.setVisible(state.show_puzzle_list)

        self._error_label.setText(state.error or "")
        self._error_label.setVisible(state.error is not None)

        message = state.message
        self._message_label.setText(message.text if message is not None else "")
        self._message_label.setProperty(
            "kind", str(message.kind) if message is not None else ""
        )
        style = self._message_label.style()
        if style is not None:
            style.unpolish(self._message_label)
            style.polish(self._message_label)

        self._update_status(state)

    def _update_status(self, state: EditorState) -> None:
        s = t()
        if state.busy:
            text = s.status_loading
        elif state.puzzle_id is not None:
            short_id = state.puzzle_id[: self._config.short_id_length]
            text = s.status_puzzle.format(
                short_id=short_id, difficulty=state.difficulty
            )
        else:
            text = s.status_ready
        notes = s.status_notes_on if state.notes_mode else s.status_notes_off
        self._status_label.setText(f"{text} | {notes}")

    def status_text(self) -> str:
        return self._status_label.text()

    def error_text(self) -> str:
        return self._error_label.text()

    def message_text(self) -> str:
        return self._message_label.text()

    # ── Teardown ─────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Stop input, drop late results and release the worker thread."""
        if self._is_closed:
            return
        self._is_closed = True
        self._input_filter.detach()
        self._sync.close()
        if self._remote_session is not None:
            self._remote_session.shutdown()
        self._notifier.stop()
        if self._client is not None:
            self._client.close()
        self._store.unsubscribe(self._on_state_changed)
        _LOGGER.debug("Main window shut down")

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self.shutdown()
        super().closeEvent(event)
