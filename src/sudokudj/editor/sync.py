"""Remote operation orchestration.

:class:`PuzzleSync` issues service calls through a :class:`RequestRunner`
and folds the answers back into the :class:`EditorStore`.  Every operation
has the same shape: mark busy and clear the previous error, run the call,
merge the result (the server's board always replaces the local one), or
record a readable error, and leave the busy state either way.

The busy flag is advisory.  Calls are not serialised: when two overlap, the
one that resolves last wins the merge.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from sudokudj.core.codec import (
    decode_board,
    decode_puzzle,
    decode_summaries,
    encode_board,
)
from sudokudj.core.puzzle import DEFAULT_SHORT_ID_LENGTH, PuzzleSummary
from sudokudj.editor.actions import (
    BoardReplaced,
    OperationFailed,
    OperationFinished,
    OperationStarted,
    PuzzleDeleted,
    PuzzleGenerated,
    PuzzleLoaded,
    PuzzlesListed,
)
from sudokudj.editor.state import MessageKind
from sudokudj.editor.store import EditorStore

_LOGGER = logging.getLogger(__name__)

ERR_LIST = "Failed to load puzzle list"
ERR_GENERATE = "Failed to generate puzzle"
ERR_LOAD = "Failed to load puzzle"
ERR_SAVE = "Failed to save puzzle"
ERR_VALIDATE = "Failed to validate puzzle"
ERR_DELETE = "Failed to delete puzzle"
ERR_NOTHING_TO_SAVE = "No puzzle to save"
ERR_NOTHING_TO_VALIDATE = "No puzzle to validate"

MSG_STARTUP_LOADED = "Puzzles loaded successfully"
MSG_STARTUP_FAILED = "Failed to load puzzles"
MSG_SAVED = "Puzzle saved successfully"
MSG_SAVE_FAILED = "Puzzle save failed"
MSG_DELETED = "Puzzle deleted successfully"
MSG_DELETE_FAILED = "Failed to delete puzzle"

SuccessCallback = Callable[[Any], None]
FailureCallback = Callable[[str], None]
NotifyCallback = Callable[[str, MessageKind], None]


class PuzzleService(Protocol):
    """Remote operations used by :class:`PuzzleSync`."""

    def list_puzzles(self) -> Any: ...

    def create_puzzle(self, difficulty: int) -> Any: ...

    def get_puzzle(self, puzzle_id: str) -> Any: ...

    def save_puzzle(self, puzzle_id: str, body: dict[str, Any]) -> Any: ...

    def check_puzzle(self, puzzle_id: str | None, body: dict[str, Any]) -> Any: ...

    def delete_puzzle(self, puzzle_id: str) -> Any: ...


class RequestRunner(Protocol):
    """Executes a blocking call and reports back on the caller's thread."""

    def submit(
        self,
        call: Callable[[], Any],
        on_success: SuccessCallback,
        on_failure: FailureCallback,
    ) -> None: ...


class PuzzleSync:
    """Sequences list/generate/load/save/validate/delete against the service."""

    __slots__ = (
        "__weakref__",
        "_store",
        "_service",
        "_runner",
        "_notify",
        "_short_id_length",
        "_is_closed",
    )

    def __init__(
        self,
        *,
        store: EditorStore,
        service: PuzzleService,
        runner: RequestRunner,
        notify: NotifyCallback,
        short_id_length: int = DEFAULT_SHORT_ID_LENGTH,
    ) -> None:
        self._store = store
        self._service = service
        self._runner = runner
        self._notify = notify
        self._short_id_length = short_id_length
        self._is_closed = False

    @property
    def is_closed(self) -> bool:
        return self._is_closed

    def close(self) -> None:
        """Stop applying results; calls already in flight still complete."""
        self._is_closed = True

    # ── Startup ──────────────────────────────────────────────────────────

    def start(self) -> None:
        """Open the most recent puzzle, or generate one if there is none.

        Any failure along the way ends in :meth:`generate` so the editor is
        never left without a board.
        """

        def open_most_recent(summaries: list[PuzzleSummary]) -> None:
            if not summaries:
                _LOGGER.info("No saved puzzles, generating a new one")
                self.generate()
                return
            self.load(
                summaries[0].id,
                on_loaded=lambda: self._notify(
                    MSG_STARTUP_LOADED, MessageKind.SUCCESS
                ),
                on_failed=lambda: self.generate(),
            )

        self._list(
            then=open_most_recent,
            on_failed=lambda: self._notify(MSG_STARTUP_FAILED, MessageKind.ERROR),
        )

    # ── Operations ───────────────────────────────────────────────────────

    def list_puzzles(self) -> None:
        """Refresh the puzzle list; falls back to :meth:`generate` on failure."""
        self._list()

    def generate(self, difficulty: int | None = None) -> None:
        """Request a new puzzle and add it to the front of the list."""
        level = self._store.state.difficulty if difficulty is None else difficulty

        def apply(payload: Any) -> None:
            record = decode_puzzle(payload)
            summary = None
            if record.id is not None:
                summary = PuzzleSummary.synthesize(
                    record.id, level, short_id_length=self._short_id_length
                )
            self._store.dispatch(PuzzleGenerated(record.board, record.id, summary))
            _LOGGER.info("Generated puzzle %s at difficulty %d", record.id, level)

        self._run(
            "generate",
            lambda: self._service.create_puzzle(level),
            apply=apply,
            error=ERR_GENERATE,
        )

    def load(
        self,
        puzzle_id: str,
        *,
        on_loaded: Callable[[], None] | None = None,
        on_failed: Callable[[], None] | None = None,
    ) -> None:
        """Open *puzzle_id* and hide the puzzle list."""

        def apply(payload: Any) -> None:
            self._store.dispatch(PuzzleLoaded(decode_board(payload), puzzle_id))
            _LOGGER.info("Loaded puzzle %s", puzzle_id)

        self._run(
            "load",
            lambda: self._service.get_puzzle(puzzle_id),
            apply=apply,
            error=ERR_LOAD,
            then=on_loaded,
            on_failed=on_failed,
        )

    def save(self) -> None:
        """Persist the current board; the server's copy replaces the local one."""
        state = self._store.state
        if state.board is None or state.puzzle_id is None:
            self._store.dispatch(OperationFailed(ERR_NOTHING_TO_SAVE))
            return
        puzzle_id = state.puzzle_id
        body = encode_board(state.board, puzzle_id, state.difficulty)

        def apply(payload: Any) -> None:
            self._store.dispatch(BoardReplaced(decode_board(payload)))
            _LOGGER.info("Saved puzzle %s", puzzle_id)

        self._run(
            "save",
            lambda: self._service.save_puzzle(puzzle_id, body),
            apply=apply,
            error=ERR_SAVE,
            then=lambda: self._notify(MSG_SAVED, MessageKind.SUCCESS),
            on_failed=lambda: self._notify(MSG_SAVE_FAILED, MessageKind.ERROR),
        )

    def validate(self) -> None:
        """Ask the server to mark each entry correct or wrong."""
        state = self._store.state
        if state.board is None:
            self._store.dispatch(OperationFailed(ERR_NOTHING_TO_VALIDATE))
            return
        puzzle_id = state.puzzle_id
        body = encode_board(state.board, puzzle_id, state.difficulty)

        def apply(payload: Any) -> None:
            self._store.dispatch(BoardReplaced(decode_board(payload)))
            _LOGGER.info("Validated puzzle %s", puzzle_id)

        self._run(
            "validate",
            lambda: self._service.check_puzzle(puzzle_id, body),
            apply=apply,
            error=ERR_VALIDATE,
        )

    def delete_puzzle(self, puzzle_id: str) -> None:
        """Delete *puzzle_id*; if it was open, a new puzzle replaces it."""
        was_current = False

        def apply(_payload: Any) -> None:
            nonlocal was_current
            was_current = self._store.state.puzzle_id == puzzle_id
            self._store.dispatch(PuzzleDeleted(puzzle_id))
            _LOGGER.info("Deleted puzzle %s", puzzle_id)

        def after_delete() -> None:
            self._notify(MSG_DELETED, MessageKind.SUCCESS)
            if was_current:
                _LOGGER.info("Deleted the open puzzle, generating a new one")
                self.generate()

        self._run(
            "delete",
            lambda: self._service.delete_puzzle(puzzle_id),
            apply=apply,
            error=ERR_DELETE,
            then=after_delete,
            on_failed=lambda: self._notify(MSG_DELETE_FAILED, MessageKind.ERROR),
        )

    def confirm_delete(self) -> None:
        """Carry out the delete the user has been asked to confirm."""
        pending = self._store.state.pending_delete
        if pending is None:
            return
        self.delete_puzzle(pending.puzzle_id)

    # ── Internal ─────────────────────────────────────────────────────────

    def _list(
        self,
        *,
        then: Callable[[list[PuzzleSummary]], None] | None = None,
        on_failed: Callable[[], None] | None = None,
    ) -> None:
        summaries: list[PuzzleSummary] = []

        def apply(payload: Any) -> None:
            summaries.extend(
                decode_summaries(payload, short_id_length=self._short_id_length)
            )
            self._store.dispatch(PuzzlesListed(tuple(summaries)))
            _LOGGER.info("Listed %d puzzles", len(summaries))

        def fall_back() -> None:
            if on_failed is not None:
                on_failed()
            self.generate()

        self._run(
            "list",
            self._service.list_puzzles,
            apply=apply,
            error=ERR_LIST,
            then=(lambda: then(summaries)) if then is not None else None,
            on_failed=fall_back,
        )

    def _run(
        self,
        name: str,
        call: Callable[[], Any],
        *,
        apply: Callable[[Any], None],
        error: str,
        then: Callable[[], None] | None = None,
        on_failed: Callable[[], None] | None = None,
    ) -> None:
        if self._is_closed:
            _LOGGER.debug("Ignoring %s request on a closed editor", name)
            return
        self._store.dispatch(OperationStarted())

        def handle_success(payload: Any) -> None:
            if self._is_closed:
                _LOGGER.warning("Discarding %s result: editor closed", name)
                return
            try:
                apply(payload)
            finally:
                self._store.dispatch(OperationFinished())
            if then is not None:
                then()

        def handle_failure(message: str) -> None:
            if self._is_closed:
                _LOGGER.warning("Discarding %s failure: editor closed", name)
                return
            _LOGGER.warning("%s failed: %s", name.capitalize(), message)
            self._store.dispatch(OperationFailed(error))
            if on_failed is not None:
                on_failed()

        self._runner.submit(call, handle_success, handle_failure)
