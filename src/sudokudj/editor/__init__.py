"""Editor layer — state, reducer, selection rules and remote orchestration.

Quick start::

    from sudokudj.editor import CellClicked, EditorStore, PuzzleSync

    store = EditorStore()
    sync = PuzzleSync(store=store, service=client, runner=runner, notify=notify)
    sync.start()
    store.dispatch(CellClicked(0, 0))
"""

from sudokudj.editor.actions import (
    Action,
    BoardReplaced,
    CellClicked,
    CellCleared,
    CellTextEntered,
    DeleteCancelled,
    DeleteRequested,
    DifficultyChanged,
    DigitEntered,
    MessageCleared,
    MessageShown,
    NoteClicked,
    NotesModeToggled,
    OperationFailed,
    OperationFinished,
    OperationStarted,
    OutsideClicked,
    PuzzleDeleted,
    PuzzleGenerated,
    PuzzleListToggled,
    PuzzleLoaded,
    PuzzlesListed,
)
from sudokudj.editor.reducer import reduce
from sudokudj.editor.selection import (
    highlighted_positions,
    is_highlighted,
    is_selected,
)
from sudokudj.editor.state import (
    EditorState,
    MessageKind,
    PendingDelete,
    TransientMessage,
)
from sudokudj.editor.store import EditorStore, StoreEvents
from sudokudj.editor.sync import PuzzleService, PuzzleSync, RequestRunner

__all__ = [
    # State
    "EditorState",
    "MessageKind",
    "PendingDelete",
    "TransientMessage",
    "reduce",
    # Store / sync
    "EditorStore",
    "PuzzleService",
    "PuzzleSync",
    "RequestRunner",
    "StoreEvents",
    # Derived views
    "highlighted_positions",
    "is_highlighted",
    "is_selected",
    # Actions
    "Action",
    "BoardReplaced",
    "CellClicked",
    "CellCleared",
    "CellTextEntered",
    "DeleteCancelled",
    "DeleteRequested",
    "DifficultyChanged",
    "DigitEntered",
    "MessageCleared",
    "MessageShown",
    "NoteClicked",
    "NotesModeToggled",
    "OperationFailed",
    "OperationFinished",
    "OperationStarted",
    "OutsideClicked",
    "PuzzleDeleted",
    "PuzzleGenerated",
    "PuzzleListToggled",
    "PuzzleLoaded",
    "PuzzlesListed",
]
