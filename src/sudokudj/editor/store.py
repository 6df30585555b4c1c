"""Single owner of the current :class:`EditorState`."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from sudokudj.editor.actions import Action
from sudokudj.editor.reducer import reduce
from sudokudj.editor.state import EditorState

ChangeCallback = Callable[[EditorState, EditorState], None]  # (new, old)


@dataclass
class StoreEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_change: list[ChangeCallback] = field(default_factory=list)


class EditorStore:
    """Holds the state and applies actions to it one at a time.

    Listeners are called after every action that produced a different state.
    """

    __slots__ = ("_state", "events")

    def __init__(self, initial: EditorState | None = None) -> None:
        self._state = initial or EditorState()
        self.events = StoreEvents()

    @property
    def state(self) -> EditorState:
        return self._state

    def dispatch(self, action: Action) -> EditorState:
        old = self._state
        new = reduce(old, action)
        if new == old:
            return old
        self._state = new
        for cb in list(self.events.on_change):
            cb(new, old)
        return new

    def subscribe(self, callback: ChangeCallback) -> None:
        """Register *callback* (idempotent)."""
        self.unsubscribe(callback)
        self.events.on_change.append(callback)

    def unsubscribe(self, callback: ChangeCallback) -> None:
        callbacks = self.events.on_change
        callbacks[:] = [cb for cb in callbacks if cb != callback]
