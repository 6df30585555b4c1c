"""User-facing strings for the Sudoku DJ window.

Usage::

    from sudokudj.ui.i18n import t

    label.setText(t().btn_generate)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    status_ready: str
    status_loading: str
    status_puzzle: str  # "Puzzle {short_id} | difficulty {difficulty}"
    status_notes_on: str
    status_notes_off: str

    # ── Controls ─────────────────────────────────────────────────────────
    label_difficulty: str
    btn_generate: str
    btn_notes: str  # toggle, shows the 'n' shortcut
    btn_validate: str
    btn_save: str
    btn_puzzles: str

    # ── Puzzle list ──────────────────────────────────────────────────────
    puzzles_header: str
    puzzles_empty: str
    puzzle_item: str  # "{short_id}  {date}  difficulty {difficulty}"
    btn_load: str
    btn_delete: str

    # ── Delete confirmation ──────────────────────────────────────────────
    delete_title: str
    delete_confirm: str  # "...delete puzzle {short_id}?"


_EN = Strings(
    window_title="Sudoku DJ",
    status_ready="Ready",
    status_loading="Loading...",
    status_puzzle="Puzzle {short_id} | difficulty {difficulty}",
    status_notes_on="Notes mode ON",
    status_notes_off="Notes mode OFF",
    label_difficulty="Difficulty:",
    btn_generate="Generate Puzzle",
    btn_notes="Notes (Press 'n')",
    btn_validate="Validate Puzzle",
    btn_save="Save Puzzle",
    btn_puzzles="Puzzles",
    puzzles_header="Saved Puzzles",
    puzzles_empty="No saved puzzles",
    puzzle_item="{short_id}  {date}  difficulty {difficulty}",
    btn_load="Load",
    btn_delete="Delete",
    delete_title="Delete Puzzle",
    delete_confirm="Are you sure you want to delete puzzle {short_id}?",
)

_current: Strings = _EN


def t() -> Strings:
    """Return the active strings."""
    return _current
