"""Sudoku DJ — puzzle-grid editor client for a remote Sudoku service."""

__version__ = "0.3.0"
