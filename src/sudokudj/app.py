"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from sudokudj.config import EditorConfig

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sudokudj", description="Sudoku grid editor backed by a puzzle service."
    )
    parser.add_argument("--api-url", help="base URL of the puzzle service")
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        type=str.upper,
        help="logging verbosity",
    )
    # Qt consumes its own options (-platform, -style ...).
    args, _unknown = parser.parse_known_args(argv)
    return args


def build_config(argv: Sequence[str] | None = None) -> EditorConfig:
    """Environment settings, overridden by command-line flags."""
    args = _parse_args(argv)
    config = EditorConfig.from_env()
    if args.api_url:
        config.api_base_url = args.api_url.rstrip("/")
    if args.log_level:
        config.log_level = args.log_level
    return config


def run_application(config: EditorConfig, argv: list[str] | None = None) -> int:
    """Create the Qt application, show the editor and run the event loop."""
    from PyQt6.QtWidgets import QApplication

    from sudokudj.ui.main_window import MainWindow
    from sudokudj.ui.styles.theme import APP_STYLE

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName("Sudoku DJ")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)

    _LOGGER.info("Using puzzle service at %s", config.api_base_url)
    window = MainWindow(config)
    window.show()
    return app.exec()


def main() -> None:
    """Launch the Sudoku DJ application."""
    config = build_config(sys.argv[1:])
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(run_application(config))


if __name__ == "__main__":
    main()
