"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from chessgui.settings import AppSettings
from chessgui.ui.resources import MissingResourceError, PieceAssets

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    """Route package logs to stderr at *level*."""
    logging.basicConfig(level=level.upper(), format=_LOG_FORMAT)


def _configure_application(app: QApplication, settings: AppSettings) -> None:
    """Apply app-wide settings."""
    app.setApplicationName(settings.window_title)
    app.setStyle("Fusion")


def run_application(
    argv: list[str] | None = None, settings: AppSettings | None = None
) -> int:
    """Create and run the main Qt application.

    Returns the process exit status; 1 if image assets cannot be loaded.
    """
    from PyQt6.QtWidgets import QApplication

    from chessgui.ui.main_window import MainWindow

    settings = settings or AppSettings()
    configure_logging(settings.log_level)

    app = QApplication.instance() or QApplication(sys.argv if argv is None else argv)
    _configure_application(app, settings)

    try:
        window = MainWindow(PieceAssets.load(), settings)
    except MissingResourceError:
        _LOGGER.exception("Cannot start: image assets are missing")
        return 1

    window.show()
    _LOGGER.info("Window ready (%dx%d)", *settings.layout.window_size)

    return app.exec()
