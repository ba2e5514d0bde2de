"""Fixtures shared by the core, game and ui test packages."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

_UI_TESTS = Path(__file__).parent / "ui"

# Headless Linux (CI, containers) has no display server for Qt to use.
_HEADLESS = not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
if sys.platform.startswith("linux") and _HEADLESS:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The process-wide QApplication."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(scope="session")
def piece_assets(qapp: object) -> object:
    """Bundled piece images, loaded once per run."""
    from chessgui.ui.resources import PieceAssets

    return PieceAssets.load()


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Close top-level widgets left open by a ui test."""
    if _UI_TESTS not in Path(str(request.node.fspath)).parents:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield
    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
