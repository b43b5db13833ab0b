"""Shared pytest fixtures: headless Qt, one QApplication, clean UI state."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

_UI_TESTS = (Path(__file__).parent / "ui").resolve()

# Without a display server Qt needs the offscreen platform plugin.
if not (os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")):
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The process-wide QApplication, created on first use."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    """Every test starts and ends on the English string table."""
    from simplechess.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")


@pytest.fixture(autouse=True)
def _close_windows(request: pytest.FixtureRequest) -> Iterator[None]:
    """Tests under ``ui/`` get a QApplication and leave no windows open."""
    if _UI_TESTS not in Path(str(request.path)).resolve().parents:
        yield
        return

    app = request.getfixturevalue("qapp")
    yield

    for widget in app.topLevelWidgets():
        widget.close()
    app.processEvents()
