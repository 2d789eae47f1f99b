"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from dama.core.board import Board
from dama.core.notation import board_from_diagram

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def single_capture_board() -> Board:
    """Blue pawn on d4 facing a lone yellow pawn on d5."""
    return board_from_diagram(
        """
        ........
        ........
        ........
        ...y....
        ...b....
        ........
        ........
        ........
        """
    )


@pytest.fixture
def blocked_blue_board() -> Board:
    """Blue's only pawn is boxed in: blue has no legal move."""
    return board_from_diagram(
        """
        ........
        ........
        y.......
        y.......
        byy.....
        ........
        ........
        ........
        """
    )
