"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from rookie.core.board import Board
from rookie.core.policy import TerminalPolicy
from rookie.core.rules import Rules


@pytest.fixture
def start_board() -> Board:
    return Board.start_position()


@pytest.fixture
def rules() -> Rules:
    """Rules with the default policy: truncated scan, no-legal-moves draw."""
    return Rules()


@pytest.fixture
def standard_rules() -> Rules:
    """Rules with a full-board scan and the stalemate draw rule."""
    return Rules(TerminalPolicy.standard())
