"""Shared enumerations for the game layer."""

from __future__ import annotations

from enum import IntEnum, auto


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()
