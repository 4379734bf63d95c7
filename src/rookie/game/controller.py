"""GameController: the central orchestrator of a two-player game.

Coordinates: GameState, Rules.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rookie.core.board import Board
from rookie.core.enums import Color, GameResult
from rookie.core.rules import DEFAULT_RULES, Rules
from rookie.core.types import Coord, square_name
from rookie.game.interfaces import GamePhase
from rookie.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameState"], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Validates and applies moves for two players sharing one board.

    Coordinates must already be on the board; the controller does not
    range-check them and lets :class:`~rookie.core.types.OutOfBoundsError`
    propagate.
    """

    __slots__ = ("_state", "_rules", "events")

    def __init__(self, rules: Rules | None = None) -> None:
        self._rules = rules or DEFAULT_RULES
        self._state = GameState(self._rules)
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def side_to_move(self) -> Color:
        return self._state.side_to_move

    # ── Game flow ────────────────────────────────────────────────────────

    def new_game(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        self._state = GameState(self._rules)
        self._state.setup(board, side_to_move)
        _LOGGER.info("New game, %s to move", side_to_move)
        self._emit_phase(GamePhase.AWAITING_MOVE)

    def possible_moves(self, x: int, y: int) -> set[Coord]:
        if self._state.is_game_over:
            return set()
        return self._state.possible_moves(x, y)

    def submit_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """Apply the move if it is legal for the side to move.

        Returns ``False`` without touching the board when the game is over,
        the origin is not the side to move's piece, or the destination is
        not a legal move.
        """
        if self._state.phase != GamePhase.AWAITING_MOVE:
            _LOGGER.debug("Move rejected: phase is %s", self._state.phase.name)
            return False

        if (to_x, to_y) not in self._state.possible_moves(from_x, from_y):
            _LOGGER.debug(
                "Move rejected: %s-%s is not legal for %s",
                square_name(from_x, from_y),
                square_name(to_x, to_y),
                self._state.side_to_move,
            )
            return False

        record = self._state.apply_move(from_x, from_y, to_x, to_y)
        _LOGGER.info(
            "%s %s-%s%s",
            record.piece,
            square_name(*record.from_sq),
            square_name(*record.to_sq),
            "+" if record.gave_check else "",
        )
        self._emit_move(record)

        if self._state.is_game_over:
            _LOGGER.info("Game over: %s", self._state.result.name)
            self._emit_game_over(self._state.result)
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._state)

    def _emit_game_over(self, result: GameResult) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
