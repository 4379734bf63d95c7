"""Game state: board, turn, captures, move history and end-of-game flags."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rookie.core.board import Board
from rookie.core.enums import Color, GameResult
from rookie.core.piece import Piece
from rookie.core.rules import DEFAULT_RULES, Rules
from rookie.core.types import Coord
from rookie.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Coord
    to_sq: Coord
    piece: Piece
    captured: Piece | None = None
    gave_check: bool = False


@dataclass
class GameState:
    """Manages game lifecycle: turn, captured pieces, history, result.

    This is a pure data/logic class with no threading, no UI. After every
    move the side now to move is tested for checkmate and the position
    for a draw, with the configured :class:`Rules`.
    """

    rules: Rules = DEFAULT_RULES
    board: Board = field(default_factory=Board.start_position, init=False)
    side_to_move: Color = field(default=Color.WHITE, init=False)
    phase: GamePhase = field(default=GamePhase.NOT_STARTED, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    checkmate: bool = field(default=False, init=False)
    draw: bool = field(default=False, init=False)
    captured_white: list[Piece] = field(default_factory=list, init=False)
    captured_black: list[Piece] = field(default_factory=list, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None, side_to_move: Color = Color.WHITE) -> None:
        """Initialise (or reset) the game, optionally from a custom board."""
        self.board = board.copy() if board is not None else Board.start_position()
        self.side_to_move = side_to_move
        self.phase = GamePhase.AWAITING_MOVE
        self.result = GameResult.IN_PROGRESS
        self.checkmate = False
        self.draw = False
        self.captured_white.clear()
        self.captured_black.clear()
        self.move_history.clear()

    # ── Queries ──────────────────────────────────────────────────────────

    def possible_moves(self, x: int, y: int) -> set[Coord]:
        """Legal destinations for the side to move's piece on ``(x, y)``.

        Empty squares and opponent pieces yield an empty set.
        """
        piece = self.board.get(x, y)
        if piece is None or piece.color != self.side_to_move:
            return set()
        return self.rules.get_possible_moves(self.board, x, y, self.side_to_move)

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    def captured(self, color: Color) -> list[Piece]:
        """Pieces of *color* that have been taken."""
        return self.captured_white if color == Color.WHITE else self.captured_black

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> MoveRecord:
        """Apply a validated move and return the history record.

        Caller is responsible for the legality check. The move is played and
        evaluated on a copy of the board; the state changes only once that
        succeeds, so an error from the rules leaves it as it was.
        """
        piece = self.board.get(from_x, from_y)
        if piece is None:
            raise ValueError(f"No piece to move at ({from_x}, {from_y})")

        # move_figure overwrites the destination, so read it first.
        captured = self.board.get(to_x, to_y)
        if captured is not None and captured.color == piece.color:
            captured = None

        board = self.board.copy()
        board.move_figure(from_x, from_y, to_x, to_y)
        next_side = self.side_to_move.opposite

        record = MoveRecord(
            from_sq=(from_x, from_y),
            to_sq=(to_x, to_y),
            piece=piece,
            captured=captured,
            gave_check=self.rules.is_check(board, next_side),
        )
        result = self.rules.game_result(board, next_side)

        self.board = board
        self.side_to_move = next_side
        if captured is not None:
            self.captured(captured.color).append(captured)
        self.move_history.append(record)
        self._set_result(result)
        return record

    # ── Internal ─────────────────────────────────────────────────────────

    def _set_result(self, result: GameResult) -> None:
        self.result = result
        self.checkmate = result in (GameResult.WHITE_WINS, GameResult.BLACK_WINS)
        self.draw = result == GameResult.DRAW
        if result == GameResult.IN_PROGRESS:
            return

        self.phase = GamePhase.GAME_OVER
        _LOGGER.debug("Terminal position reached: %s", result.name)
