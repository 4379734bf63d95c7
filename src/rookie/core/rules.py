"""High-level chess rules: check, checkmate and draw detection."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from rookie.core.enums import Color, DrawRule, GameResult
from rookie.core.move_generator import MoveGenerator
from rookie.core.policy import TerminalPolicy
from rookie.core.types import BOARD_SIZE, Coord

if TYPE_CHECKING:
    from rookie.core.board import Board
    from rookie.core.piece import Piece


class Rules:
    """Rule-checker that operates on a :class:`Board`.

    Terminal-state detection has no notion of repetition, move counters or
    insufficient material; a game ends only when pieces run out of legal
    moves.
    """

    __slots__ = ("_policy",)

    def __init__(self, policy: TerminalPolicy | None = None) -> None:
        self._policy = policy or TerminalPolicy()

    @property
    def policy(self) -> TerminalPolicy:
        return self._policy

    # -- Per-square queries -------------------------------------------------

    @staticmethod
    def get_possible_moves(board: Board, x: int, y: int, color: Color) -> set[Coord]:
        """Legal destinations for the piece on ``(x, y)``, judged for *color*."""
        return MoveGenerator(board).legal_moves(x, y, color)

    @staticmethod
    def is_check(board: Board, color: Color) -> bool:
        return MoveGenerator(board).is_in_check(color)

    # -- Terminal state -----------------------------------------------------

    def is_checkmate(self, board: Board, color: Color) -> bool:
        """*color* has no legal move in the scanned ranks and it is no draw.

        Whether *color* is actually in check is not consulted; the draw
        test is what separates mate from a blocked position.
        """
        gen = MoveGenerator(board)
        for x, y, piece in self._scanned(board):
            if piece.color == color and gen.legal_moves(x, y, color):
                return False
        return not self.is_draw(board, color)

    def is_draw(self, board: Board, side_to_move: Color | None = None) -> bool:
        """Whether the position is drawn under the configured draw rule.

        With ``DrawRule.NO_LEGAL_MOVES`` every piece of both colors in the
        scanned ranks must be without a legal move and *side_to_move* is
        ignored. ``DrawRule.STALEMATE`` requires *side_to_move*.
        """
        gen = MoveGenerator(board)

        if self._policy.draw_rule == DrawRule.STALEMATE:
            if side_to_move is None:
                raise ValueError("side_to_move is required for the stalemate draw rule")
            if gen.is_in_check(side_to_move):
                return False
            return not any(
                gen.legal_moves(x, y, side_to_move)
                for x, y, piece in self._scanned(board)
                if piece.color == side_to_move
            )

        for x, y, piece in self._scanned(board):
            if gen.legal_moves(x, y, piece.color):
                return False
        return True

    def game_result(self, board: Board, side_to_move: Color) -> GameResult:
        """Determine the result with *side_to_move* about to play."""
        if self.is_checkmate(board, side_to_move):
            return (
                GameResult.BLACK_WINS
                if side_to_move == Color.WHITE
                else GameResult.WHITE_WINS
            )
        if self.is_draw(board, side_to_move):
            return GameResult.DRAW
        return GameResult.IN_PROGRESS

    # -- Internal -----------------------------------------------------------

    def _scanned(self, board: Board) -> Iterator[tuple[int, int, Piece]]:
        """Occupied squares visited by the terminal scans, file by file."""
        for x in range(BOARD_SIZE):
            for y in range(self._policy.scan_ranks):
                piece = board.get(x, y)
                if piece is not None:
                    yield x, y, piece


DEFAULT_RULES = Rules()
