"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from rookie.core import Board, Color, Rules

    board = Board.start_position()
    rules = Rules()
    rules.get_possible_moves(board, 4, 6, Color.WHITE)   # {(4, 5), (4, 4)}
    board.move_figure(4, 6, 4, 4)
    rules.is_check(board, Color.BLACK)                   # False
"""

from rookie.core.board import Board
from rookie.core.enums import Color, DrawRule, GameResult, PieceType
from rookie.core.move_generator import MoveGenerator
from rookie.core.piece import Piece
from rookie.core.policy import SCAN_RANKS, TerminalPolicy
from rookie.core.rules import DEFAULT_RULES, Rules
from rookie.core.types import (
    BOARD_SIZE,
    Coord,
    OutOfBoundsError,
    coord_of,
    index_of,
    is_on_board,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "DrawRule",
    "GameResult",
    "PieceType",
    # Types / helpers
    "BOARD_SIZE",
    "Coord",
    "OutOfBoundsError",
    "coord_of",
    "index_of",
    "is_on_board",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveGenerator",
    "Piece",
    "Rules",
    # Policy
    "DEFAULT_RULES",
    "SCAN_RANKS",
    "TerminalPolicy",
]
