"""Naive and legal move generation + check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rookie.core.enums import Color, PieceType
from rookie.core.types import (
    BLACK_PAWN_START_Y,
    BOARD_SIZE,
    WHITE_PAWN_START_Y,
    Coord,
    index_of,
)

if TYPE_CHECKING:
    from rookie.core.board import Board


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -2),
    (-2, -1),
    (-2, 1),
    (-1, 2),
    (1, 2),
    (2, 1),
    (2, -1),
    (1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

# White pawns advance toward y = 0, black pawns toward y = 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_Y: dict[Color, int] = {
    Color.WHITE: WHITE_PAWN_START_Y,
    Color.BLACK: BLACK_PAWN_START_Y,
}


# -- Precomputed lookup tables ---------------------------------------------


def _build_targets(
    offsets: tuple[tuple[int, int], ...],
) -> tuple[tuple[Coord, ...], ...]:
    targets: list[tuple[Coord, ...]] = []
    for idx in range(BOARD_SIZE * BOARD_SIZE):
        x = idx % BOARD_SIZE
        y = idx // BOARD_SIZE
        moves: list[Coord] = []
        for dx, dy in offsets:
            ax = x + dx
            ay = y + dy
            if 0 <= ax < BOARD_SIZE and 0 <= ay < BOARD_SIZE:
                moves.append((ax, ay))
        targets.append(tuple(moves))
    return tuple(targets)


def _build_rays(
    directions: tuple[tuple[int, int], ...],
) -> tuple[tuple[tuple[Coord, ...], ...], ...]:
    rays_per_square: list[tuple[tuple[Coord, ...], ...]] = []
    for idx in range(BOARD_SIZE * BOARD_SIZE):
        x = idx % BOARD_SIZE
        y = idx // BOARD_SIZE
        square_rays: list[tuple[Coord, ...]] = []
        for dx, dy in directions:
            ax = x + dx
            ay = y + dy
            ray: list[Coord] = []
            while 0 <= ax < BOARD_SIZE and 0 <= ay < BOARD_SIZE:
                ray.append((ax, ay))
                ax += dx
                ay += dy
            square_rays.append(tuple(ray))
        rays_per_square.append(tuple(square_rays))
    return tuple(rays_per_square)


_KNIGHT_TARGETS = _build_targets(KNIGHT_OFFSETS)
_KING_TARGETS = _build_targets(KING_OFFSETS)

_BISHOP_RAYS = _build_rays(BISHOP_DIRS)
_ROOK_RAYS = _build_rays(ROOK_DIRS)
_QUEEN_RAYS = _build_rays(QUEEN_DIRS)


class MoveGenerator:
    """Generates destination squares for pieces on a :class:`Board`.

    *Naive* moves follow each piece's movement pattern and never land on a
    friendly piece, but may leave the mover's own king in check. *Legal*
    moves are the naive moves that survive a speculative play-out on a
    copy of the board. The generator never mutates the board it wraps.

    No castling, en passant or promotion is generated.
    """

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def naive_moves(self, x: int, y: int) -> set[Coord]:
        """Destinations for the piece on ``(x, y)``, ignoring check.

        Returns an empty set for an empty square.
        """
        piece = self._board.get(x, y)
        if piece is None:
            return set()

        idx = index_of(x, y)
        color = piece.color
        ptype = piece.piece_type

        if ptype == PieceType.PAWN:
            return self._gen_pawn(x, y, color)
        if ptype == PieceType.KNIGHT:
            return self._gen_stepping(color, _KNIGHT_TARGETS[idx])
        if ptype == PieceType.KING:
            return self._gen_stepping(color, _KING_TARGETS[idx])
        if ptype == PieceType.ROOK:
            return self._gen_sliding(color, _ROOK_RAYS[idx])
        if ptype == PieceType.BISHOP:
            return self._gen_sliding(color, _BISHOP_RAYS[idx])
        return self._gen_sliding(color, _QUEEN_RAYS[idx])

    def legal_moves(self, x: int, y: int, color: Color) -> set[Coord]:
        """Naive moves from ``(x, y)`` that do not leave *color* in check.

        *color* is taken as given and is not checked against the piece on
        ``(x, y)``.
        """
        legal: set[Coord] = set()
        for to_x, to_y in self.naive_moves(x, y):
            board = self._board.copy()
            board.move_figure(x, y, to_x, to_y)
            if not MoveGenerator(board).is_in_check(color):
                legal.add((to_x, to_y))
        return legal

    # -- Attack detection ---------------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king among the naive moves of an enemy piece?

        Raises ``ValueError`` when *color* has no king on the board.
        """
        king = self._board.king_coord(color)
        return self.is_square_attacked(king, color.opposite)

    def is_square_attacked(self, sq: Coord, by_color: Color) -> bool:
        """Is *sq* a naive destination of any piece of *by_color*?"""
        for x, y, _piece in self._board.occupied(by_color):
            if sq in self.naive_moves(x, y):
                return True
        return False

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, x: int, y: int, color: Color) -> set[Coord]:
        # Off-board forward squares are not guarded: a pawn on its far edge
        # raises OutOfBoundsError from Board.get.
        board = self._board
        step = PAWN_DIRECTION[color]
        ahead = y + step
        moves: set[Coord] = set()

        if board.is_empty(x, ahead):
            moves.add((x, ahead))
            if y == PAWN_START_Y[color] and board.is_empty(x, ahead + step):
                moves.add((x, ahead + step))

        if x > 0 and not board.is_empty(x - 1, ahead):
            moves.add((x - 1, ahead))
        if x < BOARD_SIZE - 1 and not board.is_empty(x + 1, ahead):
            moves.add((x + 1, ahead))

        return self._drop_own(color, moves)

    def _gen_stepping(self, color: Color, targets: tuple[Coord, ...]) -> set[Coord]:
        return self._drop_own(color, set(targets))

    def _gen_sliding(
        self,
        color: Color,
        rays: tuple[tuple[Coord, ...], ...],
    ) -> set[Coord]:
        board = self._board
        moves: set[Coord] = set()
        for ray in rays:
            for to_x, to_y in ray:
                moves.add((to_x, to_y))
                if not board.is_empty(to_x, to_y):
                    break
        return self._drop_own(color, moves)

    def _drop_own(self, color: Color, moves: set[Coord]) -> set[Coord]:
        board = self._board
        kept: set[Coord] = set()
        for to_x, to_y in moves:
            target = board.get(to_x, to_y)
            if target is None or target.color != color:
                kept.add((to_x, to_y))
        return kept
