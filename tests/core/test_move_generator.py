"""Tests for MoveGenerator: per-piece patterns, check detection, legality."""

import pytest

from rookie.core.board import Board
from rookie.core.enums import Color, PieceType
from rookie.core.move_generator import MoveGenerator
from rookie.core.piece import Piece
from rookie.core.types import OutOfBoundsError


def _board_with(*pieces: tuple[int, int, Color, PieceType]) -> Board:
    board = Board()
    for x, y, color, pt in pieces:
        board.set(x, y, Piece(color, pt))
    return board


W, B = Color.WHITE, Color.BLACK


class TestStartingPosition:
    def test_pawn_single_and_double_step(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        assert gen.naive_moves(4, 6) == {(4, 5), (4, 4)}
        assert gen.legal_moves(4, 6, W) == {(4, 5), (4, 4)}

    def test_black_pawn_moves_down_the_board(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        assert gen.legal_moves(3, 1, B) == {(3, 2), (3, 3)}

    def test_knight_moves(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        assert gen.naive_moves(1, 7) == {(0, 5), (2, 5)}
        assert gen.naive_moves(6, 0) == {(5, 2), (7, 2)}

    def test_blocked_pieces_have_no_moves(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        for x in (0, 2, 3, 4, 5, 7):
            assert gen.naive_moves(x, 7) == set()
            assert gen.naive_moves(x, 0) == set()

    def test_twenty_legal_moves_per_side(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        for color in Color:
            total = sum(
                len(gen.legal_moves(x, y, color))
                for x, y, _ in start_board.occupied(color)
            )
            assert total == 20

    def test_empty_square_has_no_moves(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        assert gen.naive_moves(4, 4) == set()
        assert gen.legal_moves(4, 4, W) == set()


class TestPawn:
    def test_single_step_off_start_rank(self) -> None:
        board = _board_with((4, 5, W, PieceType.PAWN))
        assert MoveGenerator(board).naive_moves(4, 5) == {(4, 4)}

    def test_blocked_pawn_cannot_jump(self) -> None:
        board = _board_with((4, 6, W, PieceType.PAWN), (4, 5, B, PieceType.KNIGHT))
        assert MoveGenerator(board).naive_moves(4, 6) == set()

    def test_double_step_needs_empty_destination(self) -> None:
        board = _board_with((4, 6, W, PieceType.PAWN), (4, 4, B, PieceType.KNIGHT))
        assert MoveGenerator(board).naive_moves(4, 6) == {(4, 5)}

    def test_cannot_capture_straight_ahead(self) -> None:
        board = _board_with((2, 1, B, PieceType.PAWN), (2, 2, W, PieceType.PAWN))
        assert MoveGenerator(board).naive_moves(2, 1) == set()

    def test_diagonal_only_onto_enemy(self) -> None:
        board = _board_with(
            (4, 4, W, PieceType.PAWN),
            (3, 3, B, PieceType.PAWN),
            (5, 3, W, PieceType.PAWN),
        )
        assert MoveGenerator(board).naive_moves(4, 4) == {(4, 3), (3, 3)}

    def test_black_pawn_captures(self) -> None:
        board = _board_with((0, 3, B, PieceType.PAWN), (1, 4, W, PieceType.ROOK))
        assert MoveGenerator(board).naive_moves(0, 3) == {(0, 4), (1, 4)}

    def test_white_pawn_on_far_rank_raises(self) -> None:
        board = _board_with((2, 0, W, PieceType.PAWN))
        with pytest.raises(OutOfBoundsError):
            MoveGenerator(board).naive_moves(2, 0)

    def test_black_pawn_on_far_rank_raises(self) -> None:
        board = _board_with((5, 7, B, PieceType.PAWN))
        with pytest.raises(OutOfBoundsError):
            MoveGenerator(board).naive_moves(5, 7)


class TestSlidingPieces:
    def test_rook_stops_at_enemy_inclusive(self) -> None:
        board = _board_with((3, 4, W, PieceType.ROOK), (3, 1, B, PieceType.PAWN))
        moves = MoveGenerator(board).naive_moves(3, 4)
        upward = {(x, y) for x, y in moves if x == 3 and y < 4}
        assert upward == {(3, 3), (3, 2), (3, 1)}
        assert len(moves) == 13

    def test_rook_stops_before_own_piece(self) -> None:
        board = _board_with((3, 4, W, PieceType.ROOK), (6, 4, W, PieceType.PAWN))
        moves = MoveGenerator(board).naive_moves(3, 4)
        rightward = {(x, y) for x, y in moves if y == 4 and x > 3}
        assert rightward == {(4, 4), (5, 4)}

    def test_bishop_ray_with_blocker(self) -> None:
        board = _board_with((2, 5, B, PieceType.BISHOP), (4, 3, B, PieceType.PAWN))
        moves = MoveGenerator(board).naive_moves(2, 5)
        assert (3, 4) in moves
        assert (4, 3) not in moves
        assert (5, 2) not in moves
        assert moves == {(3, 4), (3, 6), (4, 7), (1, 6), (0, 7), (1, 4), (0, 3)}

    def test_queen_on_empty_board(self) -> None:
        board = _board_with((3, 3, W, PieceType.QUEEN))
        assert len(MoveGenerator(board).naive_moves(3, 3)) == 27

    def test_queen_is_rook_plus_bishop(self) -> None:
        base = [(1, 1, B, PieceType.PAWN), (5, 3, W, PieceType.KNIGHT), (3, 6, B, PieceType.ROOK)]
        queen = MoveGenerator(_board_with((3, 3, W, PieceType.QUEEN), *base)).naive_moves(3, 3)
        rook = MoveGenerator(_board_with((3, 3, W, PieceType.ROOK), *base)).naive_moves(3, 3)
        bishop = MoveGenerator(_board_with((3, 3, W, PieceType.BISHOP), *base)).naive_moves(3, 3)
        assert queen == rook | bishop


class TestSteppingPieces:
    def test_king_in_corner(self) -> None:
        board = _board_with((0, 0, W, PieceType.KING))
        assert MoveGenerator(board).naive_moves(0, 0) == {(1, 0), (0, 1), (1, 1)}

    def test_king_in_centre(self) -> None:
        board = _board_with((4, 4, B, PieceType.KING))
        assert len(MoveGenerator(board).naive_moves(4, 4)) == 8

    def test_knight_in_corner(self) -> None:
        board = _board_with((7, 7, W, PieceType.KNIGHT))
        assert MoveGenerator(board).naive_moves(7, 7) == {(6, 5), (5, 6)}

    def test_knight_jumps_over_and_captures(self) -> None:
        board = _board_with(
            (4, 4, W, PieceType.KNIGHT),
            (4, 3, B, PieceType.PAWN),
            (5, 2, B, PieceType.PAWN),
            (3, 2, W, PieceType.PAWN),
        )
        moves = MoveGenerator(board).naive_moves(4, 4)
        assert (5, 2) in moves
        assert (3, 2) not in moves
        assert len(moves) == 7


class TestNaiveMoveProperties:
    @pytest.mark.parametrize(
        "diagram",
        [
            """
            rnbqkbnr
            pppppppp
            ........
            ........
            ........
            ........
            PPPPPPPP
            RNBQKBNR
            """,
            """
            r...k..r
            pp.n.ppp
            ..p.pn..
            q..p..B.
            ...P.b..
            ..N.PN..
            PPQ..PPP
            R...KB.R
            """,
        ],
    )
    def test_never_own_square_or_own_piece(self, diagram: str) -> None:
        board = Board.from_diagram(diagram)
        gen = MoveGenerator(board)
        for x, y, piece in board.occupied():
            moves = gen.naive_moves(x, y)
            assert (x, y) not in moves
            for to_x, to_y in moves:
                target = board.get(to_x, to_y)
                assert target is None or target.color != piece.color

    def test_legal_is_subset_of_naive(self) -> None:
        board = Board.from_diagram(
            """
            r...k..r
            pp.n.ppp
            ..p.pn..
            q..p..B.
            ...P.b..
            ..N.PN..
            PPQ..PPP
            R...KB.R
            """
        )
        gen = MoveGenerator(board)
        for x, y, piece in board.occupied():
            assert gen.legal_moves(x, y, piece.color) <= gen.naive_moves(x, y)

    def test_generation_does_not_mutate_board(self, start_board: Board) -> None:
        snapshot = start_board.copy()
        gen = MoveGenerator(start_board)
        for x, y, piece in start_board.occupied():
            gen.legal_moves(x, y, piece.color)
        assert start_board == snapshot


class TestCheckDetection:
    def test_rook_on_open_file_gives_check(self) -> None:
        board = _board_with((4, 7, W, PieceType.KING), (4, 0, B, PieceType.ROOK))
        assert MoveGenerator(board).is_in_check(W)

    def test_blocked_file_is_not_check(self) -> None:
        board = _board_with(
            (4, 7, W, PieceType.KING),
            (4, 3, W, PieceType.PAWN),
            (4, 0, B, PieceType.ROOK),
        )
        assert not MoveGenerator(board).is_in_check(W)

    def test_pawn_gives_check_diagonally(self) -> None:
        board = _board_with((4, 7, W, PieceType.KING), (3, 6, B, PieceType.PAWN))
        assert MoveGenerator(board).is_in_check(W)

    def test_pawn_does_not_check_straight_ahead(self) -> None:
        board = _board_with((4, 7, W, PieceType.KING), (4, 6, B, PieceType.PAWN))
        assert not MoveGenerator(board).is_in_check(W)

    def test_start_position_not_in_check(self, start_board: Board) -> None:
        gen = MoveGenerator(start_board)
        assert not gen.is_in_check(W)
        assert not gen.is_in_check(B)

    def test_missing_king_raises(self) -> None:
        board = _board_with((0, 0, B, PieceType.ROOK))
        with pytest.raises(ValueError, match="No WHITE king"):
            MoveGenerator(board).is_in_check(W)


class TestLegalMoves:
    def test_king_must_leave_attacked_file(self) -> None:
        board = _board_with((4, 7, W, PieceType.KING), (4, 0, B, PieceType.ROOK))
        moves = MoveGenerator(board).legal_moves(4, 7, W)
        assert moves == {(3, 7), (5, 7), (3, 6), (5, 6)}
        assert all(x != 4 for x, _ in moves)

    def test_pinned_rook_stays_on_file(self) -> None:
        board = _board_with(
            (4, 7, W, PieceType.KING),
            (4, 5, W, PieceType.ROOK),
            (4, 0, B, PieceType.ROOK),
        )
        gen = MoveGenerator(board)
        assert (0, 5) in gen.naive_moves(4, 5)
        assert gen.legal_moves(4, 5, W) == {(4, 6), (4, 4), (4, 3), (4, 2), (4, 1), (4, 0)}

    def test_every_legal_move_resolves_check(self) -> None:
        board = _board_with(
            (4, 7, W, PieceType.KING),
            (0, 4, W, PieceType.BISHOP),
            (6, 5, W, PieceType.KNIGHT),
            (4, 0, B, PieceType.ROOK),
            (0, 0, B, PieceType.KING),
        )
        gen = MoveGenerator(board)
        assert gen.is_in_check(W)
        found = 0
        for x, y, _ in board.occupied(W):
            for to_x, to_y in gen.legal_moves(x, y, W):
                found += 1
                trial = board.copy()
                trial.move_figure(x, y, to_x, to_y)
                assert not MoveGenerator(trial).is_in_check(W)
        assert found > 0

    def test_color_argument_is_not_inferred(self) -> None:
        board = _board_with(
            (7, 7, W, PieceType.KING),
            (0, 0, B, PieceType.KING),
            (4, 3, B, PieceType.ROOK),
        )
        gen = MoveGenerator(board)
        assert (7, 3) in gen.legal_moves(4, 3, B)
        assert (7, 3) not in gen.legal_moves(4, 3, W)
        assert (4, 7) not in gen.legal_moves(4, 3, W)
