"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from rookie.core.enums import Color, PieceType
from rookie.core.piece import Piece
from rookie.core.types import (
    BLACK_BACK_RANK_Y,
    BLACK_PAWN_START_Y,
    BOARD_SIZE,
    WHITE_BACK_RANK_Y,
    WHITE_PAWN_START_Y,
    Coord,
    index_of,
)

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board addressed by ``(x, y)``.

    Every coordinate-taking method raises
    :class:`~rookie.core.types.OutOfBoundsError` for squares off the board.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Element access -----------------------------------------------------

    def get(self, x: int, y: int) -> Piece | None:
        return self._squares[index_of(x, y)]

    def set(self, x: int, y: int, piece: Piece) -> None:
        """Place *piece* on ``(x, y)``, overwriting any occupant."""
        self._squares[index_of(x, y)] = piece

    def clear_square(self, x: int, y: int) -> None:
        self._squares[index_of(x, y)] = None

    def is_empty(self, x: int, y: int) -> bool:
        return self._squares[index_of(x, y)] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color | None = None) -> Iterator[tuple[int, int, Piece]]:
        """Yield ``(x, y, piece)`` for occupied squares, optionally of *color*."""
        for idx, piece in enumerate(self._squares):
            if piece is None:
                continue
            if color is not None and piece.color != color:
                continue
            yield idx % BOARD_SIZE, idx // BOARD_SIZE, piece

    def king_coord(self, color: Color) -> Coord:
        """Return the square of *color*'s king (first found in index order)."""
        king = Piece(color, PieceType.KING)
        for idx, piece in enumerate(self._squares):
            if piece == king:
                return (idx % BOARD_SIZE, idx // BOARD_SIZE)
        raise ValueError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def move_figure(self, from_x: int, from_y: int, to_x: int, to_y: int) -> None:
        """Move the piece on ``from`` to ``to``.

        Whatever stood on ``to`` is overwritten and lost; callers that keep
        track of captures must read the destination first.
        """
        piece = self.get(from_x, from_y)
        if piece is None:
            raise ValueError(f"No piece to move at ({from_x}, {from_y})")
        self.set(to_x, to_y, piece)
        self.clear_square(from_x, from_y)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * (BOARD_SIZE * BOARD_SIZE)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def start_position(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for x in range(BOARD_SIZE):
            b.set(x, WHITE_PAWN_START_Y, Piece(Color.WHITE, PieceType.PAWN))
            b.set(x, BLACK_PAWN_START_Y, Piece(Color.BLACK, PieceType.PAWN))

        for x, pt in enumerate(_BACK_RANK):
            b.set(x, WHITE_BACK_RANK_Y, Piece(Color.WHITE, pt))
            b.set(x, BLACK_BACK_RANK_Y, Piece(Color.BLACK, pt))
        return b

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Build a board from eight rows of piece characters.

        The first row is ``y = 0`` (Black's back rank); ``.`` marks an empty
        square and whitespace inside a row is ignored::

            Board.from_diagram('''
                ....k...
                ........
                ........
                ........
                ........
                ........
                ........
                ....K...
            ''')
        """
        rows = ["".join(line.split()) for line in diagram.strip().splitlines()]
        rows = [row for row in rows if row]
        if len(rows) != BOARD_SIZE:
            raise ValueError(f"Diagram must have {BOARD_SIZE} rows, got {len(rows)}")

        b = cls()
        for y, row in enumerate(rows):
            if len(row) != BOARD_SIZE:
                raise ValueError(f"Diagram row {y} must have {BOARD_SIZE} squares: {row!r}")
            for x, char in enumerate(row):
                if char != ".":
                    b.set(x, y, Piece.from_char(char))
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(BOARD_SIZE):
            row = []
            for x in range(BOARD_SIZE):
                p = self.get(x, y)
                row.append(str(p) if p else ".")
            rows.append(f"{BOARD_SIZE - y} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
