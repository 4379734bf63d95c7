"""Coordinate type alias and helpers.

Board layout (row-major from Black's side)::

    (0, 0)=a8 ... (7, 0)=h8      <- Black back rank, y = 0
    ...
    (0, 7)=a1 ... (7, 7)=h1      <- White back rank, y = 7

A square is stored at index ``x + y * 8``.
"""

from __future__ import annotations

from typing import TypeAlias

Coord: TypeAlias = tuple[int, int]  # (x, y), both 0–7

BOARD_SIZE = 8

WHITE_PAWN_START_Y = 6
BLACK_PAWN_START_Y = 1
WHITE_BACK_RANK_Y = 7
BLACK_BACK_RANK_Y = 0


class OutOfBoundsError(ValueError):
    """Raised when a coordinate lies outside the 8x8 board."""

    def __init__(self, x: int, y: int) -> None:
        super().__init__(f"Coordinate out of bounds: ({x}, {y})")
        self.x = x
        self.y = y


def is_on_board(x: int, y: int) -> bool:
    """Whether ``(x, y)`` lies on the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def index_of(x: int, y: int) -> int:
    """Flat 0–63 index of ``(x, y)``; raises :class:`OutOfBoundsError`."""
    if not is_on_board(x, y):
        raise OutOfBoundsError(x, y)
    return x + y * BOARD_SIZE


def coord_of(index: int) -> Coord:
    """Inverse of :func:`index_of`."""
    if not 0 <= index < BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"Invalid square index: {index}")
    return (index % BOARD_SIZE, index // BOARD_SIZE)


def square_name(x: int, y: int) -> str:
    """Human-readable name, e.g. (4, 6) → 'e2'."""
    if not is_on_board(x, y):
        raise OutOfBoundsError(x, y)
    return chr(ord("a") + x) + str(BOARD_SIZE - y)


def parse_square(name: str) -> Coord:
    """Parse square name, e.g. 'e2' → (4, 6)."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return (ord(name[0]) - ord("a"), BOARD_SIZE - int(name[1]))
