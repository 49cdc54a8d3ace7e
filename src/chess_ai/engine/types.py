from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


# (row, col); row 0 is black's back rank, row 7 is white's.
Coord = Tuple[int, int]

BOARD_SIZE = 8


class Color(str, Enum):
    WHITE = "w"
    BLACK = "b"

    @property
    def forward(self) -> int:
        """Row delta of a pawn push for this colour."""
        return -1 if self is Color.WHITE else 1

    @property
    def back_rank(self) -> int:
        return 7 if self is Color.WHITE else 0

    @property
    def pawn_rank(self) -> int:
        return 6 if self is Color.WHITE else 1


class Kind(str, Enum):
    KING = "K"
    QUEEN = "Q"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    PAWN = "P"


def opposite(color: Color) -> Color:
    return Color.BLACK if color is Color.WHITE else Color.WHITE


def on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def is_coord(value: object) -> bool:
    """True if ``value`` is a well-formed on-board ``(row, col)`` pair."""
    if not isinstance(value, tuple) or len(value) != 2:
        return False
    row, col = value
    if not isinstance(row, int) or not isinstance(col, int):
        return False
    if isinstance(row, bool) or isinstance(col, bool):
        return False
    return on_board(row, col)


@dataclass(frozen=True)
class Piece:
    """Immutable piece value; two pieces of the same colour and kind are equal."""

    color: Color
    kind: Kind

    def symbol(self) -> str:
        return _UNICODE[(self.color, self.kind)]

    def __str__(self) -> str:
        ch = self.kind.value
        return ch if self.color is Color.WHITE else ch.lower()


_UNICODE = {
    (Color.WHITE, Kind.KING): "♔",
    (Color.WHITE, Kind.QUEEN): "♕",
    (Color.WHITE, Kind.ROOK): "♖",
    (Color.WHITE, Kind.BISHOP): "♗",
    (Color.WHITE, Kind.KNIGHT): "♘",
    (Color.WHITE, Kind.PAWN): "♙",
    (Color.BLACK, Kind.KING): "♚",
    (Color.BLACK, Kind.QUEEN): "♛",
    (Color.BLACK, Kind.ROOK): "♜",
    (Color.BLACK, Kind.BISHOP): "♝",
    (Color.BLACK, Kind.KNIGHT): "♞",
    (Color.BLACK, Kind.PAWN): "♟",
}


KNIGHT_OFFSETS: Tuple[Coord, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)
KING_OFFSETS: Tuple[Coord, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)
ORTHOGONAL: Tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL: Tuple[Coord, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
