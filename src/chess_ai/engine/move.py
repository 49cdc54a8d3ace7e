from __future__ import annotations

from dataclasses import dataclass

from .types import Coord, on_board


@dataclass(frozen=True)
class Move:
    """A from/to pair of board coordinates.

    Attributes:
        from_sq (Coord): Origin square as ``(row, col)``.
        to_sq (Coord): Destination square as ``(row, col)``.
    """

    from_sq: Coord
    to_sq: Coord

    def to_uci(self) -> str:
        """Serialize the move into long algebraic form.

        Returns:
            str: Move encoded like ``"e2e4"``. Promotions are always to a
                queen and carry no suffix.
        """
        return square_to_str(self.from_sq) + square_to_str(self.to_sq)

    def __str__(self) -> str:
        return self.to_uci()


def parse_move(text: str) -> Move:
    """Parse a long algebraic move string.

    Args:
        text (str): Move such as ``"e2e4"``. A trailing ``"q"`` is accepted
            and ignored since pawns only ever promote to a queen.

    Returns:
        Move: Parsed move.

    Raises:
        ValueError: If the string has an invalid length, squares, or
            promotion piece.
    """
    text = text.strip().lower()
    if len(text) not in (4, 5):
        raise ValueError(f"invalid move length: {text!r}")
    if len(text) == 5 and text[4] != "q":
        raise ValueError(f"unsupported promotion piece: {text[4]!r}")
    return Move(str_to_square(text[0:2]), str_to_square(text[2:4]))


def str_to_square(s: str) -> Coord:
    """Convert algebraic notation into a ``(row, col)`` coordinate.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        Coord: Row 0 is rank 8, row 7 is rank 1.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    col = ord(s[0]) - ord("a")
    row = 8 - int(s[1])
    return (row, col)


def square_to_str(coord: Coord) -> str:
    """Convert a ``(row, col)`` coordinate into algebraic notation.

    Raises:
        ValueError: If ``coord`` is off the board.
    """
    row, col = coord
    if not on_board(row, col):
        raise ValueError(f"invalid square coordinate: {coord!r}")
    return chr(ord("a") + col) + str(8 - row)
