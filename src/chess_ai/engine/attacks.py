from __future__ import annotations

from typing import Optional

from .board import Board
from .types import (
    DIAGONAL,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONAL,
    Color,
    Coord,
    Kind,
    is_coord,
    on_board,
    opposite,
)


def find_king(board: Board, color: Color) -> Optional[Coord]:
    for coord, piece in board.pieces(color):
        if piece.kind is Kind.KING:
            return coord
    return None


def is_square_attacked(board: Board, square: Coord, by_color: Color) -> bool:
    """Return whether a piece of ``by_color`` could capture on ``square``.

    Args:
        board (Board): Position to inspect; not modified.
        square (Coord): Target square.
        by_color (Color): Attacking side.

    Returns:
        bool: ``True`` if attacked. Off-board squares are never attacked.

    Notes:
        Attacks are traced outwards from ``square`` rather than by generating
        the attacker's moves, so a pinned piece still counts as attacking.
    """
    if not is_coord(square):
        return False
    r, c = square

    # A pawn of by_color attacks diagonally forward, so look one row behind it.
    pr = r - by_color.forward
    for dc in (-1, 1):
        p = board.at((pr, c + dc))
        if p is not None and p.color is by_color and p.kind is Kind.PAWN:
            return True

    for dr, dc in KNIGHT_OFFSETS:
        p = board.at((r + dr, c + dc))
        if p is not None and p.color is by_color and p.kind is Kind.KNIGHT:
            return True

    for dr, dc in KING_OFFSETS:
        p = board.at((r + dr, c + dc))
        if p is not None and p.color is by_color and p.kind is Kind.KING:
            return True

    if _ray_hits(board, square, by_color, ORTHOGONAL, (Kind.ROOK, Kind.QUEEN)):
        return True
    return _ray_hits(board, square, by_color, DIAGONAL, (Kind.BISHOP, Kind.QUEEN))


def is_in_check(board: Board, color: Color) -> bool:
    king_sq = find_king(board, color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, opposite(color))


def _ray_hits(board, square, by_color, directions, sliders) -> bool:
    r, c = square
    for dr, dc in directions:
        tr, tc = r + dr, c + dc
        while on_board(tr, tc):
            p = board.rows[tr][tc]
            if p is not None:
                if p.color is by_color and p.kind in sliders:
                    return True
                break
            tr += dr
            tc += dc
    return False
