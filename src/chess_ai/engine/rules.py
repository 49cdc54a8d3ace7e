from __future__ import annotations

from enum import Enum
from typing import Optional

from .attacks import is_in_check
from .board import Board
from .castling import CastlingRights
from .movegen import legal_moves
from .types import Color


class Outcome(str, Enum):
    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"


def has_any_legal_move(
    board: Board, color: Color, castling_rights: Optional[CastlingRights] = None
) -> bool:
    for from_sq, _ in board.pieces(color):
        if legal_moves(board, from_sq, color, castling_rights):
            return True
    return False


def is_checkmate(
    board: Board, color: Color, castling_rights: Optional[CastlingRights] = None
) -> bool:
    return is_in_check(board, color) and not has_any_legal_move(board, color, castling_rights)


def is_stalemate(
    board: Board, color: Color, castling_rights: Optional[CastlingRights] = None
) -> bool:
    return not is_in_check(board, color) and not has_any_legal_move(board, color, castling_rights)


def outcome(
    board: Board, color: Color, castling_rights: Optional[CastlingRights] = None
) -> Outcome:
    """Classify the position for the side to move."""
    check = is_in_check(board, color)
    if has_any_legal_move(board, color, castling_rights):
        return Outcome.CHECK if check else Outcome.ONGOING
    return Outcome.CHECKMATE if check else Outcome.STALEMATE
