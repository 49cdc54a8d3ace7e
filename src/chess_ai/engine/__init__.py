from __future__ import annotations

from .attacks import find_king, is_in_check, is_square_attacked
from .board import Board, apply_move, create_initial_board
from .castling import CastlingRights, SideRights
from .game import GameState, IllegalMoveError
from .move import Move, parse_move, square_to_str, str_to_square
from .movegen import all_legal_moves, legal_moves, pseudo_legal_moves
from .rules import Outcome, has_any_legal_move, is_checkmate, is_stalemate, outcome
from .types import Color, Coord, Kind, Piece, opposite

__all__ = [
    "Board",
    "CastlingRights",
    "Color",
    "Coord",
    "GameState",
    "IllegalMoveError",
    "Kind",
    "Move",
    "Outcome",
    "Piece",
    "SideRights",
    "all_legal_moves",
    "apply_move",
    "create_initial_board",
    "find_king",
    "has_any_legal_move",
    "is_checkmate",
    "is_in_check",
    "is_square_attacked",
    "is_stalemate",
    "legal_moves",
    "opposite",
    "outcome",
    "parse_move",
    "pseudo_legal_moves",
    "square_to_str",
    "str_to_square",
]
