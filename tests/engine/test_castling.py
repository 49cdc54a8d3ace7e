from __future__ import annotations

from typing import Dict, Optional

from chess_ai.engine.board import Board
from chess_ai.engine.castling import CastlingRights, SideRights
from chess_ai.engine.game import GameState
from chess_ai.engine.move import str_to_square as sq
from chess_ai.engine.movegen import legal_moves
from chess_ai.engine.types import Color, Kind, Piece


W, B = Color.WHITE, Color.BLACK
WK = Piece(W, Kind.KING)
WR = Piece(W, Kind.ROOK)
WN = Piece(W, Kind.KNIGHT)
BK = Piece(B, Kind.KING)
BR = Piece(B, Kind.ROOK)


def _board(extra: Optional[Dict[str, Optional[Piece]]] = None) -> Board:
    placements: Dict[str, Optional[Piece]] = {
        "e1": WK,
        "a1": WR,
        "h1": WR,
        "e8": BK,
        "a8": BR,
        "h8": BR,
    }
    placements.update(extra or {})
    return Board.empty().with_pieces(placements)


def _king_moves(b: Board, rights: Optional[CastlingRights] = CastlingRights.initial()):
    return legal_moves(b, sq("e1"), W, rights)


def test_white_castling_available_when_clear_and_not_in_check() -> None:
    ms = _king_moves(_board())
    assert sq("g1") in ms
    assert sq("c1") in ms


def test_black_castling_available() -> None:
    ms = legal_moves(_board(), sq("e8"), B, CastlingRights.initial())
    assert sq("g8") in ms
    assert sq("c8") in ms


def test_no_castling_without_rights_argument() -> None:
    ms = _king_moves(_board(), None)
    assert sq("g1") not in ms and sq("c1") not in ms


def test_castling_requires_the_matching_right() -> None:
    rights = CastlingRights(white=SideRights(kingside=False, queenside=True))
    ms = _king_moves(_board(), rights)
    assert sq("g1") not in ms
    assert sq("c1") in ms
    assert sq("c1") not in _king_moves(_board(), CastlingRights.none())


def test_white_castling_blocked_when_in_check() -> None:
    b = _board({"e8": None, "h7": BK, "e5": BR})
    ms = _king_moves(b)
    assert sq("g1") not in ms
    assert sq("c1") not in ms


def test_castling_blocked_when_passing_through_attack() -> None:
    b = _board({"f8": BR, "h8": None})
    ms = _king_moves(b)
    assert sq("g1") not in ms
    assert sq("c1") in ms


def test_castling_blocked_when_destination_attacked() -> None:
    b = _board({"g8": BR, "h8": None})
    assert sq("g1") not in _king_moves(b)
    b = _board({"c8": BR, "a8": None})
    assert sq("c1") not in _king_moves(b)


def test_queenside_allows_attacked_b_file_square() -> None:
    # Only the squares the king crosses must be safe; b1 just has to be empty.
    b = _board({"b8": BR, "a8": None})
    assert sq("c1") in _king_moves(b)
    b = _board({"d8": BR, "a8": None})
    assert sq("c1") not in _king_moves(b)


def test_castling_blocked_by_piece_in_between() -> None:
    ms = _king_moves(_board({"g1": WN, "b1": WN}))
    assert sq("g1") not in ms
    assert sq("c1") not in ms


def test_castling_requires_own_rook_on_corner() -> None:
    ms = _king_moves(_board({"h1": None, "a1": WN}))
    assert sq("g1") not in ms
    assert sq("c1") not in ms


def test_king_off_home_square_cannot_castle() -> None:
    b = _board({"e1": None, "e2": WK})
    ms = legal_moves(b, sq("e2"), W, CastlingRights.initial())
    assert sq("g2") not in ms and sq("c2") not in ms


def test_castling_through_game_state_moves_rook_and_clears_rights() -> None:
    state = GameState(board=_board())
    after = state.play(sq("e1"), sq("g1"))
    assert after.board.at(sq("g1")) == WK
    assert after.board.at(sq("f1")) == WR
    assert after.board.at(sq("h1")) is None
    assert after.castling_rights.white == SideRights(kingside=False, queenside=False)
    assert after.castling_rights.black == SideRights()
