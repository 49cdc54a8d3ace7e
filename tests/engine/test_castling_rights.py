from __future__ import annotations

from chess_ai.engine.board import Board
from chess_ai.engine.castling import CastlingRights, SideRights
from chess_ai.engine.game import GameState
from chess_ai.engine.move import str_to_square as sq
from chess_ai.engine.types import Color, Kind, Piece


W, B = Color.WHITE, Color.BLACK
WK = Piece(W, Kind.KING)
WR = Piece(W, Kind.ROOK)
BK = Piece(B, Kind.KING)
BR = Piece(B, Kind.ROOK)


def _board() -> Board:
    return Board.empty().with_pieces(
        {"e1": WK, "a1": WR, "h1": WR, "e8": BK, "a8": BR, "h8": BR}
    )


def test_initial_and_none() -> None:
    assert CastlingRights.initial().white == SideRights(True, True)
    assert CastlingRights.initial().black == SideRights(True, True)
    assert not CastlingRights.none().white.any()
    assert not CastlingRights.none().black.any()


def test_king_move_clears_both_rights_of_its_colour() -> None:
    r = CastlingRights.initial().after_move(_board(), sq("e1"), sq("e2"))
    assert r.white == SideRights(False, False)
    assert r.black == SideRights(True, True)


def test_rook_move_clears_matching_side_only() -> None:
    r = CastlingRights.initial().after_move(_board(), sq("h1"), sq("h2"))
    assert r.white == SideRights(kingside=False, queenside=True)
    r = CastlingRights.initial().after_move(_board(), sq("a8"), sq("b8"))
    assert r.black == SideRights(kingside=True, queenside=False)


def test_rook_capture_on_corner_clears_opponent_right() -> None:
    # a1xa8: white loses queenside (rook left a1), black loses queenside (rook taken)
    r = CastlingRights.initial().after_move(_board(), sq("a1"), sq("a8"))
    assert r.white == SideRights(kingside=True, queenside=False)
    assert r.black == SideRights(kingside=True, queenside=False)


def test_rook_away_from_corner_leaves_rights() -> None:
    b = _board().with_pieces({"h4": WR})
    r = CastlingRights.initial().after_move(b, sq("h4"), sq("g4"))
    assert r == CastlingRights.initial()


def test_quiet_moves_of_other_pieces_leave_rights() -> None:
    r = CastlingRights.initial().after_move(Board.initial(), sq("g1"), sq("f3"))
    assert r is not None and r == CastlingRights.initial()


def test_revocation_is_monotonic() -> None:
    state = GameState(board=_board())
    state = state.play(sq("h1"), sq("h2"))
    state = state.play(sq("a8"), sq("a7"))
    state = state.play(sq("h2"), sq("h1"))
    state = state.play(sq("a7"), sq("a8"))
    assert state.castling_rights.white == SideRights(kingside=False, queenside=True)
    assert state.castling_rights.black == SideRights(kingside=True, queenside=False)
    assert sq("g1") not in state.legal_moves(sq("e1"))
    assert sq("c1") in state.legal_moves(sq("e1"))


def test_revoke_returns_same_object_when_nothing_changes() -> None:
    rights = CastlingRights.none()
    assert rights.revoke(W, kingside=True, queenside=True) is rights
