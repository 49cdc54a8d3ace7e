from __future__ import annotations

from chess_ai.engine.board import Board, apply_move
from chess_ai.engine.move import str_to_square as sq
from chess_ai.engine.types import Color, Kind, Piece


WK = Piece(Color.WHITE, Kind.KING)
WR = Piece(Color.WHITE, Kind.ROOK)
BK = Piece(Color.BLACK, Kind.KING)
BR = Piece(Color.BLACK, Kind.ROOK)


def _castling_board() -> Board:
    return Board.empty().with_pieces(
        {"e1": WK, "a1": WR, "h1": WR, "e8": BK, "a8": BR, "h8": BR}
    )


def test_apply_returns_new_board_and_does_not_mutate() -> None:
    b = Board.initial()
    b2 = apply_move(b, sq("e2"), sq("e4"))

    assert b == Board.initial()
    assert b2.at(sq("e4")) == Piece(Color.WHITE, Kind.PAWN)
    assert b2.at(sq("e2")) is None
    # Untouched rows are still equal, and the source rows were not changed
    assert b2.rows[0] == b.rows[0]
    assert b.at(sq("e2")) == Piece(Color.WHITE, Kind.PAWN)


def test_apply_from_empty_square_returns_same_board() -> None:
    b = Board.initial()
    assert apply_move(b, sq("e4"), sq("e5")) is b


def test_apply_with_off_board_coordinates_is_a_no_op() -> None:
    b = Board.initial()
    assert apply_move(b, (9, 0), sq("e4")) is b
    assert apply_move(b, sq("e2"), (8, 4)) is b


def test_apply_capture_replaces_target() -> None:
    b = Board.empty().with_pieces({"a1": WR, "a8": BR})
    b2 = apply_move(b, sq("a1"), sq("a8"))
    assert b2.at(sq("a8")) == WR
    assert b2.at(sq("a1")) is None
    assert len(list(b2.pieces())) == 1


def test_apply_handles_kingside_castling_rook_motion() -> None:
    b = _castling_board()
    b2 = apply_move(b, sq("e1"), sq("g1"))
    assert b2.at(sq("g1")) == WK
    assert b2.at(sq("f1")) == WR
    assert b2.at(sq("h1")) is None
    assert b2.at(sq("e1")) is None
    # Original unchanged
    assert b.at(sq("h1")) == WR


def test_apply_handles_queenside_castling_rook_motion() -> None:
    b = _castling_board()
    b2 = apply_move(b, sq("e8"), sq("c8"))
    assert b2.at(sq("c8")) == BK
    assert b2.at(sq("d8")) == BR
    assert b2.at(sq("a8")) is None
    assert b2.at(sq("b8")) is None


def test_single_king_step_does_not_move_rook() -> None:
    b = _castling_board()
    b2 = apply_move(b, sq("e1"), sq("f1"))
    assert b2.at(sq("f1")) == WK
    assert b2.at(sq("h1")) == WR
