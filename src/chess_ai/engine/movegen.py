from __future__ import annotations

from typing import FrozenSet, Iterable, List, Optional, Set

from .attacks import is_in_check, is_square_attacked
from .board import Board, apply_move
from .castling import KING_HOME_COL, KINGSIDE_ROOK_COL, QUEENSIDE_ROOK_COL, CastlingRights
from .move import Move
from .types import (
    DIAGONAL,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONAL,
    Color,
    Coord,
    Kind,
    Piece,
    on_board,
    opposite,
)


EMPTY: FrozenSet[Coord] = frozenset()


def pseudo_legal_moves(board: Board, from_sq: Coord) -> FrozenSet[Coord]:
    """Destinations reachable by the piece's movement pattern.

    Blocking and captures are respected; whether the move exposes the mover's
    own king is not. Castling is not included.

    Returns:
        FrozenSet[Coord]: Empty when ``from_sq`` holds no piece.
    """
    piece = board.at(from_sq)
    if piece is None:
        return EMPTY

    targets: Set[Coord] = set()
    kind = piece.kind
    if kind is Kind.PAWN:
        _pawn_targets(board, from_sq, piece.color, targets)
    elif kind is Kind.KNIGHT:
        _step_targets(from_sq, KNIGHT_OFFSETS, targets)
    elif kind is Kind.KING:
        _step_targets(from_sq, KING_OFFSETS, targets)
    elif kind is Kind.ROOK:
        _slide_targets(board, from_sq, ORTHOGONAL, targets)
    elif kind is Kind.BISHOP:
        _slide_targets(board, from_sq, DIAGONAL, targets)
    elif kind is Kind.QUEEN:
        _slide_targets(board, from_sq, ORTHOGONAL + DIAGONAL, targets)
    else:  # pragma: no cover - Kind is closed
        raise AssertionError(f"unhandled piece kind: {kind!r}")

    return frozenset(t for t in targets if not _is_own(board, t, piece.color))


def legal_moves(
    board: Board,
    from_sq: Coord,
    side_to_move: Color,
    castling_rights: Optional[CastlingRights] = None,
) -> FrozenSet[Coord]:
    """Legal destinations for the piece on ``from_sq``.

    Args:
        board (Board): Current position; not modified.
        from_sq (Coord): Square of the piece to move.
        side_to_move (Color): Only pieces of this colour have moves.
        castling_rights (Optional[CastlingRights]): When given, a king on its
            home square may also be offered its castling destinations.

    Returns:
        FrozenSet[Coord]: Every destination that does not leave the mover's
            king in check. Empty for an empty square, an enemy piece or a
            coordinate off the board.
    """
    piece = board.at(from_sq)
    if piece is None or piece.color is not side_to_move:
        return EMPTY

    candidates = set(pseudo_legal_moves(board, from_sq))
    if piece.kind is Kind.KING and castling_rights is not None:
        candidates.update(_castling_targets(board, from_sq, piece.color, castling_rights))

    return frozenset(
        to_sq
        for to_sq in candidates
        if not is_in_check(apply_move(board, from_sq, to_sq), piece.color)
    )


def all_legal_moves(
    board: Board,
    color: Color,
    castling_rights: Optional[CastlingRights] = None,
) -> List[Move]:
    """Every legal move for ``color``, ordered by origin then destination square."""
    moves: List[Move] = []
    for from_sq, _ in board.pieces(color):
        for to_sq in sorted(legal_moves(board, from_sq, color, castling_rights)):
            moves.append(Move(from_sq, to_sq))
    return moves


def _is_own(board: Board, square: Coord, color: Color) -> bool:
    occupant = board.at(square)
    return occupant is not None and occupant.color is color


def _pawn_targets(board: Board, from_sq: Coord, color: Color, out: Set[Coord]) -> None:
    r, c = from_sq
    step = color.forward
    one = (r + step, c)
    if on_board(*one) and board.at(one) is None:
        out.add(one)
        two = (r + 2 * step, c)
        if r == color.pawn_rank and on_board(*two) and board.at(two) is None:
            out.add(two)
    for dc in (-1, 1):
        cap = (r + step, c + dc)
        victim = board.at(cap)
        if victim is not None and victim.color is not color:
            out.add(cap)


def _step_targets(from_sq: Coord, offsets: Iterable[Coord], out: Set[Coord]) -> None:
    r, c = from_sq
    for dr, dc in offsets:
        if on_board(r + dr, c + dc):
            out.add((r + dr, c + dc))


def _slide_targets(board: Board, from_sq: Coord, directions: Iterable[Coord], out: Set[Coord]) -> None:
    r, c = from_sq
    for dr, dc in directions:
        tr, tc = r + dr, c + dc
        while on_board(tr, tc):
            out.add((tr, tc))
            if board.rows[tr][tc] is not None:
                break
            tr += dr
            tc += dc


def _castling_targets(
    board: Board, from_sq: Coord, color: Color, rights: CastlingRights
) -> List[Coord]:
    row = color.back_rank
    if from_sq != (row, KING_HOME_COL):
        return []
    side = rights.for_color(color)
    if not side.any():
        return []
    enemy = opposite(color)
    # No castling out of check.
    if is_square_attacked(board, from_sq, enemy):
        return []

    targets: List[Coord] = []
    if side.kingside and _rook_ready(board.at((row, KINGSIDE_ROOK_COL)), color):
        between = (5, 6)
        if _all_empty(board, row, between) and _none_attacked(board, row, (5, 6), enemy):
            targets.append((row, 6))
    if side.queenside and _rook_ready(board.at((row, QUEENSIDE_ROOK_COL)), color):
        between = (1, 2, 3)
        if _all_empty(board, row, between) and _none_attacked(board, row, (3, 2), enemy):
            targets.append((row, 2))
    return targets


def _rook_ready(piece: Optional[Piece], color: Color) -> bool:
    return piece is not None and piece.color is color and piece.kind is Kind.ROOK


def _all_empty(board: Board, row: int, cols: Iterable[int]) -> bool:
    return all(board.rows[row][col] is None for col in cols)


def _none_attacked(board: Board, row: int, cols: Iterable[int], by_color: Color) -> bool:
    return not any(is_square_attacked(board, (row, col), by_color) for col in cols)
