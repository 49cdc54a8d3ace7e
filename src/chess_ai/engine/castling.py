from __future__ import annotations

from dataclasses import dataclass, replace

from .board import Board
from .types import Color, Coord, Kind


KING_HOME_COL = 4
KINGSIDE_ROOK_COL = 7
QUEENSIDE_ROOK_COL = 0


@dataclass(frozen=True)
class SideRights:
    kingside: bool = True
    queenside: bool = True

    def any(self) -> bool:
        return self.kingside or self.queenside


@dataclass(frozen=True)
class CastlingRights:
    """Per-colour castling eligibility.

    Rights are only ever revoked; ``after_move`` never turns a flag back on.
    """

    white: SideRights = SideRights()
    black: SideRights = SideRights()

    @classmethod
    def initial(cls) -> "CastlingRights":
        return cls()

    @classmethod
    def none(cls) -> "CastlingRights":
        lost = SideRights(kingside=False, queenside=False)
        return cls(white=lost, black=lost)

    def for_color(self, color: Color) -> SideRights:
        return self.white if color is Color.WHITE else self.black

    def revoke(self, color: Color, *, kingside: bool = False, queenside: bool = False) -> "CastlingRights":
        current = self.for_color(color)
        updated = SideRights(
            kingside=current.kingside and not kingside,
            queenside=current.queenside and not queenside,
        )
        if updated == current:
            return self
        if color is Color.WHITE:
            return replace(self, white=updated)
        return replace(self, black=updated)

    def after_move(self, board: Board, from_sq: Coord, to_sq: Coord) -> "CastlingRights":
        """Rights after ``from_sq -> to_sq`` is played on ``board``.

        Args:
            board (Board): Position *before* the move.
            from_sq (Coord): Origin square.
            to_sq (Coord): Destination square.

        Returns:
            CastlingRights: Updated rights. A moving king drops both of its
                side's rights; a rook leaving, or captured on, its home corner
                drops the matching right.
        """
        rights = self
        moving = board.at(from_sq)
        captured = board.at(to_sq)

        if moving is not None:
            if moving.kind is Kind.KING:
                rights = rights.revoke(moving.color, kingside=True, queenside=True)
            elif moving.kind is Kind.ROOK:
                rights = rights._revoke_rook_corner(moving.color, from_sq)
        if captured is not None and captured.kind is Kind.ROOK:
            rights = rights._revoke_rook_corner(captured.color, to_sq)
        return rights

    def _revoke_rook_corner(self, color: Color, square: Coord) -> "CastlingRights":
        row, col = square
        if row != color.back_rank:
            return self
        if col == KINGSIDE_ROOK_COL:
            return self.revoke(color, kingside=True)
        if col == QUEENSIDE_ROOK_COL:
            return self.revoke(color, queenside=True)
        return self
