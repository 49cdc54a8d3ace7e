from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, List, Optional, Tuple

from .attacks import is_in_check
from .board import Board, apply_move
from .castling import CastlingRights
from .move import Move
from .movegen import all_legal_moves, legal_moves
from .rules import Outcome, outcome
from .types import Color, Coord, opposite


class IllegalMoveError(ValueError):
    """Raised when a move outside the legal set is played."""


@dataclass(frozen=True)
class GameState:
    """Whole game position passed from move to move.

    Responsibility: pair a board with the side to move and castling rights,
    expose legal moves, and produce the next state. States are immutable;
    ``play`` returns a new one.
    """

    board: Board
    side_to_move: Color = Color.WHITE
    castling_rights: CastlingRights = field(default_factory=CastlingRights.initial)
    last_move: Optional[Move] = None
    history: Tuple[Move, ...] = ()

    @classmethod
    def new(cls) -> "GameState":
        return cls(board=Board.initial())

    def legal_moves(self, from_sq: Coord) -> FrozenSet[Coord]:
        return legal_moves(self.board, from_sq, self.side_to_move, self.castling_rights)

    def all_legal_moves(self) -> List[Move]:
        return all_legal_moves(self.board, self.side_to_move, self.castling_rights)

    def play(self, from_sq: Coord, to_sq: Coord) -> "GameState":
        """Play a move for the side to move.

        Raises:
            IllegalMoveError: If ``to_sq`` is not a legal destination of the
                piece on ``from_sq``.
        """
        if to_sq not in self.legal_moves(from_sq):
            raise IllegalMoveError("illegal move")
        move = Move(from_sq, to_sq)
        return GameState(
            board=apply_move(self.board, from_sq, to_sq),
            side_to_move=opposite(self.side_to_move),
            castling_rights=self.castling_rights.after_move(self.board, from_sq, to_sq),
            last_move=move,
            history=self.history + (move,),
        )

    def play_move(self, move: Move) -> "GameState":
        return self.play(move.from_sq, move.to_sq)

    # --- State flags for the host ---
    def in_check(self) -> bool:
        return is_in_check(self.board, self.side_to_move)

    def outcome(self) -> Outcome:
        return outcome(self.board, self.side_to_move, self.castling_rights)

    def checkmate(self) -> bool:
        return self.outcome() is Outcome.CHECKMATE

    def stalemate(self) -> bool:
        return self.outcome() is Outcome.STALEMATE

    def is_over(self) -> bool:
        return self.outcome() in (Outcome.CHECKMATE, Outcome.STALEMATE)

    def winner(self) -> Optional[Color]:
        """The side that delivered mate, if any."""
        if self.checkmate():
            return opposite(self.side_to_move)
        return None

    def move_history_uci(self) -> List[str]:
        return [m.to_uci() for m in self.history]
