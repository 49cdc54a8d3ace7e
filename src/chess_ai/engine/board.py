from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Mapping, Optional, Tuple, Union

from .move import str_to_square
from .types import BOARD_SIZE, Color, Coord, Kind, Piece, is_coord


Row = Tuple[Optional[Piece], ...]

BACK_RANK_ORDER = (
    Kind.ROOK,
    Kind.KNIGHT,
    Kind.BISHOP,
    Kind.QUEEN,
    Kind.KING,
    Kind.BISHOP,
    Kind.KNIGHT,
    Kind.ROOK,
)


@dataclass(frozen=True)
class Board:
    """Immutable 8x8 grid of optional pieces.

    Notes:
    - ``rows[0]`` is black's back rank, ``rows[7]`` white's.
    - Rows are tuples, so a board can be shared freely; every transition
      builds a new value.
    """

    rows: Tuple[Row, ...]

    def __post_init__(self) -> None:
        if len(self.rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in self.rows):
            raise ValueError("board must be 8x8")

    @classmethod
    def empty(cls) -> "Board":
        return cls(rows=tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def initial(cls) -> "Board":
        """Standard starting position."""

        def back(color: Color) -> Row:
            return tuple(Piece(color, kind) for kind in BACK_RANK_ORDER)

        def pawns(color: Color) -> Row:
            return (Piece(color, Kind.PAWN),) * BOARD_SIZE

        empty: Row = (None,) * BOARD_SIZE
        return cls(
            rows=(
                back(Color.BLACK),
                pawns(Color.BLACK),
                empty,
                empty,
                empty,
                empty,
                pawns(Color.WHITE),
                back(Color.WHITE),
            )
        )

    def at(self, coord: Coord) -> Optional[Piece]:
        """Return the piece on ``coord``, or ``None`` if empty or not a square."""
        if not is_coord(coord):
            return None
        row, col = coord
        return self.rows[row][col]

    def with_pieces(self, placements: Mapping[Union[Coord, str], Optional[Piece]]) -> "Board":
        """Return a copy with the given squares set (``None`` clears a square).

        Keys may be ``(row, col)`` pairs or algebraic names like ``"e4"``.

        Raises:
            ValueError: If a key is not a valid square.
        """
        grid = self._grid()
        for key, piece in placements.items():
            coord = str_to_square(key) if isinstance(key, str) else key
            if not is_coord(coord):
                raise ValueError(f"invalid square: {key!r}")
            row, col = coord
            grid[row][col] = piece
        return Board._from_grid(grid)

    def pieces(self, color: Optional[Color] = None) -> Iterator[Tuple[Coord, Piece]]:
        """Yield ``(coord, piece)`` in row-major order, optionally for one colour."""
        for r, row in enumerate(self.rows):
            for c, piece in enumerate(row):
                if piece is None:
                    continue
                if color is not None and piece.color is not color:
                    continue
                yield (r, c), piece

    def render(self, *, unicode: bool = True) -> str:
        """Text diagram with rank numbers on the left and files underneath."""
        lines: List[str] = []
        for r, row in enumerate(self.rows):
            cells = []
            for piece in row:
                if piece is None:
                    cells.append(".")
                else:
                    cells.append(piece.symbol() if unicode else str(piece))
            lines.append(f"{8 - r} " + " ".join(cells))
        lines.append("  a b c d e f g h")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render(unicode=False)

    # --- internals ---
    def _grid(self) -> List[List[Optional[Piece]]]:
        return [list(row) for row in self.rows]

    @staticmethod
    def _from_grid(grid: List[List[Optional[Piece]]]) -> "Board":
        return Board(rows=tuple(tuple(row) for row in grid))


def create_initial_board() -> Board:
    return Board.initial()


def apply_move(board: Board, from_sq: Coord, to_sq: Coord) -> Board:
    """Return the board after moving the piece on ``from_sq`` to ``to_sq``.

    Args:
        board (Board): Position before the move; never modified.
        from_sq (Coord): Origin square.
        to_sq (Coord): Destination square.

    Returns:
        Board: New board. When ``from_sq`` holds no piece (or either square
            is not on the board) the input board is returned unchanged.

    Notes:
        Legality is not checked here. A king moving two columns is treated as
        castling and brings the corner rook along; a pawn reaching the last
        rank becomes a queen.
    """
    piece = board.at(from_sq)
    if piece is None or not is_coord(to_sq) or from_sq == to_sq:
        return board

    grid = board._grid()
    fr, fc = from_sq
    tr, tc = to_sq

    if piece.kind is Kind.KING and abs(tc - fc) == 2:
        rook_from_col = 7 if tc > fc else 0
        rook_to_col = tc - 1 if tc > fc else tc + 1
        rook = grid[fr][rook_from_col]
        if rook is not None:
            grid[fr][rook_to_col] = rook
            grid[fr][rook_from_col] = None

    grid[tr][tc] = piece
    grid[fr][fc] = None

    if piece.kind is Kind.PAWN and tr in (0, 7):
        grid[tr][tc] = Piece(piece.color, Kind.QUEEN)

    return Board._from_grid(grid)
