from __future__ import annotations

from .game import GameState


def perft(state: GameState, depth: int) -> int:
    """Count leaf positions reachable from ``state`` in exactly ``depth`` plies.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all legal child positions' perft(depth-1).

    Raises:
        ValueError: If ``depth`` is negative.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1
    moves = state.all_legal_moves()
    if depth == 1:
        return len(moves)
    return sum(perft(state.play_move(m), depth - 1) for m in moves)
