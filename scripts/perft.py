#!/usr/bin/env python3
# ruff: noqa: E402
from __future__ import annotations

import argparse
import os
import sys
import time

# Allow running this script directly via `python scripts/perft.py`
# by adding src/ to sys.path.
SRC_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from chess_ai.engine.game import GameState
from chess_ai.engine.move import parse_move
from chess_ai.engine.perft import perft


def main() -> None:
    parser = argparse.ArgumentParser(description="Count legal move paths from the start position")
    parser.add_argument("--depth", type=int, default=3, help="Perft depth (default: 3)")
    parser.add_argument(
        "--moves",
        nargs="*",
        default=[],
        help="Moves to play from the start position first, e.g. e2e4 e7e5",
    )
    args = parser.parse_args()

    state = GameState.new()
    for text in args.moves:
        state = state.play_move(parse_move(text))
    start = time.perf_counter()
    nodes = perft(state, args.depth)
    dt = time.perf_counter() - start
    print(f"nodes={nodes} depth={args.depth} time_ms={int(dt*1000)} nps={int(nodes/max(dt,1e-9))}")


if __name__ == "__main__":
    main()
