from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional

import uvicorn

from ..agent.random_agent import RandomAgent
from ..agent.timer import DeferredMove
from ..config import Settings
from ..engine.game import GameState, IllegalMoveError
from ..engine.move import Move, parse_move, square_to_str, str_to_square
from ..engine.rules import Outcome
from ..engine.types import Color


logger = logging.getLogger(__name__)

Reader = Callable[[str], str]
Writer = Callable[[str], None]

HELP_TEXT = "commands: <from><to> (e.g. e2e4), moves <square>, board, help, quit"


class TerminalGame:
    """Human versus random agent in a terminal.

    I/O goes through ``read``/``write`` so the loop can be driven in tests.
    The agent's reply is committed by a ``DeferredMove`` after ``delay_s``.
    """

    def __init__(
        self,
        agent: RandomAgent,
        *,
        human: Color = Color.WHITE,
        delay_s: float = 1.5,
        read: Reader = input,
        write: Writer = print,
        state: Optional[GameState] = None,
    ) -> None:
        self.agent = agent
        self.human = human
        self.delay_s = delay_s
        self.read = read
        self.write = write
        self.state = state or GameState.new()
        self._pending: Optional[DeferredMove] = None

    def run(self) -> GameState:
        self.write(HELP_TEXT)
        self.show_board()
        try:
            while not self.state.is_over():
                if self.state.side_to_move is self.human:
                    try:
                        line = self.read(f"{_color_name(self.human)} to move> ")
                    except EOFError:
                        break
                    if not self.handle(line):
                        break
                else:
                    self.agent_turn()
        finally:
            self.cancel_pending()
        self.report_result()
        return self.state

    def handle(self, line: str) -> bool:
        """Process one line of human input; ``False`` ends the game."""
        words = line.strip().lower().split()
        if not words:
            return True
        cmd = words[0]
        if cmd in ("quit", "exit", "resign"):
            return False
        if cmd == "help":
            self.write(HELP_TEXT)
        elif cmd == "board":
            self.show_board()
        elif cmd == "moves":
            self._list_moves(words[1:])
        else:
            self._human_move(cmd)
        return True

    def agent_turn(self) -> None:
        move = self.agent.choose(self.state)
        if move is None:
            return
        self.write(f"agent is thinking about {move.to_uci()} ...")
        handle = DeferredMove(self.delay_s, lambda: self._commit(move))
        self._pending = handle
        handle.start()
        handle.wait()
        self._pending = None
        if handle.error is not None:
            raise handle.error

    def cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None

    def show_board(self) -> None:
        self.write(self.state.board.render())
        status = self.state.outcome()
        if status is Outcome.CHECK:
            self.write("Check.")

    def report_result(self) -> None:
        status = self.state.outcome()
        if status is Outcome.CHECKMATE:
            winner = self.state.winner()
            assert winner is not None
            self.write(f"Checkmate. {_color_name(winner)} wins.")
        elif status is Outcome.STALEMATE:
            self.write("Stalemate. Draw.")
        else:
            self.write("Game abandoned.")

    def _commit(self, move: Move) -> None:
        self.state = self.state.play_move(move)
        self.write(f"agent plays {move.to_uci()}")
        self.show_board()

    def _human_move(self, text: str) -> None:
        try:
            move = parse_move(text)
        except ValueError as e:
            self.write(f"cannot parse move: {e}")
            return
        try:
            self.state = self.state.play_move(move)
        except IllegalMoveError:
            self.write(f"illegal move: {move.to_uci()}")
            return
        self.show_board()

    def _list_moves(self, args: List[str]) -> None:
        if not args:
            moves = self.state.all_legal_moves()
            self.write(" ".join(m.to_uci() for m in moves) or "(none)")
            return
        try:
            from_sq = str_to_square(args[0])
        except ValueError as e:
            self.write(str(e))
            return
        targets = sorted(square_to_str(t) for t in self.state.legal_moves(from_sq))
        self.write(" ".join(targets) or "(none)")


def _color_name(color: Color) -> str:
    return "White" if color is Color.WHITE else "Black"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chess-ai", description="Chess against a random agent")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Serve static assets and the health endpoint")
    serve.add_argument("--host", type=str, default=None, help="Bind address (env: CHESS_AI_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port (env: PORT, default 3001)")

    play = sub.add_parser("play", help="Play in the terminal")
    play.add_argument(
        "--color", choices=("white", "black"), default="white", help="Side the human plays"
    )
    play.add_argument(
        "--delay-ms", type=int, default=None, help="Agent delay (env: AGENT_DELAY_MS, default 1500)"
    )
    play.add_argument("--seed", type=int, default=None, help="Seed for the agent's choices")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings.from_env()
    overrides = {}
    if args.command == "serve":
        if args.host is not None:
            overrides["host"] = args.host
        if args.port is not None:
            overrides["port"] = args.port
    elif args.delay_ms is not None:
        overrides["agent_delay_ms"] = args.delay_ms
    if overrides:
        settings = Settings(**{**settings.model_dump(), **overrides})

    logging.basicConfig(level=settings.log_level)

    if args.command == "serve":
        logger.info("Chess Ai server running at http://%s:%d", settings.host, settings.port)
        uvicorn.run(
            "chess_ai.protocol.http.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
        return

    game = TerminalGame(
        RandomAgent(seed=args.seed),
        human=Color.WHITE if args.color == "white" else Color.BLACK,
        delay_s=settings.agent_delay_s,
    )
    try:
        game.run()
    except KeyboardInterrupt:
        game.cancel_pending()
        print()


if __name__ == "__main__":
    main()
