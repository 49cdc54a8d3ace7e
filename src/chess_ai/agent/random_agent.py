from __future__ import annotations

import logging
import random
from typing import Optional

from ..engine.game import GameState
from ..engine.move import Move


logger = logging.getLogger(__name__)


class RandomAgent:
    """Opponent that plays a uniformly random legal move.

    No search or evaluation; ``seed`` makes the choice sequence reproducible.
    """

    name: str = "Random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def choose(self, state: GameState) -> Optional[Move]:
        legal = state.all_legal_moves()
        if not legal:
            return None
        move = self._rng.choice(legal)
        logger.debug("agent picked %s from %d legal moves", move.to_uci(), len(legal))
        return move
