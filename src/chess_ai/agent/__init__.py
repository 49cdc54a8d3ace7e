from __future__ import annotations

from .random_agent import RandomAgent
from .timer import DeferredMove

__all__ = ["DeferredMove", "RandomAgent"]
