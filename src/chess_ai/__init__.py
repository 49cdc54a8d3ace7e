"""Chess against a random agent, on top of a pure rules engine."""

__version__ = "0.1.0"
