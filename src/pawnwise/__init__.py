"""pawnwise: chess move legality and execution engine."""

__version__ = "0.1.0"
