"""Board coordinates.

Files and ranks are both 0-7; ``Position(0, 0)`` is a1 and ``Position(7, 7)``
is h8.
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Position:
    """Immutable (file, rank) coordinate with value equality."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not is_valid_coordinate(self.file, self.rank):
            raise ValueError(f"Position out of board: ({self.file}, {self.rank})")

    # ── Navigation ───────────────────────────────────────────────────────

    def offset(self, df: int, dr: int) -> Position | None:
        """Neighbour ``(df, dr)`` away, or ``None`` when it falls off the board."""
        file = self.file + df
        rank = self.rank + dr
        if is_valid_coordinate(file, rank):
            return Position(file, rank)
        return None

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``Position(4, 3).name == 'e4'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def parse(cls, name: str) -> Position:
        """Parse square name, e.g. ``'e4'`` → ``Position(4, 3)``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name


def is_valid_coordinate(file: int, rank: int) -> bool:
    """Check whether ``(file, rank)`` lies on the board."""
    return 0 <= file < 8 and 0 <= rank < 8
