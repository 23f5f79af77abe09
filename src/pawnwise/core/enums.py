"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Team(IntEnum):
    """Side of the board.

    ``OUR`` pawns advance toward rank 7, ``OPPONENT`` pawns toward rank 0.
    """

    OUR = 0
    OPPONENT = 1

    @property
    def opposite(self) -> Team:
        return Team(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Rank delta of a single pawn step."""
        return 1 if self == Team.OUR else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self == Team.OUR else 6

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Team.OUR else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6
