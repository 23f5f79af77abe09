"""Board behaviour settings."""

from __future__ import annotations

from dataclasses import dataclass

from pawnwise.core.enums import Team


@dataclass(slots=True, frozen=True)
class BoardConfig:
    """Settings carried by a :class:`~pawnwise.core.board.Board` and its successors.

    Args:
        defending_teams: Teams whose king moves are run through the
            king-safety filter. Only the opponent's king is filtered by
            default; use :meth:`symmetric` to filter both.
    """

    defending_teams: tuple[Team, ...] = (Team.OPPONENT,)

    def __post_init__(self) -> None:
        if len(set(self.defending_teams)) != len(self.defending_teams):
            raise ValueError(f"Duplicate defending teams: {self.defending_teams!r}")

    @classmethod
    def symmetric(cls) -> BoardConfig:
        return cls(defending_teams=(Team.OUR, Team.OPPONENT))
