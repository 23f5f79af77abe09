"""Piece record: placement, identity and per-turn move cache."""

from __future__ import annotations

from dataclasses import dataclass, field

from pawnwise.core.enums import PieceType, Team
from pawnwise.core.types import Position

# FEN character ↔ (Team, PieceType); uppercase is OUR, lowercase OPPONENT
_CHAR_MAP: dict[str, tuple[Team, PieceType]] = {
    "P": (Team.OUR, PieceType.PAWN),
    "N": (Team.OUR, PieceType.KNIGHT),
    "B": (Team.OUR, PieceType.BISHOP),
    "R": (Team.OUR, PieceType.ROOK),
    "Q": (Team.OUR, PieceType.QUEEN),
    "K": (Team.OUR, PieceType.KING),
    "p": (Team.OPPONENT, PieceType.PAWN),
    "n": (Team.OPPONENT, PieceType.KNIGHT),
    "b": (Team.OPPONENT, PieceType.BISHOP),
    "r": (Team.OPPONENT, PieceType.ROOK),
    "q": (Team.OPPONENT, PieceType.QUEEN),
    "k": (Team.OPPONENT, PieceType.KING),
}

_FEN_CHARS: dict[tuple[Team, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(slots=True)
class Piece:
    """A piece on the board.

    ``allowed_moves`` is a cache filled by :meth:`Board.calculate_all_moves`
    and is only trustworthy until the next move is played. ``en_passant`` is
    set on a pawn for exactly one move after it advanced two squares.
    """

    position: Position
    piece_type: PieceType
    team: Team
    en_passant: bool = False
    allowed_moves: list[Position] = field(default_factory=list)

    # ── Queries ──────────────────────────────────────────────────────────

    def is_pawn(self) -> bool:
        return self.piece_type == PieceType.PAWN

    def is_king(self) -> bool:
        return self.piece_type == PieceType.KING

    def same_position(self, position: Position) -> bool:
        return self.position == position

    def same_piece_position(self, other: Piece) -> bool:
        return self.position == other.position

    def can_move_to(self, position: Position) -> bool:
        return position in self.allowed_moves

    # ── Copying ──────────────────────────────────────────────────────────

    def clone(self) -> Piece:
        """Independent copy; mutating the clone never affects ``self``."""
        return Piece(
            self.position,
            self.piece_type,
            self.team,
            self.en_passant,
            list(self.allowed_moves),
        )

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """FEN character (uppercase = OUR, lowercase = OPPONENT)."""
        return _FEN_CHARS[(self.team, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Position) -> Piece:
        """Create piece from FEN character, e.g. 'N' → OUR knight."""
        try:
            team, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(position, ptype, team)
