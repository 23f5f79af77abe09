"""Per-piece-type movement geometry (pseudo-legal, king safety ignored).

Every rule object is stateless: it only reads the piece list it is handed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pawnwise.core.enums import PieceType, Team
from pawnwise.core.piece import Piece
from pawnwise.core.types import Position

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS


# -- Tile helpers -------------------------------------------------------------


def piece_at(position: Position, pieces: Iterable[Piece]) -> Piece | None:
    for piece in pieces:
        if piece.position == position:
            return piece
    return None


def tile_is_occupied(position: Position, pieces: Iterable[Piece]) -> bool:
    return piece_at(position, pieces) is not None


def tile_is_occupied_by_opponent(
    position: Position, pieces: Iterable[Piece], team: Team
) -> bool:
    target = piece_at(position, pieces)
    return target is not None and target.team != team


def tile_is_empty_or_occupied_by_opponent(
    position: Position, pieces: Iterable[Piece], team: Team
) -> bool:
    target = piece_at(position, pieces)
    return target is None or target.team != team


# -- Rule interface -----------------------------------------------------------


class MoveRules(ABC):
    """Movement rules for one piece type."""

    piece_type: PieceType

    @abstractmethod
    def is_valid_move(
        self,
        origin: Position,
        destination: Position,
        team: Team,
        pieces: list[Piece],
    ) -> bool:
        """Whether *origin* → *destination* is geometrically legal."""

    @abstractmethod
    def possible_moves(self, piece: Piece, pieces: list[Piece]) -> list[Position]:
        """All destinations *piece* could reach on *pieces*, in a stable order."""


class _SteppingRules(MoveRules):
    """Single-jump pieces: knight and king."""

    offsets: tuple[tuple[int, int], ...] = ()

    def is_valid_move(
        self,
        origin: Position,
        destination: Position,
        team: Team,
        pieces: list[Piece],
    ) -> bool:
        return destination in self._targets(origin, team, pieces)

    def possible_moves(self, piece: Piece, pieces: list[Piece]) -> list[Position]:
        return self._targets(piece.position, piece.team, pieces)

    def _targets(
        self, origin: Position, team: Team, pieces: list[Piece]
    ) -> list[Position]:
        moves: list[Position] = []
        for df, dr in self.offsets:
            to_pos = origin.offset(df, dr)
            if to_pos is not None and tile_is_empty_or_occupied_by_opponent(
                to_pos, pieces, team
            ):
                moves.append(to_pos)
        return moves


class _SlidingRules(MoveRules):
    """Ray pieces: bishop, rook, queen. A ray stops at the first occupied tile."""

    directions: tuple[tuple[int, int], ...] = ()

    def is_valid_move(
        self,
        origin: Position,
        destination: Position,
        team: Team,
        pieces: list[Piece],
    ) -> bool:
        return destination in self._targets(origin, team, pieces)

    def possible_moves(self, piece: Piece, pieces: list[Piece]) -> list[Position]:
        return self._targets(piece.position, piece.team, pieces)

    def _targets(
        self, origin: Position, team: Team, pieces: list[Piece]
    ) -> list[Position]:
        moves: list[Position] = []
        for df, dr in self.directions:
            to_pos = origin.offset(df, dr)
            while to_pos is not None:
                target = piece_at(to_pos, pieces)
                if target is None:
                    moves.append(to_pos)
                    to_pos = to_pos.offset(df, dr)
                    continue
                if target.team != team:
                    moves.append(to_pos)
                break
        return moves


# -- Concrete rules -----------------------------------------------------------


class PawnRules(MoveRules):
    """Forward step, double step from the start rank, diagonal captures.

    :meth:`possible_moves` also lists the diagonal behind an adjacent enemy
    pawn that just double-stepped (en passant); :meth:`is_valid_move` does not,
    the board resolves en passant itself.
    """

    piece_type = PieceType.PAWN

    def is_valid_move(
        self,
        origin: Position,
        destination: Position,
        team: Team,
        pieces: list[Piece],
    ) -> bool:
        direction = team.pawn_direction
        dx = destination.file - origin.file
        dy = destination.rank - origin.rank

        if dx == 0:
            if dy == direction:
                return not tile_is_occupied(destination, pieces)
            if dy == 2 * direction and origin.rank == team.pawn_start_rank:
                between = Position(origin.file, origin.rank + direction)
                return not tile_is_occupied(
                    between, pieces
                ) and not tile_is_occupied(destination, pieces)
            return False

        if abs(dx) == 1 and dy == direction:
            return tile_is_occupied_by_opponent(destination, pieces, team)
        return False

    def possible_moves(self, piece: Piece, pieces: list[Piece]) -> list[Position]:
        moves: list[Position] = []
        origin = piece.position
        team = piece.team
        direction = team.pawn_direction

        one_step = origin.offset(0, direction)
        if one_step is not None and not tile_is_occupied(one_step, pieces):
            moves.append(one_step)
            if origin.rank == team.pawn_start_rank:
                two_step = origin.offset(0, 2 * direction)
                if two_step is not None and not tile_is_occupied(two_step, pieces):
                    moves.append(two_step)

        for df in (-1, 1):
            cap_pos = origin.offset(df, direction)
            if cap_pos is None:
                continue
            if tile_is_occupied_by_opponent(cap_pos, pieces, team):
                moves.append(cap_pos)
                continue
            if tile_is_occupied(cap_pos, pieces):
                continue
            side_pos = origin.offset(df, 0)
            side = piece_at(side_pos, pieces) if side_pos is not None else None
            if (
                side is not None
                and side.team != team
                and side.is_pawn()
                and side.en_passant
            ):
                moves.append(cap_pos)
        return moves


class KnightRules(_SteppingRules):
    piece_type = PieceType.KNIGHT
    offsets = KNIGHT_OFFSETS


class BishopRules(_SlidingRules):
    piece_type = PieceType.BISHOP
    directions = BISHOP_DIRS


class RookRules(_SlidingRules):
    piece_type = PieceType.ROOK
    directions = ROOK_DIRS


class QueenRules(_SlidingRules):
    piece_type = PieceType.QUEEN
    directions = QUEEN_DIRS


class KingRules(_SteppingRules):
    """One step in any direction. Castling is not generated."""

    piece_type = PieceType.KING
    offsets = KING_OFFSETS


DEFAULT_RULES: Mapping[PieceType, MoveRules] = MappingProxyType(
    {
        rules.piece_type: rules
        for rules in (
            PawnRules(),
            KnightRules(),
            BishopRules(),
            RookRules(),
            QueenRules(),
            KingRules(),
        )
    }
)
