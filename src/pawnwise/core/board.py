"""Board - piece collection plus move recomputation, king safety and execution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping

from pawnwise.core.config import BoardConfig
from pawnwise.core.enums import PieceType, Team
from pawnwise.core.move_rules import DEFAULT_RULES, MoveRules
from pawnwise.core.piece import Piece
from pawnwise.core.types import Position

_LOGGER = logging.getLogger(__name__)

PromotionCallback = Callable[[Piece], None]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _find_king(pieces: Iterable[Piece], team: Team) -> Piece:
    for piece in pieces:
        if piece.is_king() and piece.team == team:
            return piece
    raise ValueError(f"No {team.name} king on board")


class Board:
    """Snapshot of all pieces on the board.

    Boards behave as values: :meth:`calculate_all_moves`, :meth:`play_move`
    and :meth:`promote_pawn` build a new board over fresh piece copies and
    never touch the pieces of ``self``.
    """

    __slots__ = ("pieces", "rules", "config", "pending_promotion")

    def __init__(
        self,
        pieces: Iterable[Piece] = (),
        rules: Mapping[PieceType, MoveRules] | None = None,
        config: BoardConfig | None = None,
        pending_promotion: Piece | None = None,
    ) -> None:
        self.pieces: list[Piece] = list(pieces)
        self.rules = rules if rules is not None else DEFAULT_RULES
        self.config = config if config is not None else BoardConfig()
        # Pawn that reached its last rank and still waits for promote_pawn().
        self.pending_promotion = pending_promotion

    # -- Query helpers ------------------------------------------------------

    def piece_at(self, position: Position) -> Piece | None:
        for piece in self.pieces:
            if piece.same_position(position):
                return piece
        return None

    def pieces_of(self, team: Team) -> list[Piece]:
        return [piece for piece in self.pieces if piece.team == team]

    def king(self, team: Team) -> Piece:
        """The single king of *team*."""
        return _find_king(self.pieces, team)

    def possible_moves(
        self, piece: Piece, pieces: list[Piece] | None = None
    ) -> list[Position]:
        """Pseudo-legal destinations of *piece* on *pieces* (default: this board)."""
        layout = self.pieces if pieces is None else pieces
        return self.rules[piece.piece_type].possible_moves(piece, layout)

    def is_valid_move(
        self,
        origin: Position,
        destination: Position,
        piece_type: PieceType,
        team: Team,
    ) -> bool:
        return self.rules[piece_type].is_valid_move(
            origin, destination, team, self.pieces
        )

    def is_en_passant_move(
        self,
        origin: Position,
        destination: Position,
        piece_type: PieceType,
        team: Team,
    ) -> bool:
        """Whether a pawn of *team* moving *origin* → *destination* captures en passant."""
        if piece_type != PieceType.PAWN:
            return False
        if abs(destination.file - origin.file) != 1:
            return False
        if destination.rank - origin.rank != team.pawn_direction:
            return False
        if self.piece_at(destination) is not None:
            return False

        target = self.piece_at(Position(destination.file, origin.rank))
        return (
            target is not None
            and target.is_pawn()
            and target.team != team
            and target.en_passant
        )

    # -- Move recomputation -------------------------------------------------

    def calculate_all_moves(self) -> Board:
        """Fill every piece's ``allowed_moves`` and return the resulting board."""
        pieces = [piece.clone() for piece in self.pieces]
        for piece in pieces:
            piece.allowed_moves = self.possible_moves(piece, pieces)

        for team in self.config.defending_teams:
            self.check_king_moves(pieces, team)

        return self._derive(pieces, self._carry_pending(pieces))

    def check_king_moves(
        self, pieces: list[Piece], team: Team = Team.OPPONENT
    ) -> None:
        """Drop the destinations of *team*'s king that the other side attacks.

        Each candidate is tested on a private copy of *pieces* with the king
        relocated there, so neither the king nor the attackers in *pieces*
        are changed apart from the king's ``allowed_moves``.
        """
        king = _find_king(pieces, team)
        if not king.allowed_moves:
            return

        for move in list(king.allowed_moves):
            if self._is_attacked_after_king_move(king, move, pieces):
                _LOGGER.debug("King %s cannot go to %s: attacked", team.name, move)
                king.allowed_moves = [m for m in king.allowed_moves if m != move]

    def _is_attacked_after_king_move(
        self, king: Piece, destination: Position, pieces: list[Piece]
    ) -> bool:
        # A piece standing on the destination is captured by the king.
        simulated = [
            piece.clone() for piece in pieces if not piece.same_position(destination)
        ]
        simulated_king = next(p for p in simulated if p.same_piece_position(king))
        simulated_king.position = destination

        for enemy in simulated:
            if enemy.team != king.team.opposite:
                continue
            enemy.allowed_moves = self.possible_moves(enemy, simulated)
            reachable = enemy.allowed_moves
            if enemy.is_pawn():
                # Pawns only attack diagonally.
                reachable = [
                    pos for pos in reachable if pos.file != enemy.position.file
                ]
            if destination in reachable:
                return True
        return False

    # -- Move execution -----------------------------------------------------

    def play_move(
        self,
        origin: Position,
        destination: Position,
        on_promotion: PromotionCallback | None = None,
    ) -> Board:
        """Play *origin* → *destination*.

        Returns the new board, or ``self`` when the move is rejected. When a
        pawn reaches its promotion rank, *on_promotion* is called with the
        moved pawn before the returned board is built; the returned board
        exposes that pawn as :attr:`pending_promotion` until
        :meth:`promote_pawn` is applied.
        """
        played = self.piece_at(origin)
        if played is None:
            _LOGGER.debug("Rejected %s-%s: no piece on origin", origin, destination)
            return self
        if origin == destination:
            _LOGGER.debug("Rejected %s-%s: null move", origin, destination)
            return self
        if not played.allowed_moves:
            _LOGGER.debug("Rejected %s-%s: no allowed moves", origin, destination)
            return self

        if self.is_en_passant_move(origin, destination, played.piece_type, played.team):
            return self._play_en_passant(played, destination)
        if played.can_move_to(destination):
            return self._play_normal(played, destination, on_promotion)

        _LOGGER.debug("Rejected %s-%s: not an allowed move", origin, destination)
        return self

    def _play_en_passant(self, played: Piece, destination: Position) -> Board:
        captured_pos = Position(destination.file, played.position.rank)
        _LOGGER.debug(
            "En passant %s-%s captures %s", played.position, destination, captured_pos
        )

        pieces: list[Piece] = []
        for piece in self.pieces:
            if piece.same_position(captured_pos):
                continue
            moved = piece.clone()
            if moved.is_pawn():
                moved.en_passant = False
            if piece is played:
                moved.position = destination
            pieces.append(moved)
        return self._derive(pieces)

    def _play_normal(
        self,
        played: Piece,
        destination: Position,
        on_promotion: PromotionCallback | None,
    ) -> Board:
        pieces: list[Piece] = []
        pending: Piece | None = None
        for piece in self.pieces:
            if piece.same_position(destination):
                continue
            moved = piece.clone()
            if piece is played:
                if moved.is_pawn():
                    moved.en_passant = abs(destination.rank - piece.position.rank) == 2
                    if destination.rank == moved.team.promotion_rank:
                        pending = moved
                        _LOGGER.debug("Promotion pending on %s", destination)
                        if on_promotion is not None:
                            on_promotion(moved)
                moved.position = destination
            elif moved.is_pawn():
                moved.en_passant = False
            pieces.append(moved)
        return self._derive(pieces, pending)

    # -- Promotion ----------------------------------------------------------

    def promote_pawn(self, piece_type: PieceType, pawn: Piece | None = None) -> Board:
        """Replace *pawn* (default: the pending one) by a fresh *piece_type*."""
        target = pawn if pawn is not None else self.pending_promotion
        if target is None:
            raise ValueError("No pawn awaiting promotion")

        pieces: list[Piece] = []
        for piece in self.pieces:
            if piece.same_piece_position(target):
                pieces.append(Piece(piece.position, piece_type, piece.team))
            else:
                pieces.append(piece.clone())
        _LOGGER.debug("Promoted pawn on %s to %s", target.position, piece_type.name)
        return self._derive(pieces)

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        pieces = [piece.clone() for piece in self.pieces]
        return self._derive(pieces, self._carry_pending(pieces))

    def _derive(self, pieces: list[Piece], pending: Piece | None = None) -> Board:
        return Board(pieces, self.rules, self.config, pending)

    def _carry_pending(self, pieces: list[Piece]) -> Piece | None:
        if self.pending_promotion is None:
            return None
        for piece in pieces:
            if piece.same_piece_position(self.pending_promotion):
                return piece
        return None

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls, config: BoardConfig | None = None) -> Board:
        """Standard starting position; ``Team.OUR`` occupies ranks 0-1."""
        pieces: list[Piece] = []
        for f, pt in enumerate(_BACK_RANK):
            pieces.append(Piece(Position(f, 0), pt, Team.OUR))
            pieces.append(Piece(Position(f, 1), PieceType.PAWN, Team.OUR))
            pieces.append(Piece(Position(f, 6), PieceType.PAWN, Team.OPPONENT))
            pieces.append(Piece(Position(f, 7), pt, Team.OPPONENT))
        return cls(pieces, config=config)

    # -- Dunder helpers -----------------------------------------------------

    def _placement(self) -> set[tuple[Position, PieceType, Team, bool]]:
        return {
            (p.position, p.piece_type, p.team, p.en_passant) for p in self.pieces
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._placement() == other._placement()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.piece_at(Position(file, rank))
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
