"""FEN piece-placement parsing and serialization.

Only the placement and en-passant fields carry meaning here; side to move,
castling and clocks are syntax-checked and otherwise ignored.
"""

from __future__ import annotations

from pawnwise.core.board import Board
from pawnwise.core.config import BoardConfig
from pawnwise.core.enums import Team
from pawnwise.core.piece import Piece
from pawnwise.core.types import Position

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


def board_from_fen(fen: str, config: BoardConfig | None = None) -> Board:
    """Parse a FEN string (or only its placement field) into a :class:`Board`."""
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise ValueError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    # 1. Piece placement
    ranks = parts[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    pieces: list[Piece] = []
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                pieces.append(Piece.from_char(ch, Position(file, rank)))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move
    if len(parts) > 1 and parts[1] not in ("w", "b"):
        raise ValueError(f"Invalid FEN side-to-move field: {parts[1]!r}")

    # 3. Castling (not implemented by the engine)
    if len(parts) > 2 and parts[2] != "-":
        if any(ch not in "KQkq" for ch in parts[2]):
            raise ValueError(f"Invalid FEN castling field: {parts[2]!r}")

    # 4. En passant: flag the pawn that just jumped over the target square
    if len(parts) > 3 and parts[3] != "-":
        _mark_en_passant(pieces, parts[3])

    # 5–6. Clocks
    for clock in parts[4:]:
        if not clock.isdigit():
            raise ValueError(f"Invalid FEN clock field: {clock!r}")

    return Board(pieces, config=config)


def _mark_en_passant(pieces: list[Piece], ep_part: str) -> None:
    ep = Position.parse(ep_part)
    if ep.rank == 2:
        team = Team.OUR
    elif ep.rank == 5:
        team = Team.OPPONENT
    else:
        raise ValueError(f"Invalid FEN en-passant square: {ep_part!r}")
    if any(piece.same_position(ep) for piece in pieces):
        raise ValueError(f"Occupied FEN en-passant square: {ep_part!r}")

    pawn_pos = Position(ep.file, ep.rank + team.pawn_direction)
    for piece in pieces:
        if piece.same_position(pawn_pos) and piece.is_pawn() and piece.team == team:
            piece.en_passant = True
            return
    raise ValueError(f"No pawn for FEN en-passant square: {ep_part!r}")


def board_to_fen(board: Board) -> str:
    """Serialise *board* to FEN.

    Castling is always ``-`` and the clocks ``0 1``. The side to move is the
    one facing an en-passant target, ``w`` otherwise.
    """
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board.piece_at(Position(file, rank))
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    placement = "/".join(rows)

    side_str = "w"
    ep_str = "-"
    for piece in board.pieces:
        if piece.is_pawn() and piece.en_passant:
            skipped = piece.position.offset(0, -piece.team.pawn_direction)
            if skipped is not None:
                ep_str = skipped.name
                side_str = "b" if piece.team == Team.OUR else "w"
            break

    return f"{placement} {side_str} - {ep_str} 0 1"
