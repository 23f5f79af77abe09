"""Core domain layer: move generation, king safety and move execution.

Quick start::

    from pawnwise.core import Position, board_from_fen, STARTING_FEN

    board = board_from_fen(STARTING_FEN).calculate_all_moves()
    board = board.play_move(Position.parse("e2"), Position.parse("e4"))
"""

from pawnwise.core.board import Board, PromotionCallback
from pawnwise.core.config import BoardConfig
from pawnwise.core.enums import PieceType, Team
from pawnwise.core.move_rules import (
    DEFAULT_RULES,
    BishopRules,
    KingRules,
    KnightRules,
    MoveRules,
    PawnRules,
    QueenRules,
    RookRules,
)
from pawnwise.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from pawnwise.core.piece import Piece
from pawnwise.core.types import Position

__all__ = [
    # Enums
    "PieceType",
    "Team",
    # Value types
    "Piece",
    "Position",
    # Move rules
    "DEFAULT_RULES",
    "BishopRules",
    "KingRules",
    "KnightRules",
    "MoveRules",
    "PawnRules",
    "QueenRules",
    "RookRules",
    # Board
    "Board",
    "BoardConfig",
    "PromotionCallback",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
