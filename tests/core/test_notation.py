"""Tests for FEN placement import/export."""

import pytest

from pawnwise.core.config import BoardConfig
from pawnwise.core.enums import PieceType, Team
from pawnwise.core.notation import STARTING_FEN, board_from_fen, board_to_fen
from pawnwise.core.types import Position

P = Position.parse


class TestBoardFromFen:
    def test_starting_position(self) -> None:
        board = board_from_fen(STARTING_FEN)
        assert len(board.pieces) == 32
        king = board.piece_at(P("e1"))
        assert king is not None
        assert king.piece_type == PieceType.KING
        assert king.team == Team.OUR
        assert board.piece_at(P("d8")).piece_type == PieceType.QUEEN

    def test_placement_only(self) -> None:
        board = board_from_fen("4k3/8/8/8/8/8/8/4K3")
        assert {p.position for p in board.pieces} == {P("e8"), P("e1")}

    def test_config_passed_through(self) -> None:
        config = BoardConfig.symmetric()
        assert board_from_fen(STARTING_FEN, config).config is config

    def test_en_passant_marks_our_pawn(self) -> None:
        board = board_from_fen("4k3/8/8/8/4P3/8/8/4K3 b - e3 0 1")
        pawn = board.piece_at(P("e4"))
        assert pawn is not None and pawn.en_passant

    def test_en_passant_square_must_be_empty(self) -> None:
        with pytest.raises(ValueError, match="Occupied FEN en-passant square"):
            board_from_fen("4k3/8/8/8/2pP4/3N4/8/4K3 b - d3 0 1")

    def test_en_passant_marks_opponent_pawn(self) -> None:
        board = board_from_fen("4k3/8/8/3p4/8/8/8/4K3 w - d6 0 1")
        pawn = board.piece_at(P("d5"))
        assert pawn is not None and pawn.en_passant

    @pytest.mark.parametrize(
        "fen",
        [
            "",
            "8/8/8/8/8/8/8",
            "9/8/8/8/8/8/8/8",
            "4k4/8/8/8/8/8/8/4K3",
            "4k2/8/8/8/8/8/8/4K3",
            "4x3/8/8/8/8/8/8/4K3",
            "4k3/8/8/8/8/8/8/4K3 x",
            "4k3/8/8/8/8/8/8/4K3 w KX",
            "4k3/8/8/8/8/8/8/4K3 w - e4",
            "4k3/8/8/8/8/8/8/4K3 w - e3",
            "4k3/8/8/8/8/8/8/4K3 w - - -1 1",
            "4k3/8/8/8/8/8/8/4K3 w - - 0 1 extra",
        ],
    )
    def test_invalid(self, fen: str) -> None:
        with pytest.raises(ValueError):
            board_from_fen(fen)


class TestBoardToFen:
    def test_starting_position(self) -> None:
        assert board_to_fen(board_from_fen(STARTING_FEN)) == (
            "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w - - 0 1"
        )

    def test_round_trip(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w - - 0 1"
        assert board_to_fen(board_from_fen(fen)) == fen

    def test_en_passant_after_double_step(self) -> None:
        board = board_from_fen(STARTING_FEN).calculate_all_moves()
        after = board.play_move(P("e2"), P("e4"))
        assert board_to_fen(after) == (
            "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b - e3 0 1"
        )

    def test_en_passant_round_trip(self) -> None:
        fen = "4k3/8/8/3p4/8/8/8/4K3 w - d6 0 1"
        assert board_to_fen(board_from_fen(fen)) == fen
