"""Tests for the Qt board session."""

from __future__ import annotations

import pytest

pytest.importorskip("PyQt6.QtCore")

from pawnwise.core.board import Board  # noqa: E402
from pawnwise.core.enums import PieceType, Team  # noqa: E402
from pawnwise.core.notation import board_from_fen  # noqa: E402
from pawnwise.core.types import Position  # noqa: E402
from pawnwise.qt_bridge import BoardSession  # noqa: E402

P = Position.parse

PROMOTION_FEN = "4k3/P7/8/8/8/8/8/4K3"


class TestBoardSession:
    def test_starts_with_computed_moves(self) -> None:
        session = BoardSession()
        pawn = session.board.piece_at(P("e2"))
        assert pawn is not None
        assert set(pawn.allowed_moves) == {P("e3"), P("e4")}

    def test_accepted_move_emits_board_changed(self) -> None:
        session = BoardSession()
        changed: list[Board] = []
        session.board_changed.connect(changed.append)

        assert session.play_move(P("e2"), P("e4"))

        assert len(changed) == 1
        assert changed[0] is session.board
        pawn = session.board.piece_at(P("e4"))
        assert pawn is not None
        assert pawn.allowed_moves == [P("e5")]

    def test_rejected_move_emits_move_rejected(self) -> None:
        session = BoardSession()
        rejected: list[tuple[Position, Position]] = []
        session.move_rejected.connect(lambda o, d: rejected.append((o, d)))
        before = session.board

        assert not session.play_move(P("e2"), P("e5"))

        assert rejected == [(P("e2"), P("e5"))]
        assert session.board is before

    def test_promotion_flow(self) -> None:
        session = BoardSession(board_from_fen(PROMOTION_FEN))
        requested: list[object] = []
        changed: list[Board] = []
        session.promotion_requested.connect(requested.append)
        session.board_changed.connect(changed.append)

        assert session.play_move(P("a7"), P("a8"))

        assert len(requested) == 1
        assert changed == []
        assert session.awaiting_promotion
        assert not session.play_move(P("e1"), P("e2"))

        session.promote(PieceType.QUEEN)

        assert not session.awaiting_promotion
        assert len(changed) == 1
        queen = session.board.piece_at(P("a8"))
        assert queen is not None
        assert queen.piece_type == PieceType.QUEEN
        assert queen.team == Team.OUR
        assert queen.allowed_moves

    def test_promote_from_signal_handler(self) -> None:
        session = BoardSession(board_from_fen(PROMOTION_FEN))
        session.promotion_requested.connect(
            lambda _pawn: session.promote(PieceType.KNIGHT)
        )

        session.play_move(P("a7"), P("a8"))

        knight = session.board.piece_at(P("a8"))
        assert knight is not None and knight.piece_type == PieceType.KNIGHT
        assert not session.awaiting_promotion

    def test_promote_without_pending_raises(self) -> None:
        session = BoardSession()
        with pytest.raises(ValueError, match="No pawn awaiting promotion"):
            session.promote(PieceType.QUEEN)

    def test_reset(self) -> None:
        session = BoardSession()
        session.play_move(P("e2"), P("e4"))
        session.reset()
        assert session.board.piece_at(P("e2")) is not None
        assert session.board.piece_at(P("e4")) is None
