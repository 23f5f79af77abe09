"""Qt bridge exposing a board to a UI layer through signals."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from pawnwise.core.board import Board
from pawnwise.core.enums import PieceType
from pawnwise.core.piece import Piece
from pawnwise.core.types import Position

_LOGGER = logging.getLogger(__name__)


class BoardSession(QObject):
    """Thread-affine holder of the current board.

    Moves are recomputed after every accepted move, except while a promotion
    is pending: the board is only committed again after :meth:`promote`.
    """

    board_changed = pyqtSignal(object)
    move_rejected = pyqtSignal(object, object)
    promotion_requested = pyqtSignal(object)

    def __init__(self, board: Board | None = None) -> None:
        super().__init__()
        start = board if board is not None else Board.initial()
        self._board = start.calculate_all_moves()

    @property
    def board(self) -> Board:
        return self._board

    @property
    def awaiting_promotion(self) -> bool:
        return self._board.pending_promotion is not None

    @pyqtSlot(object, object, result=bool)
    def play_move(self, origin: Position, destination: Position) -> bool:
        """Try *origin* → *destination*; emit the outcome and return acceptance."""
        if self.awaiting_promotion:
            _LOGGER.debug("Move %s-%s ignored: promotion pending", origin, destination)
            self.move_rejected.emit(origin, destination)
            return False

        promoted: list[Piece] = []
        board = self._board.play_move(origin, destination, promoted.append)
        if board is self._board:
            self.move_rejected.emit(origin, destination)
            return False

        if promoted:
            self._board = board
            _LOGGER.info("Pawn on %s awaits promotion", promoted[0].position)
            self.promotion_requested.emit(promoted[0])
            return True

        self._commit(board)
        return True

    @pyqtSlot(int)
    def promote(self, piece_type: int) -> None:
        """Resolve the pending promotion with *piece_type*."""
        if not self.awaiting_promotion:
            raise ValueError("No pawn awaiting promotion")
        ptype = PieceType(piece_type)
        _LOGGER.info("Promoting to %s", ptype.name)
        self._commit(self._board.promote_pawn(ptype))

    def reset(self, board: Board | None = None) -> None:
        start = board if board is not None else Board.initial()
        self._commit(start)

    def _commit(self, board: Board) -> None:
        self._board = board.calculate_all_moves()
        self.board_changed.emit(self._board)
