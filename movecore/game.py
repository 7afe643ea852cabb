"""Game controller owning the mutable board, turn and move history."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .board import Board
from .constants import BLACK, BOARD_SIZE, PAWN, PROMOTION_KINDS, QUEEN, WHITE, Square, opposite
from .move import Move
from .movegen import MissingKingError, legal_destinations
from .notation import describe_move
from .rules import game_status

logger = logging.getLogger(__name__)


class IllegalMoveError(ValueError):
    """Raised when a requested move is not legal for the side to move."""


@dataclass(slots=True)
class MoveRecord:
    move: Move
    color: str
    notation: str
    captured: str | None
    promotion: str | None
    status: str


@dataclass(slots=True)
class Game:
    board: Board = field(default_factory=Board.initial)
    turn: str = WHITE
    history: list[str] = field(default_factory=list)
    captured: dict[str, list[str]] = field(default_factory=lambda: {WHITE: [], BLACK: []})
    strict: bool = False

    def legal_destinations(self, square: Square) -> list[Square]:
        return legal_destinations(self.board, square, strict=self.strict)

    def status(self) -> str:
        return game_status(self.board, self.turn, strict=self.strict)

    def play(self, from_square: Square, to_square: Square, promotion: str = QUEEN) -> MoveRecord:
        """Apply a move for the side to move.

        ``captured`` is keyed by the color that made the capture. A pawn
        reaching the last row becomes ``promotion``.
        """
        piece = self.board.piece_at(from_square)
        if piece is None:
            raise IllegalMoveError(f"No piece on {from_square}")
        if piece.color != self.turn:
            raise IllegalMoveError(f"It is not {piece.color}'s turn")
        if to_square not in legal_destinations(self.board, from_square, strict=self.strict):
            logger.debug("Rejected %s -> %s for %s", from_square, to_square, self.turn)
            raise IllegalMoveError(f"Illegal move: {from_square} -> {to_square}")

        if self.strict and self.board.king_square(opposite(self.turn)) is None:
            raise MissingKingError(f"No {opposite(self.turn)} king on the board")

        promoted = None
        if piece.kind == PAWN and to_square[0] in (0, BOARD_SIZE - 1):
            if promotion not in PROMOTION_KINDS:
                raise IllegalMoveError(f"Invalid promotion piece: {promotion}")
            promoted = promotion

        taken = self.board.relocate(from_square, to_square, promoted)
        notation = describe_move(piece.kind, to_square, taken is not None)
        self.history.append(notation)
        if taken is not None:
            self.captured[piece.color].append(taken.kind)

        mover = self.turn
        self.turn = opposite(mover)
        status = self.status()
        logger.info("%s played %s (%s)", mover, notation, status)

        return MoveRecord(
            move=Move(from_square=from_square, to_square=to_square),
            color=mover,
            notation=notation,
            captured=None if taken is None else taken.kind,
            promotion=promoted,
            status=status,
        )
