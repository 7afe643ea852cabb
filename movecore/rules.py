"""Check, checkmate and stalemate derived from the legality queries."""

from __future__ import annotations

from .board import Board
from .movegen import in_check, legal_destinations

ONGOING = "ongoing"
CHECK = "check"
CHECKMATE = "checkmate"
STALEMATE = "stalemate"


def has_legal_move(board: Board, color: str, *, strict: bool = False) -> bool:
    for origin, _piece in board.occupied(color):
        if legal_destinations(board, origin, strict=strict):
            return True
    return False


def game_status(board: Board, to_move: str, *, strict: bool = False) -> str:
    checked = in_check(board, to_move)
    if has_legal_move(board, to_move, strict=strict):
        return CHECK if checked else ONGOING
    return CHECKMATE if checked else STALEMATE
