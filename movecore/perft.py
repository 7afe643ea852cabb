"""Perft utilities for move generation correctness checks."""

from __future__ import annotations

from .board import Board
from .constants import BOARD_SIZE, PAWN, QUEEN, opposite
from .move import Move
from .movegen import legal_moves


def _apply(board: Board, move: Move) -> Board:
    child = board.copy()
    piece = child.piece_at(move.from_square)
    promotion = None
    if piece is not None and piece.kind == PAWN and move.to_square[0] in (0, BOARD_SIZE - 1):
        promotion = QUEEN
    child.relocate(move.from_square, move.to_square, promotion)
    return child


def perft(board: Board, color: str, depth: int) -> int:
    if depth < 0:
        raise ValueError("Depth must be >= 0")
    if depth == 0:
        return 1

    moves = legal_moves(board, color)
    if depth == 1:
        return len(moves)

    nodes = 0
    for move in moves:
        nodes += perft(_apply(board, move), opposite(color), depth - 1)
    return nodes


def perft_divide(board: Board, color: str, depth: int) -> dict[str, int]:
    if depth < 1:
        raise ValueError("Depth must be >= 1 for perft divide")

    result: dict[str, int] = {}
    for move in legal_moves(board, color):
        result[move.uci()] = perft(_apply(board, move), opposite(color), depth - 1)
    return dict(sorted(result.items()))
