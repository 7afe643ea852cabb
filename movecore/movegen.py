"""Pseudo-legal move generation, attack detection and legality filtering."""

from __future__ import annotations

import logging

from .board import Board
from .constants import (
    BISHOP,
    KING,
    KNIGHT,
    PAWN,
    QUEEN,
    ROOK,
    WHITE,
    Square,
    in_bounds,
    opposite,
)
from .move import Move
from .piece import Piece

logger = logging.getLogger(__name__)

KNIGHT_DELTAS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
KING_DELTAS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))
BISHOP_DIRS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS = BISHOP_DIRS + ROOK_DIRS

SLIDER_DIRS = {
    BISHOP: BISHOP_DIRS,
    ROOK: ROOK_DIRS,
    QUEEN: QUEEN_DIRS,
}
LEAPER_DELTAS = {
    KNIGHT: KNIGHT_DELTAS,
    KING: KING_DELTAS,
}


class MissingKingError(ValueError):
    """Raised by strict legality checks when the mover has no king."""


def _pawn_destinations(board: Board, row: int, col: int, piece: Piece) -> list[Square]:
    direction = -1 if piece.color == WHITE else 1
    start_row = 6 if piece.color == WHITE else 1
    targets: list[Square] = []

    one_row = row + direction
    if in_bounds(one_row, col) and board.grid[one_row][col] is None:
        targets.append((one_row, col))
        two_row = row + 2 * direction
        if row == start_row and board.grid[two_row][col] is None:
            targets.append((two_row, col))

    for dc in (-1, 1):
        cap_col = col + dc
        if not in_bounds(one_row, cap_col):
            continue
        target = board.grid[one_row][cap_col]
        if target is not None and target.color != piece.color:
            targets.append((one_row, cap_col))
    return targets


def _leaper_destinations(
    board: Board, row: int, col: int, piece: Piece, deltas: tuple[tuple[int, int], ...]
) -> list[Square]:
    targets: list[Square] = []
    for dr, dc in deltas:
        nr, nc = row + dr, col + dc
        if not in_bounds(nr, nc):
            continue
        target = board.grid[nr][nc]
        if target is None or target.color != piece.color:
            targets.append((nr, nc))
    return targets


def _slider_destinations(
    board: Board, row: int, col: int, piece: Piece, directions: tuple[tuple[int, int], ...]
) -> list[Square]:
    targets: list[Square] = []
    for dr, dc in directions:
        nr, nc = row + dr, col + dc
        while in_bounds(nr, nc):
            target = board.grid[nr][nc]
            if target is None:
                targets.append((nr, nc))
            else:
                if target.color != piece.color:
                    targets.append((nr, nc))
                break
            nr += dr
            nc += dc
    return targets


def pseudo_legal_destinations(board: Board, square: Square) -> list[Square]:
    """Squares the piece on ``square`` can reach, ignoring king safety."""
    piece = board.piece_at(square)
    if piece is None:
        return []

    row, col = square
    if piece.kind == PAWN:
        return _pawn_destinations(board, row, col, piece)
    if piece.kind in LEAPER_DELTAS:
        return _leaper_destinations(board, row, col, piece, LEAPER_DELTAS[piece.kind])
    return _slider_destinations(board, row, col, piece, SLIDER_DIRS[piece.kind])


def is_square_attacked(board: Board, square: Square, by_color: str) -> bool:
    for origin, _piece in board.occupied(by_color):
        if square in pseudo_legal_destinations(board, origin):
            return True
    return False


def in_check(board: Board, color: str) -> bool:
    king_sq = board.king_square(color)
    if king_sq is None:
        return False
    return is_square_attacked(board, king_sq, opposite(color))


def legal_destinations(board: Board, square: Square, *, strict: bool = False) -> list[Square]:
    """Destinations for the piece on ``square`` that keep its own king safe.

    Each candidate is tried on a clone, so ``board`` is never modified. When
    the mover has no king on the board the candidate is accepted, unless
    ``strict`` is set, in which case :class:`MissingKingError` is raised.
    """
    piece = board.piece_at(square)
    if piece is None:
        return []

    enemy = opposite(piece.color)
    legal: list[Square] = []
    for target in pseudo_legal_destinations(board, square):
        trial = board.copy()
        trial.relocate(square, target)

        king_sq = trial.king_square(piece.color)
        if king_sq is None:
            if strict:
                raise MissingKingError(f"No {piece.color} king on the board")
            logger.debug("No %s king on board; accepting %s -> %s", piece.color, square, target)
            legal.append(target)
            continue

        if not is_square_attacked(trial, king_sq, enemy):
            legal.append(target)
    return legal


def legal_moves(board: Board, color: str, *, strict: bool = False) -> list[Move]:
    moves: list[Move] = []
    for origin, _piece in board.occupied(color):
        for target in legal_destinations(board, origin, strict=strict):
            moves.append(Move(from_square=origin, to_square=target))
    return moves
