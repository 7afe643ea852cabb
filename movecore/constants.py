"""Colors, piece kinds and square helpers."""

from __future__ import annotations

WHITE = "w"
BLACK = "b"
COLORS = (WHITE, BLACK)

PAWN = "p"
KNIGHT = "n"
BISHOP = "b"
ROOK = "r"
QUEEN = "q"
KING = "k"
PIECE_KINDS = (PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING)
PROMOTION_KINDS = (KNIGHT, BISHOP, ROOK, QUEEN)

BOARD_SIZE = 8

FILES = "abcdefgh"
RANKS = "87654321"

INITIAL_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"

Square = tuple[int, int]


def in_bounds(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def square_name(square: Square) -> str:
    row, col = square
    if not in_bounds(row, col):
        raise ValueError(f"Square out of range: {square}")
    return f"{FILES[col]}{RANKS[row]}"


def parse_square(name: str) -> Square:
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"Invalid square: {name}")
    return RANKS.index(text[1]), FILES.index(text[0])


def opposite(color: str) -> str:
    if color == WHITE:
        return BLACK
    if color == BLACK:
        return WHITE
    raise ValueError(f"Invalid color: {color}")
