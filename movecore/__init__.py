"""Chess move-legality core."""

from .board import Board
from .game import Game, IllegalMoveError
from .move import Move
from .movegen import (
    MissingKingError,
    is_square_attacked,
    legal_destinations,
    pseudo_legal_destinations,
)
from .notation import describe_move
from .piece import Piece

__all__ = [
    "Board",
    "Game",
    "IllegalMoveError",
    "MissingKingError",
    "Move",
    "Piece",
    "describe_move",
    "is_square_attacked",
    "legal_destinations",
    "pseudo_legal_destinations",
]
