import pytest

from movecore.board import Board
from movecore.constants import BLACK, WHITE
from movecore.movegen import MissingKingError, in_check
from movecore.rules import CHECK, CHECKMATE, ONGOING, STALEMATE, game_status, has_legal_move

FOOLS_MATE = "rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR"


def test_start_position_is_ongoing() -> None:
    board = Board.initial()
    assert game_status(board, WHITE) == ONGOING
    assert game_status(board, BLACK) == ONGOING


def test_check_with_escape() -> None:
    board = Board.from_placement("k3r3/8/8/8/8/8/8/4K3")
    assert in_check(board, WHITE)
    assert game_status(board, WHITE) == CHECK


def test_fools_mate_is_checkmate() -> None:
    board = Board.from_placement(FOOLS_MATE)
    assert in_check(board, WHITE)
    assert not has_legal_move(board, WHITE)
    assert game_status(board, WHITE) == CHECKMATE


def test_stalemate_without_check() -> None:
    board = Board.from_placement("k7/8/1Q6/8/8/8/8/7K")
    assert not in_check(board, BLACK)
    assert game_status(board, BLACK) == STALEMATE


def test_strict_status_without_king_raises() -> None:
    board = Board.from_placement("4k3/8/8/8/8/8/8/R7")
    assert game_status(board, WHITE) == ONGOING
    with pytest.raises(MissingKingError):
        game_status(board, WHITE, strict=True)
