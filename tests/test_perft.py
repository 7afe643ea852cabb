import pytest

from movecore.board import Board
from movecore.constants import BLACK, WHITE
from movecore.perft import perft, perft_divide


def test_perft_start_position_depth_1_2_3() -> None:
    board = Board.initial()
    assert perft(board, WHITE, 1) == 20
    assert perft(board, WHITE, 2) == 400
    assert perft(board, WHITE, 3) == 8902
    assert board == Board.initial()


def test_perft_divide_splits_start_position() -> None:
    split = perft_divide(Board.initial(), BLACK, 1)
    assert len(split) == 20
    assert split["e7e5"] == 1
    assert sum(split.values()) == 20


def test_perft_depth_validation() -> None:
    with pytest.raises(ValueError):
        perft(Board.initial(), WHITE, -1)
    with pytest.raises(ValueError):
        perft_divide(Board.initial(), WHITE, 0)
