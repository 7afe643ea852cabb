import pytest

from movecore.constants import KING, KNIGHT, PAWN, QUEEN
from movecore.notation import describe_move


def test_pawn_moves_have_no_letter() -> None:
    assert describe_move(PAWN, (4, 4), False) == "e4"


def test_piece_letter_is_uppercase() -> None:
    assert describe_move(KNIGHT, (5, 5), False) == "Nf3"
    assert describe_move(KING, (7, 6), False) == "Kg1"


def test_capture_suffix() -> None:
    assert describe_move(QUEEN, (3, 3), True) == "Qd5x"
    assert describe_move(PAWN, (3, 3), True) == "d5x"


def test_invalid_input_raises() -> None:
    with pytest.raises(ValueError):
        describe_move("z", (0, 0), False)
    with pytest.raises(ValueError):
        describe_move(PAWN, (9, 0), False)
