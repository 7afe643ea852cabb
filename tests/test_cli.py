import pytest

from main import run


def test_moves_command_prints_destinations(capsys) -> None:
    run(["moves", "e2"])
    assert capsys.readouterr().out.strip() == "e3 e4"


def test_status_command(capsys) -> None:
    run(["status", "w"])
    assert capsys.readouterr().out.strip() == "ongoing check=False"


@pytest.mark.parametrize(
    "argv",
    [
        ["perft", "-1"],
        ["perft", "0", "--divide"],
        ["moves", "z9"],
        ["--placement", "8/8", "status", "w"],
        ["--placement", "R7/8/8/8/8/8/8/8", "moves", "a1", "--strict"],
    ],
)
def test_invalid_input_is_a_usage_error(argv: list[str], capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run(argv)
    assert exc_info.value.code == 2
    assert "Traceback" not in capsys.readouterr().err
