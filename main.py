"""Command-line utilities for the move-legality core."""

from __future__ import annotations

import argparse

from api.config import configure_logging
from movecore.board import Board
from movecore.constants import INITIAL_PLACEMENT, WHITE, parse_square, square_name
from movecore.movegen import in_check, is_square_attacked, legal_destinations
from movecore.perft import perft, perft_divide
from movecore.rules import game_status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Chess move-legality utilities")
    parser.add_argument("--placement", default=INITIAL_PLACEMENT, help="FEN piece placement")
    parser.add_argument("--log-level", default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", required=False)

    moves_parser = subparsers.add_parser("moves", help="List legal destinations for a square")
    moves_parser.add_argument("square", help="Origin square, e.g. e2")
    moves_parser.add_argument("--strict", action="store_true", help="Fail when the mover has no king")

    attacked_parser = subparsers.add_parser("attacked", help="Check whether a square is attacked")
    attacked_parser.add_argument("square", help="Target square, e.g. f7")
    attacked_parser.add_argument("color", choices=("w", "b"), help="Attacking color")

    status_parser = subparsers.add_parser("status", help="Show check/mate/stalemate status")
    status_parser.add_argument("color", choices=("w", "b"), help="Side to move")

    perft_parser = subparsers.add_parser("perft", help="Run perft")
    perft_parser.add_argument("depth", type=int, help="Perft depth")
    perft_parser.add_argument("--color", choices=("w", "b"), default=WHITE, help="Side to move")
    perft_parser.add_argument("--divide", action="store_true", help="Show per-move split")

    return parser


def _dispatch(args: argparse.Namespace) -> None:
    board = Board.from_placement(args.placement)

    if args.command == "moves":
        targets = legal_destinations(board, parse_square(args.square), strict=args.strict)
        print(" ".join(sorted(square_name(target) for target in targets)))
        return

    if args.command == "attacked":
        print(is_square_attacked(board, parse_square(args.square), args.color))
        return

    if args.command == "status":
        print(f"{game_status(board, args.color)} check={in_check(board, args.color)}")
        return

    if args.command == "perft":
        if args.divide:
            for move, count in perft_divide(board, args.color, args.depth).items():
                print(f"{move}: {count}")
        else:
            print(perft(board, args.color, args.depth))
        return

    print(board)


def run(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        _dispatch(args)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    run()
