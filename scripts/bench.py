#!/usr/bin/env python3
"""Time perft and per-square legal-destination queries, writing CSVs."""

from __future__ import annotations

import argparse
import csv
import sys
from pathlib import Path
from time import perf_counter

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from movecore.board import Board
from movecore.constants import INITIAL_PLACEMENT, WHITE
from movecore.movegen import legal_destinations
from movecore.perft import perft

POSITIONS = {
    "start": (INITIAL_PLACEMENT, 3),
    "middlegame": ("r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R", 2),
}


def timed(fn, *args) -> tuple[object, float]:
    start = perf_counter()
    result = fn(*args)
    return result, (perf_counter() - start) * 1000.0


def perft_rows() -> list[dict[str, object]]:
    rows = []
    for name, (placement, max_depth) in POSITIONS.items():
        board = Board.from_placement(placement)
        for depth in range(1, max_depth + 1):
            nodes, elapsed_ms = timed(perft, board, WHITE, depth)
            rows.append({"position": name, "depth": depth, "nodes": nodes, "elapsed_ms": round(elapsed_ms, 3)})
    return rows


def query_rows(repeats: int) -> list[dict[str, object]]:
    rows = []
    for name, (placement, _depth) in POSITIONS.items():
        board = Board.from_placement(placement)
        for square, piece in board.occupied():
            targets, elapsed_ms = timed(lambda: [legal_destinations(board, square) for _ in range(repeats)][-1])
            rows.append(
                {
                    "position": name,
                    "piece": piece.symbol(),
                    "destinations": len(targets),
                    "elapsed_ms": round(elapsed_ms / repeats, 4),
                }
            )
    return rows


def write(path: Path, rows: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)
    print(f"wrote {path}")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--metrics-dir", type=Path, default=ROOT / "docs" / "metrics")
    parser.add_argument("--repeats", type=int, default=50, help="Repetitions per square query")
    args = parser.parse_args()

    write(args.metrics_dir / "perft_metrics.csv", perft_rows())
    write(args.metrics_dir / "query_metrics.csv", query_rows(args.repeats))


if __name__ == "__main__":
    main()
