#!/usr/bin/env python3
"""Chart perft throughput and legal-destination latency from bench CSVs."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path
from statistics import mean

import matplotlib.pyplot as plt

ROOT = Path(__file__).resolve().parents[1]
METRICS_DIR = ROOT / "docs" / "metrics"


def read_rows(name: str, metrics_dir: Path) -> list[dict[str, str]]:
    with (metrics_dir / name).open("r", encoding="utf-8") as handle:
        return list(csv.DictReader(handle))


def perft_panel(ax, rows: list[dict[str, str]]) -> None:
    series: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for row in rows:
        series[row["position"]].append((int(row["nodes"]), float(row["elapsed_ms"])))

    for position, points in sorted(series.items()):
        points.sort()
        ax.loglog([n for n, _ in points], [ms for _, ms in points], marker="o", label=position)
    ax.set_title("Perft cost")
    ax.set_xlabel("leaf nodes")
    ax.set_ylabel("elapsed ms")
    ax.legend()


def latency_panel(ax, rows: list[dict[str, str]]) -> None:
    by_position: dict[str, dict[str, list[float]]] = defaultdict(lambda: defaultdict(list))
    for row in rows:
        by_position[row["position"]][row["piece"].upper()].append(float(row["elapsed_ms"]))

    kinds = "PNBRQK"
    width = 0.8 / max(len(by_position), 1)
    for idx, (position, samples) in enumerate(sorted(by_position.items())):
        xs = [k + idx * width for k in range(len(kinds))]
        ax.bar(xs, [mean(samples[kind]) if samples[kind] else 0.0 for kind in kinds], width, label=position)
    ax.set_xticks(range(len(kinds)), list(kinds))
    ax.set_title("legal_destinations latency")
    ax.set_ylabel("ms per query")
    ax.legend()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--metrics-dir", type=Path, default=METRICS_DIR)
    parser.add_argument("--output", type=Path, default=ROOT / "docs" / "visuals" / "move-legality.svg")
    args = parser.parse_args()

    fig, (left, right) = plt.subplots(1, 2, figsize=(12, 5))
    perft_panel(left, read_rows("perft_metrics.csv", args.metrics_dir))
    latency_panel(right, read_rows("query_metrics.csv", args.metrics_dir))

    args.output.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(args.output)
    plt.close(fig)
    print(f"wrote {args.output}")


if __name__ == "__main__":
    main()
