"""Move value produced by the legality queries."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    from_square: Square
    to_square: Square

    def uci(self) -> str:
        return f"{square_name(self.from_square)}{square_name(self.to_square)}"

    def __str__(self) -> str:
        return self.uci()
