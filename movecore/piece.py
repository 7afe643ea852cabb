"""Immutable piece value."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BLACK, COLORS, PIECE_KINDS, WHITE


@dataclass(frozen=True, slots=True)
class Piece:
    color: str
    kind: str

    def __post_init__(self) -> None:
        if self.color not in COLORS:
            raise ValueError(f"Invalid piece color: {self.color}")
        if self.kind not in PIECE_KINDS:
            raise ValueError(f"Invalid piece kind: {self.kind}")

    @classmethod
    def from_symbol(cls, symbol: str) -> Piece:
        kind = symbol.lower()
        if len(symbol) != 1 or kind not in PIECE_KINDS:
            raise ValueError(f"Invalid piece symbol: {symbol}")
        return cls(WHITE if symbol.isupper() else BLACK, kind)

    def symbol(self) -> str:
        return self.kind.upper() if self.color == WHITE else self.kind

    def __str__(self) -> str:
        return self.symbol()
