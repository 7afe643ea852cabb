"""Passive 8x8 board model with placement parsing."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .constants import BOARD_SIZE, INITIAL_PLACEMENT, KING, PAWN, Square, in_bounds
from .piece import Piece

Grid = list[list[Piece | None]]


class Board:
    """Row-major grid of optional pieces; row 0 is rank 8, col 0 is file a."""

    __slots__ = ("grid",)

    def __init__(self, rows: Sequence[Sequence[Piece | None]] | None = None):
        if rows is None:
            self.grid: Grid = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
            return
        assert len(rows) == BOARD_SIZE, f"Board must have {BOARD_SIZE} rows, got {len(rows)}"
        for row in rows:
            assert len(row) == BOARD_SIZE, f"Board rows must have {BOARD_SIZE} cells, got {len(row)}"
        self.grid = [list(row) for row in rows]

    @classmethod
    def initial(cls) -> Board:
        return cls.from_placement(INITIAL_PLACEMENT)

    @classmethod
    def from_placement(cls, placement: str) -> Board:
        """Build a board from the piece-placement field of a FEN string.

        A full FEN is accepted; everything after the first field is ignored.
        """
        fields = placement.split()
        if not fields:
            raise ValueError("Empty piece placement")

        ranks = fields[0].split("/")
        if len(ranks) != BOARD_SIZE:
            raise ValueError(f"Invalid board placement: {fields[0]}")

        board = cls()
        for row, rank in enumerate(ranks):
            col = 0
            for ch in rank:
                if ch.isdigit():
                    col += int(ch)
                    continue
                if col >= BOARD_SIZE:
                    raise ValueError(f"Invalid rank in placement: {rank}")
                board.grid[row][col] = Piece.from_symbol(ch)
                col += 1
            if col != BOARD_SIZE:
                raise ValueError(f"Invalid rank in placement: {rank}")
        return board

    def to_placement(self) -> str:
        ranks = []
        for row in self.grid:
            text = ""
            empty = 0
            for piece in row:
                if piece is None:
                    empty += 1
                    continue
                if empty:
                    text += str(empty)
                    empty = 0
                text += piece.symbol()
            if empty:
                text += str(empty)
            ranks.append(text)
        return "/".join(ranks)

    def piece_at(self, square: Square) -> Piece | None:
        row, col = square
        if not in_bounds(row, col):
            return None
        return self.grid[row][col]

    def copy(self) -> Board:
        return Board(self.grid)

    def occupied(self, color: str | None = None) -> Iterator[tuple[Square, Piece]]:
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = self.grid[row][col]
                if piece is not None and (color is None or piece.color == color):
                    yield (row, col), piece

    def king_square(self, color: str) -> Square | None:
        for square, piece in self.occupied(color):
            if piece.kind == KING:
                return square
        return None

    def relocate(self, from_square: Square, to_square: Square, promotion: str | None = None) -> Piece | None:
        """Move whatever stands on ``from_square`` and return the captured piece.

        ``promotion`` replaces the kind of a moving pawn; any other piece keeps
        its kind.
        """
        from_row, from_col = from_square
        to_row, to_col = to_square
        moving = self.grid[from_row][from_col]
        if moving is None:
            raise ValueError(f"No piece on {from_square}")

        captured = self.grid[to_row][to_col]
        if promotion is not None and moving.kind == PAWN:
            moving = Piece(moving.color, promotion)
        self.grid[to_row][to_col] = moving
        self.grid[from_row][from_col] = None
        return captured

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    def __str__(self) -> str:
        rows = []
        for row in self.grid:
            rows.append(" ".join("." if piece is None else piece.symbol() for piece in row))
        return "\n".join(rows)
