"""Short move labels for display and move history."""

from __future__ import annotations

from .constants import PAWN, PIECE_KINDS, Square, square_name


def describe_move(kind: str, destination: Square, was_capture: bool) -> str:
    """Piece letter (none for pawns), destination, and a trailing ``x`` on capture.

    Two pieces of the same kind reaching the same square get the same label.
    """
    if kind not in PIECE_KINDS:
        raise ValueError(f"Invalid piece kind: {kind}")
    letter = "" if kind == PAWN else kind.upper()
    suffix = "x" if was_capture else ""
    return f"{letter}{square_name(destination)}{suffix}"
