from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .piece import Piece

def _sign(n: int) -> int:
    return (n > 0) - (n < 0)

def unit_step(dx: int, dy: int) -> Tuple[int, int]:
    return _sign(dx), _sign(dy)

def piece_at(pieces: Sequence[Piece], x: int, y: int) -> Optional[Piece]:
    for p in pieces:
        if p.x == x and p.y == y:
            return p
    return None

def is_occupied(pieces: Sequence[Piece], x: int, y: int) -> bool:
    return piece_at(pieces, x, y) is not None

def is_same_team_occupied(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    """True if another piece of ``piece``'s color stands on (x, y).

    The mover itself does not count, so a piece never blocks its own cell.
    """
    other = piece_at(pieces, x, y)
    return other is not None and other is not piece and other.color is piece.color

def is_path_clear(x0: int, y0: int, x1: int, y1: int, pieces: Sequence[Piece]) -> bool:
    """Walk the straight or diagonal line between two cells, endpoints excluded."""
    sx, sy = unit_step(x1 - x0, y1 - y0)
    x, y = x0 + sx, y0 + sy
    while (x, y) != (x1, y1):
        if is_occupied(pieces, x, y):
            return False
        x += sx
        y += sy
    return True
