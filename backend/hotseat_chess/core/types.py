from __future__ import annotations

from enum import Enum
from typing import Tuple

BOARD_SIZE = 8
FILES = "abcdefgh"

class Color(Enum):
    WHITE = 1
    BLACK = -1

class PieceKind(Enum):
    PAWN = "p"
    ROOK = "r"
    KNIGHT = "n"
    BISHOP = "b"
    QUEEN = "q"
    KING = "k"

def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

def cell_name(x: int, y: int) -> str:
    # row 0 is the top of the board (rank 8)
    return f"{FILES[x]}{BOARD_SIZE - y}"

def parse_cell(text: str) -> Tuple[int, int]:
    """Parse ``e2`` or ``4,6`` into ``(x, y)``."""
    t = text.strip().lower()
    if "," in t:
        left, _, right = t.partition(",")
        try:
            return int(left), int(right)
        except ValueError:
            raise ValueError(f"Bad cell: {text!r}") from None
    if len(t) != 2 or t[0] not in FILES or not t[1].isdigit():
        raise ValueError(f"Bad cell: {text!r}")
    rank = int(t[1])
    if not 1 <= rank <= BOARD_SIZE:
        raise ValueError(f"Bad cell: {text!r}")
    return FILES.index(t[0]), BOARD_SIZE - rank
