from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .piece import Piece

@dataclass(frozen=True)
class PieceSelected:
    piece: "Piece"

@dataclass(frozen=True)
class SelectionCleared:
    piece: "Piece"
    target: Tuple[int, int]

@dataclass(frozen=True)
class PieceMoved:
    piece: "Piece"
    from_cell: Tuple[int, int]
    to_cell: Tuple[int, int]

@dataclass(frozen=True)
class PieceCaptured:
    captured: "Piece"
    capturer: "Piece"
