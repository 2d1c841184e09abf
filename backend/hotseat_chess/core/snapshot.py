from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .board import Board
from .types import Color, PieceKind

@dataclass(frozen=True)
class PieceView:
    kind: PieceKind
    color: Color
    x: int
    y: int
    uid: int

@dataclass(frozen=True)
class RenderSnapshot:
    """What a renderer needs after a transition: every piece plus the selected cell."""

    pieces: Tuple[PieceView, ...]
    selected: Optional[Tuple[int, int]]

    @classmethod
    def of(cls, board: Board) -> "RenderSnapshot":
        views = tuple(PieceView(p.kind, p.color, p.x, p.y, p.uid) for p in board.pieces)
        sel = board.selected
        return cls(pieces=views, selected=None if sel is None else (sel.x, sel.y))
