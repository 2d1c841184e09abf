from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count

from .types import Color, PieceKind, cell_name

# process-wide and shared by every thread; next() never returns a value twice
_UIDS = count(1)

def _next_uid() -> int:
    return next(_UIDS)

@dataclass
class Piece:
    kind: PieceKind
    color: Color
    x: int
    y: int
    selected: bool = False
    uid: int = field(default_factory=_next_uid)

    @property
    def symbol(self) -> str:
        ch = self.kind.value
        return ch.upper() if self.color is Color.WHITE else ch

    @property
    def cell(self) -> str:
        return cell_name(self.x, self.y)
