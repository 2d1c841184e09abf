from __future__ import annotations

from typing import Iterator, List, Optional

from .geometry import piece_at
from .piece import Piece

class Board:
    """Owns the piece collection and the selection slot.

    The selection is held as a piece uid, never as a reference, and is
    dropped whenever the selected piece leaves the collection.
    """

    def __init__(self, pieces: Optional[List[Piece]] = None) -> None:
        self._pieces: List[Piece] = list(pieces or [])
        self._selected_uid: Optional[int] = None

    @property
    def pieces(self) -> List[Piece]:
        return self._pieces

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def piece_at(self, x: int, y: int) -> Optional[Piece]:
        return piece_at(self._pieces, x, y)

    def find(self, uid: int) -> Optional[Piece]:
        for p in self._pieces:
            if p.uid == uid:
                return p
        return None

    def remove_piece(self, p: Piece) -> None:
        for i, existing in enumerate(self._pieces):
            if existing is p:
                del self._pieces[i]
                break
        else:
            raise ValueError(f"{p.symbol} on {p.cell} is not on the board")
        if self._selected_uid == p.uid:
            p.selected = False
            self._selected_uid = None

    def move_piece(self, p: Piece, x: int, y: int) -> None:
        p.x = x
        p.y = y

    # --- selection ---
    @property
    def selected(self) -> Optional[Piece]:
        if self._selected_uid is None:
            return None
        return self.find(self._selected_uid)

    def select(self, p: Piece) -> None:
        self.clear_selection()
        p.selected = True
        self._selected_uid = p.uid

    def clear_selection(self) -> None:
        current = self.selected
        if current is not None:
            current.selected = False
        self._selected_uid = None
