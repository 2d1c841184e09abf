from __future__ import annotations

from typing import List

from .core import Board, LayoutError, BOARD_SIZE
from .core.setup import Cell, char_to_cell

STARTPOS_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
_RUN_LENGTHS = "".join(str(n) for n in range(1, BOARD_SIZE + 1))


def parse_placement(text: str) -> List[List[Cell]]:
    """Parse the piece-placement field of a FEN record into a layout grid.

    Only the first whitespace-separated field is read, so a full FEN string is
    accepted too; side to move, castling and clocks are ignored. Row 0 of the
    result is rank 8.
    """
    fields = text.strip().split()
    if not fields:
        raise LayoutError("Empty placement")
    ranks = fields[0].split("/")
    if len(ranks) != BOARD_SIZE:
        raise LayoutError(f"Placement must have {BOARD_SIZE} ranks")

    grid: List[List[Cell]] = []
    for row_text in ranks:
        row: List[Cell] = []
        for ch in row_text:
            if ch.isdigit():
                # str.isdigit also accepts superscripts and other scripts' digits
                if ch not in _RUN_LENGTHS:
                    raise LayoutError(f"Bad empty-square run in placement: {ch!r}")
                row.extend([None] * int(ch))
            else:
                if ch in (" ", "."):
                    raise LayoutError(f"Unknown piece char: {ch!r}")
                row.append(char_to_cell(ch))
            if len(row) > BOARD_SIZE:
                raise LayoutError("Bad rank width in placement")
        if len(row) != BOARD_SIZE:
            raise LayoutError("Bad rank width in placement")
        grid.append(row)
    return grid


def placement_of(board: Board) -> str:
    rows = []
    for y in range(BOARD_SIZE):
        empty = 0
        row = []
        for x in range(BOARD_SIZE):
            p = board.piece_at(x, y)
            if p is None:
                empty += 1
                continue
            if empty:
                row.append(str(empty))
                empty = 0
            row.append(p.symbol)
        if empty:
            row.append(str(empty))
        rows.append("".join(row))
    return "/".join(rows)
