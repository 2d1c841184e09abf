from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from .errors import LayoutError
from .piece import Piece
from .types import BOARD_SIZE, Color, PieceKind

Cell = Optional[Tuple[PieceKind, Color]]
Layout = Sequence[Sequence[Union[Cell, str]]]

# Row 0 is Black's back rank; lower case is Black, upper case is White.
STANDARD_LAYOUT: Tuple[str, ...] = (
    "rnbqkbnr",
    "pppppppp",
    "        ",
    "        ",
    "        ",
    "        ",
    "PPPPPPPP",
    "RNBQKBNR",
)

_EMPTY_CHARS = (" ", ".")

def char_to_cell(ch: str) -> Cell:
    if ch in _EMPTY_CHARS:
        return None
    try:
        kind = PieceKind(ch.lower())
    except ValueError:
        raise LayoutError(f"Unknown piece char: {ch!r}") from None
    return kind, (Color.BLACK if ch.islower() else Color.WHITE)

def _normalize_cell(value: Union[Cell, str]) -> Cell:
    if value is None:
        return None
    if isinstance(value, str):
        if len(value) != 1:
            raise LayoutError(f"Bad layout cell: {value!r}")
        return char_to_cell(value)
    if (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], PieceKind)
        and isinstance(value[1], Color)
    ):
        return value
    raise LayoutError(f"Bad layout cell: {value!r}")

def normalize_layout(layout: Layout) -> List[List[Cell]]:
    """Validate an 8x8 grid and return it as ``(PieceKind, Color)`` / ``None`` cells.

    Rows may be strings (``"rnbqkbnr"``) or sequences of cells.
    """
    if len(layout) != BOARD_SIZE:
        raise LayoutError(f"Layout must have {BOARD_SIZE} rows, got {len(layout)}")
    grid: List[List[Cell]] = []
    for y, row in enumerate(layout):
        if len(row) != BOARD_SIZE:
            raise LayoutError(f"Layout row {y} must have {BOARD_SIZE} cells, got {len(row)}")
        grid.append([_normalize_cell(v) for v in row])
    return grid

def build_pieces(layout: Layout) -> List[Piece]:
    pieces: List[Piece] = []
    for y, row in enumerate(normalize_layout(layout)):
        for x, cell in enumerate(row):
            if cell is not None:
                kind, color = cell
                pieces.append(Piece(kind, color, x, y))
    return pieces

def setup_standard(game) -> None:
    game.initialize(STANDARD_LAYOUT)

def ascii_board(board) -> str:
    """Render rows top to bottom with rank labels; the selected piece is starred."""
    rows = []
    for y in range(BOARD_SIZE):
        cells = []
        for x in range(BOARD_SIZE):
            p = board.piece_at(x, y)
            if p is None:
                cells.append(". ")
            else:
                cells.append(p.symbol + ("*" if p.selected else " "))
        rows.append(f"{BOARD_SIZE - y} " + "".join(cells).rstrip())
    rows.append("  " + " ".join("abcdefgh"))
    return "\n".join(rows)
