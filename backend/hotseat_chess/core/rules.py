"""Per-kind movement legality.

Every predicate receives the full piece collection as a read-only argument;
nothing here mutates a piece or consults global state.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Sequence, Tuple

from .geometry import is_occupied, is_path_clear, is_same_team_occupied, piece_at
from .piece import Piece
from .types import BOARD_SIZE, Color, PieceKind

Rule = Callable[[Piece, int, int, Sequence[Piece]], bool]

KNIGHT_JUMPS = ((1, 2), (2, 1))

def pawn_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    direction = 1 if piece.color is Color.BLACK else -1
    start_row = 1 if piece.color is Color.BLACK else 6
    dx, dy = x - piece.x, y - piece.y

    if dx == 0:
        if dy == direction and not is_occupied(pieces, x, y):
            return True
        if (
            piece.y == start_row
            and dy == 2 * direction
            and not is_occupied(pieces, x, y - direction)
            and not is_occupied(pieces, x, y)
        ):
            return True

    if abs(dx) == 1 and dy == direction:
        target = piece_at(pieces, x, y)
        if target is not None and target.color is not piece.color:
            return True

    return False

def rook_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    dx, dy = x - piece.x, y - piece.y
    if (dx == 0) == (dy == 0):
        return False
    return is_path_clear(piece.x, piece.y, x, y, pieces)

def bishop_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    dx, dy = x - piece.x, y - piece.y
    if dx == 0 or abs(dx) != abs(dy):
        return False
    return is_path_clear(piece.x, piece.y, x, y, pieces)

def queen_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    return rook_can_move(piece, x, y, pieces) or bishop_can_move(piece, x, y, pieces)

def knight_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    return (abs(x - piece.x), abs(y - piece.y)) in KNIGHT_JUMPS

def king_can_move(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    # (0, 0) passes: re-clicking the king's own cell is a legal no-op move
    return abs(x - piece.x) <= 1 and abs(y - piece.y) <= 1

RULES: Dict[PieceKind, Rule] = {
    PieceKind.PAWN: pawn_can_move,
    PieceKind.ROOK: rook_can_move,
    PieceKind.KNIGHT: knight_can_move,
    PieceKind.BISHOP: bishop_can_move,
    PieceKind.QUEEN: queen_can_move,
    PieceKind.KING: king_can_move,
}

_missing = set(PieceKind) - set(RULES)
if _missing:
    raise RuntimeError(f"No movement rule for: {sorted(k.name for k in _missing)}")

def can_move_to(piece: Piece, x: int, y: int, pieces: Sequence[Piece]) -> bool:
    if is_same_team_occupied(piece, x, y, pieces):
        return False
    return RULES[piece.kind](piece, x, y, pieces)

def legal_targets(piece: Piece, pieces: Sequence[Piece]) -> List[Tuple[int, int]]:
    """Every cell ``piece`` may move to, in row-major order."""
    return [
        (x, y)
        for y in range(BOARD_SIZE)
        for x in range(BOARD_SIZE)
        if can_move_to(piece, x, y, pieces)
    ]
