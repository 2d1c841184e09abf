from .types import Color, PieceKind, BOARD_SIZE, in_bounds, cell_name, parse_cell
from .errors import InvalidCoordinateError, LayoutError, NotInitializedError
from .piece import Piece
from .board import Board
from .geometry import piece_at, is_same_team_occupied, is_path_clear
from .rules import RULES, can_move_to, legal_targets
from .snapshot import PieceView, RenderSnapshot
from .events import PieceSelected, SelectionCleared, PieceMoved, PieceCaptured
from .game import Game, Listener, SelectionState
from .setup import STANDARD_LAYOUT, build_pieces, normalize_layout, setup_standard, ascii_board

__all__ = [
    "Color","PieceKind","BOARD_SIZE","in_bounds","cell_name","parse_cell",
    "InvalidCoordinateError","LayoutError","NotInitializedError",
    "Piece","Board",
    "piece_at","is_same_team_occupied","is_path_clear",
    "RULES","can_move_to","legal_targets",
    "PieceView","RenderSnapshot",
    "PieceSelected","SelectionCleared","PieceMoved","PieceCaptured",
    "Game","Listener","SelectionState",
    "STANDARD_LAYOUT","build_pieces","normalize_layout","setup_standard","ascii_board",
]
