from __future__ import annotations

import logging
from enum import Enum
from typing import List, Optional, Tuple

from .board import Board
from .errors import InvalidCoordinateError, NotInitializedError
from .events import PieceCaptured, PieceMoved, PieceSelected, SelectionCleared
from .rules import can_move_to, legal_targets
from .setup import Layout, build_pieces
from .snapshot import RenderSnapshot
from .types import in_bounds

LOGGER = logging.getLogger("hotseat.core.game")

class SelectionState(Enum):
    IDLE = "idle"
    SELECTED = "selected"

class Listener:
    def on_event(self, game: "Game", event: object) -> None:
        return

class Game:
    """Click-driven two player board.

    There is no side to move: any piece may be selected and moved on any
    click. Each ``handle_click`` runs one transition to completion.
    """

    def __init__(self) -> None:
        self.board: Optional[Board] = None
        self.listeners: List[Listener] = []

    @property
    def initialized(self) -> bool:
        return self.board is not None

    @property
    def selection_state(self) -> SelectionState:
        board = self._require_board()
        return SelectionState.IDLE if board.selected is None else SelectionState.SELECTED

    def _require_board(self) -> Board:
        if self.board is None:
            raise NotInitializedError()
        return self.board

    def emit(self, event: object) -> None:
        for listener in list(self.listeners):
            listener.on_event(self, event)

    def initialize(self, layout: Layout) -> RenderSnapshot:
        pieces = build_pieces(layout)
        self.board = Board(pieces)
        LOGGER.debug("game_initialized", extra={"pieces": len(pieces)})
        return RenderSnapshot.of(self.board)

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot.of(self._require_board())

    def selected_targets(self) -> List[Tuple[int, int]]:
        board = self._require_board()
        sel = board.selected
        if sel is None:
            return []
        return legal_targets(sel, board.pieces)

    def handle_click(self, x: int, y: int) -> RenderSnapshot:
        board = self._require_board()
        if (
            isinstance(x, bool) or isinstance(y, bool)
            or not isinstance(x, int) or not isinstance(y, int)
            or not in_bounds(x, y)
        ):
            LOGGER.warning("click_rejected", extra={"x": x, "y": y})
            raise InvalidCoordinateError(x, y)

        clicked = board.piece_at(x, y)
        mover = board.selected

        if mover is None:
            if clicked is not None:
                board.select(clicked)
                LOGGER.debug("piece_selected", extra={"piece": clicked.symbol, "cell": clicked.cell})
                self.emit(PieceSelected(clicked))
            return RenderSnapshot.of(board)

        if not can_move_to(mover, x, y, board.pieces):
            board.clear_selection()
            LOGGER.debug("selection_cleared", extra={"piece": mover.symbol, "cell": mover.cell, "x": x, "y": y})
            self.emit(SelectionCleared(mover, (x, y)))
            return RenderSnapshot.of(board)

        if clicked is not None and clicked.color is not mover.color:
            board.remove_piece(clicked)
            LOGGER.debug("piece_captured", extra={"piece": clicked.symbol, "cell": clicked.cell, "by": mover.symbol})
            self.emit(PieceCaptured(captured=clicked, capturer=mover))

        origin = (mover.x, mover.y)
        board.clear_selection()
        board.move_piece(mover, x, y)
        LOGGER.debug("piece_moved", extra={"piece": mover.symbol, "from": origin, "to": (x, y)})
        self.emit(PieceMoved(mover, origin, (x, y)))
        return RenderSnapshot.of(board)
