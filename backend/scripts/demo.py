from __future__ import annotations

from pathlib import Path
import sys

# Ensure `backend/` is on sys.path so `import hotseat_chess` works.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from hotseat_chess.core import Game, ascii_board, cell_name, setup_standard
from hotseat_chess.placement import parse_placement


def show(title: str, game: Game) -> None:
    print("\n" + "=" * 40)
    print(title)
    print(ascii_board(game.board))
    print("State:", game.selection_state.value)


def click(game: Game, x: int, y: int) -> None:
    before = len(game.board)
    game.handle_click(x, y)
    captured = before - len(game.board)
    print(f"click {cell_name(x, y)} ({x},{y})" + (" -> capture" if captured else ""))


def demo_opening_pushes() -> None:
    g = Game()
    setup_standard(g)
    show("Initial layout", g)

    click(g, 0, 6)
    show("White a-pawn selected", g)
    click(g, 0, 4)
    show("a2-a4", g)

    # no turn order: Black and White may move in any sequence
    click(g, 1, 1)
    click(g, 1, 3)
    show("b7-b5", g)

    click(g, 0, 4)
    click(g, 1, 3)
    show("a4xb5", g)


def demo_blocked_rook() -> None:
    g = Game()
    g.initialize(parse_placement("4k3/8/8/8/P7/8/8/R3K3"))
    show("Rook on a1 behind its own pawn on a4", g)

    click(g, 0, 7)
    print("targets:", [cell_name(x, y) for x, y in g.selected_targets()])
    click(g, 0, 3)
    show("a1-a5 rejected: the pawn blocks the file", g)

    click(g, 0, 7)
    click(g, 0, 4)
    show("a1-a4 rejected: own piece on the target", g)

    click(g, 0, 7)
    click(g, 3, 7)
    show("a1-d1 accepted", g)


if __name__ == "__main__":
    demo_opening_pushes()
    demo_blocked_rook()
