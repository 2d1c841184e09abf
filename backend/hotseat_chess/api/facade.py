from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..core import (
    Game, Listener, PieceCaptured, PieceMoved, PieceSelected, SelectionCleared,
    STANDARD_LAYOUT, cell_name,
)
from ..core.setup import Layout

from .serde import snapshot, dict_to_layout


def _index_by_uid(snap: Dict[str, Any]) -> Dict[int, Dict[str, Any]]:
    out: Dict[int, Dict[str, Any]] = {}
    for p in snap.get("pieces", []):
        out[int(p["uid"])] = p
    return out


def diff(before: Dict[str, Any], after: Dict[str, Any]) -> Dict[str, Any]:
    """Compute an animation-friendly diff between two snapshots."""
    b = _index_by_uid(before)
    a = _index_by_uid(after)

    removed = [b[uid] for uid in b.keys() if uid not in a]

    moved: List[Dict[str, Any]] = []
    for uid in sorted(a.keys() & b.keys()):
        bp = b[uid]
        ap = a[uid]
        if (bp["x"], bp["y"]) != (ap["x"], ap["y"]):
            moved.append({
                "uid": uid,
                "from": bp["cell"],
                "to": ap["cell"],
                "from_xy": [bp["x"], bp["y"]],
                "to_xy": [ap["x"], ap["y"]],
                "type": ap["type"],
                "color": ap["color"],
            })

    return {
        "removed": removed,
        "moved": moved,
        "selection": {"before": before.get("selected"), "after": after.get("selected")},
    }


class _Recorder(Listener):
    def __init__(self) -> None:
        self.events: List[object] = []

    def on_event(self, game: Game, event: object) -> None:
        self.events.append(event)


def _action_of(events: List[object]) -> str:
    kinds = {type(e) for e in events}
    if PieceCaptured in kinds:
        return "captured"
    if PieceMoved in kinds:
        return "moved"
    if PieceSelected in kinds:
        return "selected"
    if SelectionCleared in kinds:
        return "deselected"
    return "none"


class ChessSession:
    """A small, stable facade for UI/server integration.

    - one click in, one ``{before, after, diff, meta}`` result out
    - results are plain JSON-friendly dicts
    """

    def __init__(self, layout: Optional[Layout] = None) -> None:
        self.game = Game()
        self.game.initialize(STANDARD_LAYOUT if layout is None else layout)
        self._recorder = _Recorder()
        self.game.listeners.append(self._recorder)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ChessSession":
        return cls(dict_to_layout(d))

    def state(self) -> Dict[str, Any]:
        return snapshot(self.game)

    def targets(self) -> List[Dict[str, Any]]:
        return [{"x": x, "y": y, "cell": cell_name(x, y)} for x, y in self.game.selected_targets()]

    def click(self, x: int, y: int) -> Dict[str, Any]:
        before = snapshot(self.game)
        self._recorder.events.clear()
        self.game.handle_click(x, y)
        after = snapshot(self.game)
        events = list(self._recorder.events)
        meta = {
            "click": {"x": x, "y": y, "cell": cell_name(x, y)},
            "action": _action_of(events),
        }
        return {"before": before, "after": after, "diff": diff(before, after), "meta": meta}
