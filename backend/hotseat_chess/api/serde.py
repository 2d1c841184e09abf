from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from ..core import (
    BOARD_SIZE, Color, Game, LayoutError, PieceKind, PieceView, Piece,
    RenderSnapshot, cell_name,
)
from ..core.setup import Cell, char_to_cell
from ..placement import parse_placement, placement_of


LOGGER = logging.getLogger("hotseat.api.serde")


def _color_to_str(c: Color) -> str:
    return "WHITE" if c is Color.WHITE else "BLACK"


def _str_to_color(s: str) -> Color:
    try:
        return Color[str(s).strip().upper()]
    except KeyError:
        raise LayoutError(f"Bad color: {s!r}") from None


def _kind_to_str(k: PieceKind) -> str:
    return k.name.title()


def _str_to_kind(s: str) -> PieceKind:
    try:
        return PieceKind[str(s).strip().upper()]
    except KeyError:
        raise LayoutError(f"Bad piece type: {s!r}") from None


def _cell_to_dict(x: int, y: int) -> Dict[str, Any]:
    return {"x": x, "y": y, "cell": cell_name(x, y)}


def piece_to_dict(p: Union[Piece, PieceView]) -> Dict[str, Any]:
    return {
        "uid": p.uid,
        "color": _color_to_str(p.color),
        "type": _kind_to_str(p.kind),
        **_cell_to_dict(p.x, p.y),
    }


def snapshot_to_dict(snap: RenderSnapshot) -> Dict[str, Any]:
    sel = snap.selected
    return {
        "pieces": [piece_to_dict(p) for p in snap.pieces],
        "selected": None if sel is None else _cell_to_dict(*sel),
    }


def snapshot(game: Game) -> Dict[str, Any]:
    """JSON-friendly view of the whole board for a renderer."""
    out = snapshot_to_dict(game.snapshot())
    out["state"] = game.selection_state.value
    out["targets"] = [_cell_to_dict(x, y) for x, y in game.selected_targets()]
    out["placement"] = placement_of(game.board)
    return out


def _dict_to_cell(v: Any) -> Cell:
    if v is None:
        return None
    if isinstance(v, str) and len(v) == 1:
        return char_to_cell(v)
    if isinstance(v, dict):
        return _str_to_kind(v.get("type", "")), _str_to_color(v.get("color", ""))
    raise LayoutError(f"Bad layout cell: {v!r}")


def dict_to_layout(d: Dict[str, Any]) -> Optional[List[List[Cell]]]:
    """Read ``{"placement": "..."}`` or ``{"layout": [[...], ...]}``.

    Returns None when neither key is present so callers fall back to the
    standard layout.
    """
    if d.get("placement") is not None:
        return parse_placement(str(d["placement"]))
    rows = d.get("layout")
    if rows is None:
        return None
    if not isinstance(rows, list) or len(rows) != BOARD_SIZE:
        raise LayoutError(f"Layout must have {BOARD_SIZE} rows")
    grid: List[List[Cell]] = []
    for row in rows:
        if isinstance(row, str):
            row = list(row)
        if not isinstance(row, list) or len(row) != BOARD_SIZE:
            raise LayoutError(f"Layout rows must have {BOARD_SIZE} cells")
        grid.append([_dict_to_cell(v) for v in row])
    LOGGER.debug("layout_decoded", extra={"rows": len(grid)})
    return grid
