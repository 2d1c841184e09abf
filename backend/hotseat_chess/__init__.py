"""Hotseat Chess (backend).

- core: click-driven board, per-kind movement rules, selection state machine
- api: stable JSON-oriented facade for UIs
- placement: FEN piece-placement text helpers
"""

from . import core, api
from .placement import parse_placement, placement_of, STARTPOS_PLACEMENT

__all__ = [
    "core","api",
    "parse_placement","placement_of","STARTPOS_PLACEMENT",
]
