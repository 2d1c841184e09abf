"""Stable backend boundary for a frontend.

This layer is intentionally **frontend-agnostic** and only speaks JSON-friendly
structures:
- state snapshots
- layout decode
- clicks producing diffs suitable for animation
"""

from .facade import ChessSession, diff
from .serde import snapshot, snapshot_to_dict, piece_to_dict, dict_to_layout

__all__ = ["ChessSession", "diff", "snapshot", "snapshot_to_dict", "piece_to_dict", "dict_to_layout"]
