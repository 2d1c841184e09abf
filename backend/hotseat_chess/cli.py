from __future__ import annotations

import argparse
import json
import logging
import os
from typing import List, Optional, Tuple

from .core import Game, InvalidCoordinateError, STANDARD_LAYOUT, ascii_board, parse_cell
from .placement import parse_placement, placement_of
from .api import snapshot_to_dict

LOGGER = logging.getLogger("hotseat.cli")


def _new_game(placement: Optional[str]) -> Game:
    g = Game()
    g.initialize(parse_placement(placement) if placement else STANDARD_LAYOUT)
    return g


def _parse_clicks(raw: List[str]) -> List[Tuple[int, int]]:
    return [parse_cell(r) for r in raw]


def cmd_show(args: argparse.Namespace) -> int:
    g = _new_game(args.placement)
    print(ascii_board(g.board))
    print()
    print(placement_of(g.board))
    return 0


def cmd_clicks(args: argparse.Namespace) -> int:
    g = _new_game(args.placement)
    snap = g.snapshot()
    for x, y in _parse_clicks(args.cells):
        snap = g.handle_click(x, y)
    if args.json:
        print(json.dumps(snapshot_to_dict(snap), indent=2))
    else:
        print(ascii_board(g.board))
    return 0


def cmd_play(args: argparse.Namespace) -> int:
    g = _new_game(args.placement)

    while True:
        print(ascii_board(g.board))
        print()
        try:
            raw = input("Click (e.g. e2 or 4,6): ").strip()
        except EOFError:
            return 0
        if raw in ("quit", "exit"):
            return 0
        try:
            x, y = parse_cell(raw)
            g.handle_click(x, y)
        except InvalidCoordinateError as e:
            print(e)
        except ValueError as e:
            print(f"Bad input: {e}")


def main(argv: Optional[list[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="hotseat-chess")
    ap.add_argument(
        "--log-level",
        default=os.environ.get("HOTSEAT_LOG_LEVEL", "WARNING"),
        help="logging level (default: $HOTSEAT_LOG_LEVEL or WARNING)",
    )
    sub = ap.add_subparsers(dest="cmd", required=True)

    ss = sub.add_parser("show", help="Show ASCII board and placement")
    ss.add_argument("--placement", type=str, default=None)
    ss.set_defaults(fn=cmd_show)

    sc = sub.add_parser("clicks", help="Replay a sequence of clicks")
    sc.add_argument("cells", nargs="+", help="cells as e2 or x,y")
    sc.add_argument("--placement", type=str, default=None)
    sc.add_argument("--json", action="store_true", help="print the final render snapshot as JSON")
    sc.set_defaults(fn=cmd_clicks)

    pl = sub.add_parser("play", help="Click cells interactively")
    pl.add_argument("--placement", type=str, default=None)
    pl.set_defaults(fn=cmd_play)

    args = ap.parse_args(argv)
    logging.basicConfig(level=str(args.log_level).upper(), format="%(levelname)s %(name)s: %(message)s")
    try:
        return int(args.fn(args))
    except ValueError as e:
        LOGGER.error("command_failed", extra={"error": str(e)})
        print(f"error: {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
