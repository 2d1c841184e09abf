#!/usr/bin/env python3
"""Time the legality predicates and the click state machine."""
from __future__ import annotations

import argparse
import json
import random
import sys
import time
import tracemalloc
from pathlib import Path
from typing import Callable

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from hotseat_chess.core import Game, legal_targets, setup_standard


def _timed(body: Callable[[], int]) -> dict[str, float | int]:
    tracemalloc.start()
    start = time.perf_counter()
    ops = body()
    elapsed = time.perf_counter() - start
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return {
        "ops": ops,
        "seconds": elapsed,
        "ops_per_sec": ops / elapsed if elapsed > 0 else 0.0,
        "peak_alloc_bytes": peak,
    }


def bench_targets(repeat: int) -> dict[str, float | int]:
    game = Game()
    setup_standard(game)
    pieces = game.board.pieces

    def body() -> int:
        for _ in range(repeat):
            for p in pieces:
                legal_targets(p, pieces)
        # one predicate call per cell per piece
        return repeat * len(pieces) * 64

    return _timed(body)


def bench_clicks(clicks: int, seed: int) -> dict[str, float | int]:
    game = Game()
    setup_standard(game)
    rnd = random.Random(seed)

    def body() -> int:
        for _ in range(clicks):
            game.handle_click(rnd.randrange(8), rnd.randrange(8))
        return clicks

    out = _timed(body)
    out["pieces_left"] = len(game.board)
    return out


def main() -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--repeat", type=int, default=20, help="full-board legal_targets sweeps")
    ap.add_argument("--clicks", type=int, default=20000)
    ap.add_argument("--seed", type=int, default=1337)
    ap.add_argument("--min-checks-per-sec", type=float, default=None)
    ap.add_argument("--min-clicks-per-sec", type=float, default=None)
    args = ap.parse_args()

    results = {
        "legality": bench_targets(args.repeat),
        "clicks": bench_clicks(args.clicks, args.seed),
    }
    print(json.dumps(results, indent=2, sort_keys=True))

    floors = (
        ("legality", args.min_checks_per_sec),
        ("clicks", args.min_clicks_per_sec),
    )
    status = 0
    for name, floor in floors:
        if floor is not None and results[name]["ops_per_sec"] < floor:
            print(f"too slow: {name} {results[name]['ops_per_sec']:.0f}/s < {floor:.0f}/s", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    raise SystemExit(main())
