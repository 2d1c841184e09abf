#!/usr/bin/env python3
"""Hammer a live server with concurrent clicks and state reads.

Every response is checked for board corruption: two pieces on one cell, or a
selection that points at an empty cell. Exits non-zero on the first failure.
"""
from __future__ import annotations

import argparse
import json
import random
import subprocess
import sys
import threading
import time
import urllib.error
import urllib.request
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple


REPO_ROOT = Path(__file__).resolve().parents[2]
SERVER = REPO_ROOT / "frontend" / "server.py"


class ApiClient:
    def __init__(self, base_url: str, timeout: float = 2.0) -> None:
        self.base_url = base_url
        self.timeout = timeout

    def call(self, path: str, body: Optional[Dict[str, Any]] = None) -> Tuple[int, Dict[str, Any]]:
        data = None if body is None else json.dumps(body).encode("utf-8")
        req = urllib.request.Request(self.base_url + path, data=data, headers={"Content-Type": "application/json"})
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return resp.status, json.loads(resp.read() or b"{}")
        except urllib.error.HTTPError as e:
            return e.code, json.loads(e.read() or b"{}")

    def wait_until_up(self, seconds: float = 10.0) -> None:
        give_up = time.monotonic() + seconds
        while time.monotonic() < give_up:
            try:
                if self.call("/api/state")[0] == 200:
                    return
            except (urllib.error.URLError, ConnectionError):
                pass
            time.sleep(0.05)
        raise RuntimeError(f"no server at {self.base_url}")


def board_problem(state: Dict[str, Any]) -> Optional[str]:
    cells = [(p["x"], p["y"]) for p in state.get("pieces", [])]
    if len(cells) != len(set(cells)):
        return "two pieces share a cell"
    sel = state.get("selected")
    if sel is not None and (sel["x"], sel["y"]) not in cells:
        return f"selection {sel['cell']} points at an empty cell"
    return None


class Failures:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.items: List[str] = []

    def add(self, msg: str) -> None:
        with self._lock:
            self.items.append(msg)


def clicker(client: ApiClient, start: threading.Barrier, rounds: int, seed: int, failures: Failures) -> None:
    rnd = random.Random(seed)
    start.wait()
    for _ in range(rounds):
        body = {"x": rnd.randrange(8), "y": rnd.randrange(8)}
        try:
            status, data = client.call("/api/click", body)
        except (urllib.error.URLError, ConnectionError, ValueError) as e:
            failures.add(f"click {body}: {e}")
            continue
        if status != 200:
            failures.add(f"click {body}: HTTP {status} {data}")
            continue
        problem = board_problem(data["result"]["after"])
        if problem:
            failures.add(f"after click {body}: {problem}")


def reader(client: ApiClient, start: threading.Barrier, rounds: int, failures: Failures) -> None:
    start.wait()
    for _ in range(rounds):
        try:
            status, data = client.call("/api/state")
        except (urllib.error.URLError, ConnectionError, ValueError) as e:
            failures.add(f"state: {e}")
            continue
        problem = board_problem(data["state"]) if status == 200 else f"HTTP {status}"
        if problem:
            failures.add(f"state: {problem}")


def stress(client: ApiClient, workers: int, rounds: int, seed: int) -> List[str]:
    failures = Failures()
    start = threading.Barrier(workers + 1)
    with ThreadPoolExecutor(max_workers=workers + 1) as pool:
        jobs = [pool.submit(clicker, client, start, rounds, seed + n, failures) for n in range(workers)]
        jobs.append(pool.submit(reader, client, start, rounds * 2, failures))
        for job in jobs:
            job.result()
    return failures.items


def main() -> int:
    ap = argparse.ArgumentParser(description=__doc__)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8765)
    ap.add_argument("--seed", type=int, default=1337)
    ap.add_argument("--rounds", type=int, default=200)
    ap.add_argument("--click-workers", type=int, default=6)
    args = ap.parse_args()

    server = subprocess.Popen(
        [sys.executable, str(SERVER), "--host", args.host, "--port", str(args.port), "--log-level", "WARNING"],
        cwd=str(REPO_ROOT),
    )
    client = ApiClient(f"http://{args.host}:{args.port}")
    try:
        client.wait_until_up()
        client.call("/api/reset", {})
        failures = stress(client, args.click_workers, args.rounds, args.seed)
    finally:
        server.terminate()
        try:
            server.wait(timeout=3)
        except subprocess.TimeoutExpired:
            server.kill()
            server.wait(timeout=3)

    if failures:
        print(f"{len(failures)} failures, first: {failures[0]}", file=sys.stderr)
        return 1
    print("ok")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
