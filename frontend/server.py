#!/usr/bin/env python3
"""Hotseat Chess: local dev server (stdlib only).

Serves a JSON API wrapping the click engine. A browser frontend posts the
board cell under the pointer to /api/click and redraws from the returned
snapshot; pixel-to-cell mapping stays on the client.

Run from repo root:
  python frontend/server.py

Then:
  curl http://127.0.0.1:8000/api/state
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import socket
import sys
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, HTTPServer
from socketserver import ThreadingMixIn
from pathlib import Path
from typing import Any, Callable, Dict, Optional
from urllib.parse import urlsplit


REPO_ROOT = Path(__file__).resolve().parents[1]
BACKEND_ROOT = REPO_ROOT / "backend"

# Ensure backend package import works without installation
sys.path.insert(0, str(BACKEND_ROOT))

from hotseat_chess.api import ChessSession


LOGGER = logging.getLogger("hotseat.server")


class PayloadTooLargeError(ValueError):
    pass


class RequestReadTimeoutError(ValueError):
    pass


def _json_read(
    rfile,
    *,
    content_length: Optional[int],
    max_bytes: int = 1_000_000,
    socket_obj: Optional[socket.socket] = None,
    read_timeout_s: Optional[float] = None,
) -> Dict[str, Any]:
    if content_length is None:
        raise ValueError("Missing Content-Length")

    max_allowed = int(os.environ.get("HOTSEAT_HTTP_MAX", str(max_bytes)))
    if content_length < 0:
        raise ValueError("Invalid Content-Length")
    if content_length > max_allowed:
        raise PayloadTooLargeError("Payload too large")

    prev_timeout = None
    if socket_obj is not None and read_timeout_s is not None:
        prev_timeout = socket_obj.gettimeout()
        socket_obj.settimeout(read_timeout_s)

    try:
        raw = rfile.read(content_length) if content_length > 0 else b""
    except (TimeoutError, socket.timeout) as e:
        raise RequestReadTimeoutError("Request body read timed out") from e
    finally:
        if socket_obj is not None and read_timeout_s is not None:
            socket_obj.settimeout(prev_timeout)

    if not raw:
        return {}
    try:
        body = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid JSON: {e}") from e
    if not isinstance(body, dict):
        raise ValueError("JSON body must be an object")
    return body


def _json_write(handler: BaseHTTPRequestHandler, status: int, payload: Dict[str, Any]) -> None:
    data = json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    handler.send_response(status)
    handler.send_header("Content-Type", "application/json; charset=utf-8")
    handler.send_header("Cache-Control", "no-store")
    handler.send_header("Content-Length", str(len(data)))
    # Same-origin by default; allow localhost tools to talk to it.
    handler.send_header("Access-Control-Allow-Origin", "*")
    handler.end_headers()
    handler.wfile.write(data)


def _bad(handler: BaseHTTPRequestHandler, msg: str, status: int = 400) -> None:
    _json_write(handler, status, {"ok": False, "error": msg})


def _int_field(body: Dict[str, Any], key: str) -> int:
    v = body.get(key)
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"Field {key!r} must be an integer")
    return v


class _State:
    session: ChessSession

    def __init__(self) -> None:
        self.session = ChessSession()

STATE = _State()
# Every engine call runs under this lock so a click transition is never interleaved.
STATE_LOCK = threading.RLock()



def _get_state(_body: Dict[str, Any]) -> Dict[str, Any]:
    with STATE_LOCK:
        return {"state": STATE.session.state()}


def _get_targets(_body: Dict[str, Any]) -> Dict[str, Any]:
    with STATE_LOCK:
        return {"targets": STATE.session.targets()}


def _post_click(body: Dict[str, Any]) -> Dict[str, Any]:
    x = _int_field(body, "x")
    y = _int_field(body, "y")
    with STATE_LOCK:
        return {"result": STATE.session.click(x, y)}


def _replace_session(build: Callable[[], ChessSession]) -> Dict[str, Any]:
    with STATE_LOCK:
        # a LayoutError from build() leaves the running session in place
        STATE.session = build()
        state = STATE.session.state()
    LOGGER.info("session_replaced", extra={"placement": state["placement"]})
    return {"state": state}


def _post_reset(_body: Dict[str, Any]) -> Dict[str, Any]:
    return _replace_session(ChessSession)


def _post_newgame(body: Dict[str, Any]) -> Dict[str, Any]:
    return _replace_session(lambda: ChessSession.from_dict(body))


Route = Callable[[Dict[str, Any]], Dict[str, Any]]

GET_ROUTES: Dict[str, Route] = {
    "/api/state": _get_state,
    "/api/targets": _get_targets,
}
POST_ROUTES: Dict[str, Route] = {
    "/api/click": _post_click,
    "/api/reset": _post_reset,
    "/api/newgame": _post_newgame,
}


class ThreadingHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True


class Handler(BaseHTTPRequestHandler):
    def log_message(self, format: str, *args: Any) -> None:
        LOGGER.debug("http_request", extra={"client": self.client_address[0], "line": format % args})

    def _route(self, table: Dict[str, Route]) -> Optional[Route]:
        return table.get(urlsplit(self.path).path.rstrip("/"))

    def do_OPTIONS(self) -> None:
        self.send_response(HTTPStatus.NO_CONTENT)
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "GET,POST,OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type")
        self.end_headers()

    def do_GET(self) -> None:
        route = self._route(GET_ROUTES)
        if route is None:
            self.send_error(HTTPStatus.NOT_FOUND, "No such endpoint")
            return
        self._run(route, {})

    def do_POST(self) -> None:
        route = self._route(POST_ROUTES)
        if route is None:
            self.send_error(HTTPStatus.NOT_FOUND, "No such endpoint")
            return
        body = self._read_body()
        if body is None:
            return
        self._run(route, body)

    def _read_body(self) -> Optional[Dict[str, Any]]:
        try:
            length_header = self.headers.get("Content-Length")
            length = int(length_header) if length_header is not None else None
        except (TypeError, ValueError):
            _bad(self, "Invalid Content-Length", 400)
            return None

        try:
            return _json_read(
                self.rfile,
                content_length=length,
                socket_obj=self.connection,
                read_timeout_s=float(os.environ.get("HOTSEAT_HTTP_READ_TIMEOUT", "5.0")),
            )
        except PayloadTooLargeError as e:
            _bad(self, str(e), 413)
        except RequestReadTimeoutError as e:
            _bad(self, str(e), 408)
        except ValueError as e:
            msg = str(e)
            _bad(self, msg, 411 if msg == "Missing Content-Length" else 400)
        except Exception:
            LOGGER.exception("json_read_unhandled", extra={"path": self.path})
            _bad(self, "Invalid request body", 400)
        return None

    def _run(self, route: Route, body: Dict[str, Any]) -> None:
        try:
            payload = route(body)
        except ValueError as e:
            LOGGER.warning("request_rejected", extra={"path": self.path, "error": str(e)})
            _bad(self, str(e), 400)
            return
        except Exception:
            LOGGER.exception("api_unhandled", extra={"path": self.path})
            _bad(self, "Internal error", 500)
            return
        _json_write(self, 200, {"ok": True, **payload})


def main() -> int:
    ap = argparse.ArgumentParser(description="Hotseat Chess JSON API")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--log-level", default=os.environ.get("HOTSEAT_LOG_LEVEL", "INFO"))
    args = ap.parse_args()

    logging.basicConfig(level=str(args.log_level).upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    httpd = ThreadingHTTPServer((args.host, args.port), Handler)
    LOGGER.info("server_listening", extra={"host": args.host, "port": args.port})
    print(f"Hotseat Chess API at http://{args.host}:{args.port}/")
    print("GET  " + " ".join(GET_ROUTES))
    print("POST " + " ".join(POST_ROUTES))
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        LOGGER.info("server_stopping")
    finally:
        httpd.server_close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
