"""A tiny CGI-style HTTP server that answers with the output of a command."""

from __future__ import annotations

import argparse
import os
import socket
import subprocess
import sys
import threading
from dataclasses import dataclass
from typing import Sequence

from sysdemos.sockutil import accept, send_all
from sysdemos.tokens import tokenize

SERV_PORT = 9003
DEFAULT_HOST = "0.0.0.0"
LISTEN_BACKLOG = 128
BUFFER_SIZE = 1024
POLL_INTERVAL = 0.2
DRAIN_TIMEOUT = 1.0
FAVICON = "/favicon.ico"
QUERY_COMMAND = ["sh", "-c", 'echo "$QUERY"']
RESPONSE_TEMPLATE = (
    "HTTP/1.1 200 OK\r\n"
    "Content-Type:text/html\r\n"
    "Content-Length: {length}\r\n"
    "Server: sysdemos\r\n"
    "\r\n"
)


@dataclass(frozen=True)
class RequestLine:
    """The parts of an HTTP request line that the server uses."""

    method: str
    path: str
    query: str = ""


def parse_request_line(line: str) -> RequestLine:
    """Split ``GET /path?query HTTP/1.1`` into method, path and query.

    Raises ValueError if the method or target is missing.
    """
    parts = tokenize(line.rstrip("\r\n"), " ")
    if len(parts) < 2:
        raise ValueError(f"malformed request line: {line!r}")
    method, target = parts[0], parts[1]
    target_parts = tokenize(target, "?")
    if not target_parts:
        raise ValueError(f"malformed request target: {target!r}")
    query = target_parts[1] if len(target_parts) > 1 else ""
    return RequestLine(method, target_parts[0], query)


def html_response(body: bytes | str) -> bytes:
    """Return a complete ``200 OK`` HTML response carrying ``body``."""
    payload = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    head = RESPONSE_TEMPLATE.format(length=len(payload)).encode("ascii")
    return head + payload


def run_query(query: str) -> bytes:
    """Run a shell that echoes ``query`` from its environment; return its output.

    At most BUFFER_SIZE bytes are returned. Raises OSError if the shell
    cannot be started.
    """
    env = {**os.environ, "QUERY": query}
    result = subprocess.run(
        QUERY_COMMAND, env=env, stdout=subprocess.PIPE, check=False
    )
    return result.stdout[:BUFFER_SIZE]


def _finish(conn: socket.socket) -> None:
    try:
        conn.shutdown(socket.SHUT_WR)
        conn.settimeout(DRAIN_TIMEOUT)
        while conn.recv(BUFFER_SIZE):
            pass
    except OSError:
        pass


def _handle(conn: socket.socket) -> None:
    with conn:
        try:
            with conn.makefile("rb") as reader:
                raw = reader.readline(BUFFER_SIZE)
        except OSError:
            return
        line = raw.decode("latin-1")
        print(f"header:{line}", flush=True)
        try:
            request = parse_request_line(line)
        except ValueError:
            return
        if request.path == FAVICON:
            return
        try:
            body = run_query(request.query)
            send_all(conn, html_response(body))
        except OSError as exc:
            print(f"cgiserver: {exc}", file=sys.stderr)
            return
        _finish(conn)


def serve(
    host: str = DEFAULT_HOST,
    port: int = SERV_PORT,
    stop: threading.Event | None = None,
) -> None:
    """Serve each request on its own thread until ``stop`` is set.

    Raises OSError if the address cannot be bound.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(LISTEN_BACKLOG)
        listener.settimeout(POLL_INTERVAL)
        while stop is None or not stop.is_set():
            try:
                conn, _ = accept(listener)
            except TimeoutError:
                continue
            except OSError as exc:
                print(f"accept error: {exc}", file=sys.stderr)
                continue
            conn.settimeout(None)
            threading.Thread(target=_handle, args=(conn,), daemon=True).start()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CGI-style server."""
    parser = argparse.ArgumentParser(prog="cgiserver", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=SERV_PORT)
    args = parser.parse_args(argv)
    try:
        serve(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"cgiserver: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())