"""Servers that answer every message with its upper-case form."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys
import threading
from typing import Callable, Sequence

from sysdemos.sockutil import accept, send_all

MAXLINE = 80
SERV_PORT = 8000
DEFAULT_HOST = "0.0.0.0"
LISTEN_BACKLOG = 20
MAX_CLIENTS = 1024
POLL_INTERVAL = 0.2


def uppercase(data: bytes) -> bytes:
    """Return ``data`` with ASCII letters upper-cased; other bytes are kept."""
    return bytes(data).upper()


def _stopped(stop: threading.Event | None) -> bool:
    return stop is not None and stop.is_set()


def _listener(kind: int, host: str, port: int) -> socket.socket:
    sock = socket.socket(socket.AF_INET, kind)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
    except OSError:
        sock.close()
        raise
    return sock


def serve_tcp(
    host: str = DEFAULT_HOST,
    port: int = SERV_PORT,
    stop: threading.Event | None = None,
) -> None:
    """Answer one message per TCP connection, then close it.

    Runs until ``stop`` is set; raises OSError if the address cannot be bound.
    """
    with _listener(socket.SOCK_STREAM, host, port) as listener:
        listener.listen(LISTEN_BACKLOG)
        listener.settimeout(POLL_INTERVAL)
        print("Accepting connections ...", flush=True)
        while not _stopped(stop):
            try:
                conn, address = accept(listener)
            except TimeoutError:
                continue
            with conn:
                conn.settimeout(None)
                try:
                    data = conn.recv(MAXLINE)
                    print(f"received from {address[0]} at PORT {address[1]}", flush=True)
                    send_all(conn, uppercase(data))
                except OSError:
                    continue


def serve_udp(
    host: str = DEFAULT_HOST,
    port: int = SERV_PORT,
    stop: threading.Event | None = None,
) -> None:
    """Answer every UDP datagram with its upper-case form until ``stop`` is set."""
    with _listener(socket.SOCK_DGRAM, host, port) as sock:
        sock.settimeout(POLL_INTERVAL)
        print(f"Accepting connections: localhost:{sock.getsockname()[1]}", flush=True)
        while not _stopped(stop):
            try:
                data, address = sock.recvfrom(MAXLINE)
            except TimeoutError:
                continue
            print(f"Received from {address[0]} as port {address[1]} ", flush=True)
            sock.sendto(uppercase(data), address)


def _serve_client(selector: selectors.BaseSelector, conn: socket.socket) -> None:
    try:
        data = conn.recv(MAXLINE)
    except OSError:
        data = b""
    if not data:
        selector.unregister(conn)
        conn.close()
        return
    try:
        send_all(conn, uppercase(data))
    except OSError:
        pass


def serve_select(
    host: str = DEFAULT_HOST,
    port: int = SERV_PORT,
    stop: threading.Event | None = None,
) -> None:
    """Serve many long-lived TCP clients from one thread by readiness polling.

    Raises RuntimeError when more than MAX_CLIENTS clients are connected.
    """
    with _listener(socket.SOCK_STREAM, host, port) as listener, \
            selectors.DefaultSelector() as selector:
        listener.listen(LISTEN_BACKLOG)
        print(f"listen:{port}", flush=True)
        selector.register(listener, selectors.EVENT_READ)
        try:
            while not _stopped(stop):
                for key, _ in selector.select(POLL_INTERVAL):
                    sock = key.fileobj
                    if sock is listener:
                        conn, address = accept(listener)
                        print(f"received from {address[0]} at PORT {address[1]}", flush=True)
                        if len(selector.get_map()) - 1 >= MAX_CLIENTS:
                            conn.close()
                            raise RuntimeError("too many clients")
                        selector.register(conn, selectors.EVENT_READ)
                    else:
                        _serve_client(selector, sock)
        finally:
            for key in list(selector.get_map().values()):
                if key.fileobj is not listener:
                    key.fileobj.close()


_SERVERS: dict[str, Callable[..., None]] = {
    "tcp": serve_tcp,
    "udp": serve_udp,
    "select": serve_select,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the upper-casing servers."""
    parser = argparse.ArgumentParser(prog="uppercase", description=main.__doc__)
    parser.add_argument("mode", nargs="?", default="tcp", choices=sorted(_SERVERS))
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=SERV_PORT)
    args = parser.parse_args(argv)
    try:
        _SERVERS[args.mode](args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except (OSError, RuntimeError) as exc:
        print(f"uppercase: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())