"""Readiness-driven TCP servers: an echo server and a printing server."""

from __future__ import annotations

import argparse
import selectors
import socket
import sys
import threading
from typing import BinaryIO, Sequence

from sysdemos.sockutil import accept, send_all

ECHO_PORT = 1500
ECHO_BACKLOG = 10
ECHO_BUFFER = 1024
READ_SIZE = 512
POLL_INTERVAL = 0.2


def _stopped(stop: threading.Event | None) -> bool:
    return stop is not None and stop.is_set()


def _close_clients(selector: selectors.BaseSelector, listener: socket.socket) -> None:
    for key in list(selector.get_map().values()):
        if key.fileobj is not listener:
            key.fileobj.close()


def _echo(selector: selectors.BaseSelector, conn: socket.socket) -> None:
    try:
        data = conn.recv(ECHO_BUFFER)
    except OSError as exc:
        print(f"recv() error {conn.fileno()}: {exc}", file=sys.stderr)
        data = b""
    if not data:
        selector.unregister(conn)
        conn.close()
        return
    try:
        send_all(conn, data)
    except OSError as exc:
        print(f"send() error: {exc}", file=sys.stderr)


def serve_echo(
    host: str = "0.0.0.0",
    port: int = ECHO_PORT,
    stop: threading.Event | None = None,
) -> None:
    """Send every message back to the client that sent it, until ``stop`` is set.

    Raises OSError if the address cannot be bound.
    """
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as listener, \
            selectors.DefaultSelector() as selector:
        listener.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listener.bind((host, port))
        listener.listen(ECHO_BACKLOG)
        selector.register(listener, selectors.EVENT_READ)
        try:
            while not _stopped(stop):
                for key, _ in selector.select(POLL_INTERVAL):
                    if key.fileobj is listener:
                        try:
                            conn, _ = accept(listener)
                        except OSError as exc:
                            print(f"Server-accept() error: {exc}", file=sys.stderr)
                            continue
                        selector.register(conn, selectors.EVENT_READ)
                    else:
                        _echo(selector, key.fileobj)
        finally:
            _close_clients(selector, listener)


def _create_and_bind(host: str | None, port: int | str) -> socket.socket:
    infos = socket.getaddrinfo(
        host, port, socket.AF_UNSPEC, socket.SOCK_STREAM, 0, socket.AI_PASSIVE
    )
    for family, kind, proto, _, address in infos:
        try:
            sock = socket.socket(family, kind, proto)
        except OSError:
            continue
        try:
            sock.bind(address)
        except OSError:
            sock.close()
            continue
        return sock
    raise OSError("Could not bind")


def _emit(output: BinaryIO, data: bytes) -> None:
    output.write(data)
    if hasattr(output, "flush"):
        output.flush()


def _accept_all(
    selector: selectors.BaseSelector, listener: socket.socket, output: BinaryIO
) -> None:
    while True:
        try:
            conn, address = listener.accept()
        except BlockingIOError:
            return
        except OSError as exc:
            print(f"accept: {exc}", file=sys.stderr)
            return
        try:
            host, service = socket.getnameinfo(
                address, socket.NI_NUMERICHOST | socket.NI_NUMERICSERV
            )
        except OSError:
            pass
        else:
            _emit(
                output,
                f"Accepted connection on descriptor {conn.fileno()} "
                f"(host={host}, port={service})\n".encode(),
            )
        conn.setblocking(False)
        selector.register(conn, selectors.EVENT_READ)


def _drain(selector: selectors.BaseSelector, conn: socket.socket, output: BinaryIO) -> None:
    done = False
    while True:
        try:
            chunk = conn.recv(READ_SIZE)
        except BlockingIOError:
            break
        except OSError as exc:
            print(f"read: {exc}", file=sys.stderr)
            done = True
            break
        if not chunk:
            done = True
            break
        _emit(output, chunk)
    if done:
        descriptor = conn.fileno()
        _emit(output, f"Closed connection on descriptor {descriptor}\n".encode())
        selector.unregister(conn)
        conn.close()


def serve_print(
    host: str | None,
    port: int | str,
    output: BinaryIO | None = None,
    stop: threading.Event | None = None,
) -> None:
    """Write everything clients send to ``output``, reading each socket dry.

    Connections and disconnections are reported on ``output`` too. Raises
    OSError if no address for ``host`` and ``port`` can be bound.
    """
    target = sys.stdout.buffer if output is None else output
    with _create_and_bind(host, port) as listener, selectors.DefaultSelector() as selector:
        listener.setblocking(False)
        listener.listen(socket.SOMAXCONN)
        selector.register(listener, selectors.EVENT_READ)
        try:
            while not _stopped(stop):
                for key, _ in selector.select(POLL_INTERVAL):
                    if key.fileobj is listener:
                        _accept_all(selector, listener, target)
                    else:
                        _drain(selector, key.fileobj, target)
        finally:
            _close_clients(selector, listener)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the echo server or the printing server."""
    parser = argparse.ArgumentParser(prog="events", description=main.__doc__)
    commands = parser.add_subparsers(dest="mode", required=True)
    echo = commands.add_parser("echo", help="echo every message back")
    echo.add_argument("--host", default="0.0.0.0")
    echo.add_argument("--port", type=int, default=ECHO_PORT)
    printer = commands.add_parser("print", help="print what clients send")
    printer.add_argument("port")
    printer.add_argument("--host", default=None)
    args = parser.parse_args(argv)
    try:
        if args.mode == "echo":
            serve_echo(args.host, args.port)
        else:
            serve_print(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"events: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())