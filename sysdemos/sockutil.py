"""Socket helpers that finish partial reads and writes and retry accepts."""

from __future__ import annotations

import socket


def recv_exactly(sock: socket.socket, size: int) -> bytes:
    """Read up to ``size`` bytes, stopping early only when the peer closes."""
    if size < 0:
        raise ValueError("size must not be negative")
    parts: list[bytes] = []
    remaining = size
    while remaining > 0:
        try:
            chunk = sock.recv(remaining)
        except InterruptedError:
            continue
        if not chunk:
            break
        parts.append(chunk)
        remaining -= len(chunk)
    return b"".join(parts)


def send_all(sock: socket.socket, data: bytes) -> int:
    """Send every byte of ``data``; return the number of bytes sent."""
    view = memoryview(data)
    while view:
        try:
            sent = sock.send(view)
        except InterruptedError:
            continue
        if sent <= 0:
            raise OSError("connection refused further data")
        view = view[sent:]
    return len(data)


def accept(sock: socket.socket) -> tuple[socket.socket, object]:
    """Accept a connection, retrying when one is aborted or interrupted."""
    while True:
        try:
            return sock.accept()
        except (ConnectionAbortedError, InterruptedError):
            continue