"""A daytime-protocol client over IPv6."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import Sequence

DAYTIME_PORT = 13
MAXLINE = 4096


def fetch_daytime(address: str, port: int = DAYTIME_PORT) -> bytes:
    """Connect to ``address`` over IPv6 and return everything the server sends.

    Raises ValueError if ``address`` is not an IPv6 address, OSError on
    connection or read failures.
    """
    try:
        socket.inet_pton(socket.AF_INET6, address)
    except (OSError, ValueError) as exc:
        raise ValueError(f"inet_pton error for {address}") from exc
    parts: list[bytes] = []
    with socket.socket(socket.AF_INET6, socket.SOCK_STREAM) as sock:
        sock.connect((address, port, 0, 0))
        while chunk := sock.recv(MAXLINE):
            parts.append(chunk)
    return b"".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the time reported by a daytime server at an IPv6 address."""
    parser = argparse.ArgumentParser(prog="daytime", description=main.__doc__)
    parser.add_argument("address")
    parser.add_argument("--port", type=int, default=DAYTIME_PORT)
    args = parser.parse_args(argv)
    try:
        data = fetch_daytime(args.address, args.port)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"connect error: {exc}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())