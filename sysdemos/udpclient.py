"""A UDP client that sends lines and writes back the replies."""

from __future__ import annotations

import argparse
import socket
import sys
from typing import BinaryIO, Iterable, Iterator, Sequence

MAXLINE = 80
SERV_PORT = 8000
DEFAULT_HOST = "127.0.0.1"


def _chunks(line: bytes) -> Iterator[bytes]:
    size = MAXLINE - 1
    for start in range(0, len(line), size):
        yield line[start:start + size]


def send_lines(
    lines: Iterable[bytes | str],
    host: str = DEFAULT_HOST,
    port: int = SERV_PORT,
    output: BinaryIO | None = None,
) -> int:
    """Send each line as datagrams of at most MAXLINE - 1 bytes.

    Every reply is written to ``output``; the number of datagrams
    exchanged is returned.
    """
    target = sys.stdout.buffer if output is None else output
    count = 0
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        for line in lines:
            data = line.encode() if isinstance(line, str) else bytes(line)
            for chunk in _chunks(data):
                sock.sendto(chunk, (host, port))
                reply, _ = sock.recvfrom(MAXLINE)
                target.write(reply)
                if hasattr(target, "flush"):
                    target.flush()
                count += 1
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Send standard input line by line and print the server's replies."""
    parser = argparse.ArgumentParser(prog="udpclient", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=SERV_PORT)
    args = parser.parse_args(argv)
    try:
        send_lines(sys.stdin.buffer, args.host, args.port, sys.stdout.buffer)
    except OSError as exc:
        print(f"sendto error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())