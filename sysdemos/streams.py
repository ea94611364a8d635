"""Copying one stream to another in fixed-size chunks."""

from __future__ import annotations

import argparse
import sys
from typing import IO, AnyStr, Sequence

BUFFER_SIZE = 4096


def copy_stream(source: IO[AnyStr], target: IO[AnyStr], chunk_size: int = BUFFER_SIZE) -> int:
    """Copy ``source`` to ``target`` until end of input; return the amount copied.

    Raises OSError if the target accepts fewer items than it was given.
    """
    if chunk_size <= 0:
        raise ValueError("chunk_size must be positive")
    total = 0
    while chunk := source.read(chunk_size):
        written = target.write(chunk)
        if written is not None and written != len(chunk):
            raise OSError("write error")
        total += len(chunk)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Copy standard input to standard output."""
    parser = argparse.ArgumentParser(prog="streams", description=main.__doc__)
    parser.add_argument(
        "-c",
        "--chunk-size",
        type=int,
        default=BUFFER_SIZE,
        help="bytes per read (1 copies byte by byte)",
    )
    args = parser.parse_args(argv)
    if args.chunk_size <= 0:
        parser.error("chunk size must be positive")
    try:
        copy_stream(sys.stdin.buffer, sys.stdout.buffer, args.chunk_size)
        sys.stdout.buffer.flush()
    except OSError as exc:
        print(f"streams: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())