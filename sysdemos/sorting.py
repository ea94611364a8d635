"""Bottom-up merge sort."""

from __future__ import annotations

import sys
from heapq import merge
from typing import Iterable, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_VALUES = (2, 1, 5, 6, 3, 7, 4, 9, 8, 0)


def merge_sort(values: Iterable[T]) -> list[T]:
    """Return a new list with ``values`` sorted by bottom-up merging.

    Runs of width 1, 2, 4, ... are merged pairwise until one run remains.
    """
    runs: list[list[T]] = [[item] for item in values]
    while len(runs) > 1:
        pairs = zip(runs[0::2], runs[1::2])
        merged = [list(merge(left, right)) for left, right in pairs]
        if len(runs) % 2:
            merged.append(runs[-1])
        runs = merged
    return runs[0] if runs else []


def _parse(argv: Sequence[str]) -> list[int]:
    try:
        return [int(arg) for arg in argv]
    except ValueError as exc:
        raise SystemExit(f"not an integer: {exc}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the integers given as arguments, or a fixed sample, and print them."""
    args = list(sys.argv[1:] if argv is None else argv)
    values = _parse(args) if args else list(DEFAULT_VALUES)
    print("".join(f"{value}\t" for value in merge_sort(values)), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())