"""Splitting text into tokens on a set of delimiter characters."""

from __future__ import annotations

import re
import sys
from typing import Sequence

DEFAULT_TEXT = "a:;22:;33"
DEFAULT_DELIMITERS = ":;"


def tokenize(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on runs of any character in ``delimiters``.

    Empty tokens are never produced, so leading, trailing and repeated
    delimiters are skipped.
    """
    if not delimiters:
        return [text] if text else []
    pattern = "[" + "".join(re.escape(char) for char in delimiters) + "]+"
    return [token for token in re.split(pattern, text) if token]


def main(argv: Sequence[str] | None = None) -> int:
    """Print each token of TEXT split on DELIMITERS, one per line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 2:
        print("usage: tokens [TEXT [DELIMITERS]]", file=sys.stderr)
        return 2
    text = args[0] if args else DEFAULT_TEXT
    delimiters = args[1] if len(args) > 1 else DEFAULT_DELIMITERS
    for token in tokenize(text, delimiters):
        print(token)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())