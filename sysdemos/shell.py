"""A minimal shell that runs one program per input line."""

from __future__ import annotations

import signal
import subprocess
import sys
from typing import Iterable, Sequence, TextIO

PROMPT = "% "
EXEC_FAILURE = 127


def run_command(command: str) -> int:
    """Run the program named by ``command`` with no arguments; return its status.

    A program that cannot be started is reported on stderr and gives 127.
    """
    try:
        return subprocess.run([command], check=False).returncode
    except (OSError, ValueError) as exc:
        reason = getattr(exc, "strerror", None) or str(exc)
        print(f"couldn't exec: {command}: {reason}", file=sys.stderr)
        return EXEC_FAILURE


def run_shell(source: Iterable[str], output: TextIO | None = None) -> list[int]:
    """Run each line of ``source`` as a command, writing a prompt after each.

    Returns the exit status of every command in order.
    """
    target = sys.stdout if output is None else output
    statuses = []
    for line in source:
        command = line[:-1] if line.endswith("\n") else line
        if hasattr(target, "flush"):
            target.flush()
        statuses.append(run_command(command))
        target.write(PROMPT)
        if hasattr(target, "flush"):
            target.flush()
    return statuses


def _on_interrupt(signo: int, _frame: object) -> None:
    print(f"interrupt sino: {signo}", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Read program names from standard input and run each in turn."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        print("usage: shell < commands", file=sys.stderr)
        return 2
    previous = signal.signal(signal.SIGINT, _on_interrupt)
    try:
        run_shell(sys.stdin, sys.stdout)
    finally:
        signal.signal(signal.SIGINT, previous)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())