"""A rectangular box with integer dimensions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Box:
    """A box; dimensions default to zero."""

    width: int = 0
    length: int = 0
    height: int = 0

    def volume(self) -> int:
        """Return width * length * height."""
        return self.width * self.length * self.height


def cube(size: int) -> Box:
    """Return a box with all three dimensions equal to ``size``."""
    return Box(size, size, size)