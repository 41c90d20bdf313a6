"""Position — an immutable coordinate on the board."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A 1-indexed grid coordinate.

    Positions are hashable and serve directly as board keys.

    Attributes:
        x: Row index (decreases when moving north).
        y: Column index (increases when moving east).
    """

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Position:
        """Return the position shifted by ``(dx, dy)``."""
        return Position(self.x + dx, self.y + dy)

    def within(self, size: int) -> bool:
        """Return True if both coordinates lie in ``[1, size]``."""
        return 1 <= self.x <= size and 1 <= self.y <= size
