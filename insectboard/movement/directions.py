"""Directions and gaits.

The board uses a row/column axis convention: moving north *decreases*
``x`` and moving east *increases* ``y``.  Output files depend on this
mapping, so the vectors below must not be "corrected" to compass axes.

A species' gait is the ordered tuple of directions it may evaluate plus
the stride it takes per step.  The order doubles as the tie-break order
when two directions expose the same visible food value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from insectboard.world.entities import Species


class Direction(Enum):
    """The eight travel directions with their labels and unit vectors."""

    N = ("North", -1, 0)
    E = ("East", 0, 1)
    S = ("South", 1, 0)
    W = ("West", 0, -1)
    NE = ("North-East", -1, 1)
    SE = ("South-East", 1, 1)
    SW = ("South-West", 1, -1)
    NW = ("North-West", -1, -1)

    def __init__(self, label: str, dx: int, dy: int) -> None:
        self.label = label
        self.dx = dx
        self.dy = dy


ORTHOGONAL: tuple[Direction, ...] = (Direction.N, Direction.E, Direction.S, Direction.W)
DIAGONAL: tuple[Direction, ...] = (
    Direction.NE,
    Direction.SE,
    Direction.SW,
    Direction.NW,
)


@dataclass(frozen=True)
class Gait:
    """Movement capability of a species.

    Attributes:
        directions: Directions the species may scan and travel, in
            canonical evaluation order.
        stride: Cells advanced per step (2 means every other cell is
            skipped entirely).
    """

    directions: tuple[Direction, ...]
    stride: int = 1

    def allows(self, direction: Direction) -> bool:
        """Return True if ``direction`` is part of this gait."""
        return direction in self.directions


GAITS: dict[Species, Gait] = {
    Species.BUTTERFLY: Gait(ORTHOGONAL),
    Species.SPIDER: Gait(DIAGONAL),
    # Orthogonal first so they win ties against diagonals
    Species.ANT: Gait(ORTHOGONAL + DIAGONAL),
    Species.GRASSHOPPER: Gait(ORTHOGONAL, stride=2),
}


def gait_for(species: Species) -> Gait:
    """Return the gait of ``species``."""
    return GAITS[species]
