"""Entities — everything that can occupy a board cell.

Two kinds of occupant exist: food points, which carry a value and never
move, and insects, which carry a colour and a species.  The species
selects the insect's gait (see ``insectboard.movement.directions``).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from insectboard.world.position import Position


class Color(Enum):
    """Insect colour.  Values are the tokens used in input and output."""

    RED = "Red"
    GREEN = "Green"
    BLUE = "Blue"
    YELLOW = "Yellow"


class Species(Enum):
    """Insect species.  Values are the tokens used in input and output."""

    ANT = "Ant"
    BUTTERFLY = "Butterfly"
    SPIDER = "Spider"
    GRASSHOPPER = "Grasshopper"


@dataclass(frozen=True)
class FoodPoint:
    """A stationary pile of food.

    Attributes:
        position: Cell holding the food.
        value: Nutritional value collected by the insect that eats it.
    """

    position: Position
    value: int


@dataclass
class Insect:
    """A foraging insect.

    Attributes:
        position: Starting cell.  Travel removes the insect from the
            board instead of updating this field.
        color: Insects of a different colour block each other's travel.
        species: Selects the directions and stride the insect may use.
    """

    position: Position
    color: Color
    species: Species

    @property
    def name(self) -> str:
        """Return the display name, e.g. ``"Red Ant"``."""
        return f"{self.color.value} {self.species.value}"


Entity = FoodPoint | Insect
