"""Board — the square grid shared by all insects and food points.

The board is sparse: only occupied cells are stored, keyed by
``Position``.  It enforces the one-entity-per-cell invariant on
placement and offers the lookups the movement engine needs while
scanning and travelling.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from insectboard.world.entities import Entity, FoodPoint, Insect
from insectboard.world.position import Position


@dataclass
class Board:
    """A ``size`` x ``size`` grid holding at most one entity per cell.

    Attributes:
        size: Side length; valid coordinates are ``1..size``.
        entities: Mapping from occupied position to its occupant.
    """

    size: int
    entities: dict[Position, Entity] = field(default_factory=dict, repr=False)

    def __len__(self) -> int:
        return len(self.entities)

    def contains(self, position: Position) -> bool:
        """Return True if ``position`` lies on the board."""
        return position.within(self.size)

    def entity_at(self, position: Position) -> Entity | None:
        """Return the occupant of ``position``, or None if the cell is empty."""
        return self.entities.get(position)

    def place(self, entity: Entity) -> None:
        """Put an entity on the cell named by its own position.

        Args:
            entity: Food point or insect to place.

        Raises:
            IndexError: If the position is outside the board.
            ValueError: If the cell is already occupied.
        """
        pos = entity.position
        if not self.contains(pos):
            msg = f"({pos.x}, {pos.y}) out of bounds for {self.size}x{self.size}"
            raise IndexError(msg)
        if pos in self.entities:
            msg = f"({pos.x}, {pos.y}) is already occupied"
            raise ValueError(msg)
        self.entities[pos] = entity

    def remove(self, position: Position) -> Entity | None:
        """Empty a cell and return what was there (None if already empty)."""
        return self.entities.pop(position, None)

    def food_points(self) -> Iterator[FoodPoint]:
        """Yield every food point still on the board."""
        for entity in self.entities.values():
            if isinstance(entity, FoodPoint):
                yield entity

    def insects(self) -> Iterator[Insect]:
        """Yield every insect still on the board."""
        for entity in self.entities.values():
            if isinstance(entity, Insect):
                yield entity

    def total_food(self) -> int:
        """Return the summed value of all remaining food."""
        return sum(food.value for food in self.food_points())

    def food_grid(self) -> NDArray[np.int64]:
        """Return remaining food values as a dense ``(size, size)`` array.

        Row ``x - 1``, column ``y - 1`` holds the value at ``Position(x, y)``;
        empty cells and insect cells are zero.
        """
        grid = np.zeros((self.size, self.size), dtype=np.int64)
        for food in self.food_points():
            grid[food.position.x - 1, food.position.y - 1] = food.value
        return grid
