"""Movement engine — direction scanning, selection, and consuming travel.

An insect's turn has two phases:

1. **Scan**: for every direction in the species' gait, sum the food
   visible along the whole ray.  Scanning is read-only and looks
   straight through other insects.
2. **Travel**: walk the best ray, eating every food point passed.  The
   walk ends at the board edge or just *on* the first insect of a
   different colour; same-coloured insects are stepped over.

The mover leaves its starting cell before travelling and is never put
back on the board, so later insects see an empty cell there.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from insectboard.movement.directions import Direction, gait_for
from insectboard.world.entities import FoodPoint, Insect

if TYPE_CHECKING:
    from insectboard.world.board import Board
    from insectboard.world.position import Position

logger = logging.getLogger(__name__)


def ray(
    board: Board,
    origin: Position,
    direction: Direction,
    stride: int = 1,
) -> Iterator[Position]:
    """Yield the cells visited from ``origin`` along ``direction``.

    The first cell is one stride away from the origin; iteration stops
    as soon as a coordinate leaves ``[1, board.size]``.

    Args:
        board: Board supplying the bounds.
        origin: Starting cell (not yielded).
        direction: Direction of travel.
        stride: Cells advanced per step.
    """
    dx = direction.dx * stride
    dy = direction.dy * stride
    pos = origin.offset(dx, dy)
    while board.contains(pos):
        yield pos
        pos = pos.offset(dx, dy)


def visible_value(board: Board, insect: Insect, direction: Direction) -> int:
    """Return the total food value ``insect`` can see along ``direction``.

    Insects on the ray do not block sight.  Directions outside the
    insect's gait see nothing.
    """
    gait = gait_for(insect.species)
    if not gait.allows(direction):
        return 0
    total = 0
    for pos in ray(board, insect.position, direction, gait.stride):
        entity = board.entity_at(pos)
        if isinstance(entity, FoodPoint):
            total += entity.value
    return total


def best_direction(board: Board, insect: Insect) -> Direction:
    """Pick the gait direction exposing the most food.

    Directions are evaluated in canonical gait order and only a strictly
    greater value replaces the current best, so ties go to the direction
    listed first.  When nothing is visible the first direction wins.
    """
    directions = gait_for(insect.species).directions
    best = directions[0]
    best_value = visible_value(board, insect, best)
    logger.debug("%s sees %d %s", insect.name, best_value, best.label)
    for direction in directions[1:]:
        value = visible_value(board, insect, direction)
        logger.debug("%s sees %d %s", insect.name, value, direction.label)
        if value > best_value:
            best, best_value = direction, value
    return best


def travel(board: Board, insect: Insect, direction: Direction) -> int:
    """Move ``insect`` along ``direction``, eating food, and return the total.

    The insect is removed from its origin cell first, even if it cannot
    take a single step.  Every food point on a visited cell is eaten and
    removed.  The walk stops on the first insect of another colour and at
    the board edge.

    Raises:
        ValueError: If ``direction`` is not part of the insect's gait.
    """
    gait = gait_for(insect.species)
    if not gait.allows(direction):
        msg = f"{insect.species.value} cannot travel {direction.label}"
        raise ValueError(msg)

    board.remove(insect.position)
    eaten = 0
    for pos in ray(board, insect.position, direction, gait.stride):
        entity = board.entity_at(pos)
        if isinstance(entity, FoodPoint):
            eaten += entity.value
            board.remove(pos)
        elif isinstance(entity, Insect) and entity.color != insect.color:
            break
    return eaten


def take_turn(board: Board, insect: Insect) -> tuple[Direction, int]:
    """Play one insect's turn: choose the best direction and travel it.

    Returns:
        The chosen direction and the food value eaten along it.
    """
    direction = best_direction(board, insect)
    eaten = travel(board, insect, direction)
    return direction, eaten
