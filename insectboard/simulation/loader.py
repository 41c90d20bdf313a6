"""Loader — read and validate a scenario file.

A scenario file is a stream of whitespace-separated tokens::

    d                   board size
    n                   number of insects
    m                   number of food points
    Color Species x y   (n times)
    value x y           (m times)

Validation is fail-fast and follows the token order, so the first
problem in the file is the one reported.  The movement engine relies on
every invariant checked here (in-bounds positions, one entity per cell,
unique species/colour pairs) and performs no checks of its own.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from insectboard.simulation.config import SimulationConfig
from insectboard.simulation.errors import (
    DuplicateInsectError,
    EntityCollisionError,
    InvalidBoardSizeError,
    InvalidEntityPositionError,
    InvalidFoodCountError,
    InvalidInsectColorError,
    InvalidInsectCountError,
    InvalidInsectTypeError,
    MalformedInputError,
    SimulationError,
)
from insectboard.world.entities import Color, FoodPoint, Insect, Species
from insectboard.world.position import Position

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"-?[0-9]+")


@dataclass
class Scenario:
    """A validated simulation input.

    Attributes:
        board_size: Side length of the board.
        insects: Insects in input order (this is also turn order).
        food_points: Food points in input order.
    """

    board_size: int
    insects: list[Insect] = field(default_factory=list)
    food_points: list[FoodPoint] = field(default_factory=list)


class _Tokens:
    """Sequential reader over the whitespace-separated tokens of a file."""

    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def next(self) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise MalformedInputError() from None

    def next_int(self) -> int:
        token = self.next()
        if not _INTEGER.fullmatch(token):
            raise MalformedInputError()
        return int(token)


def parse_scenario(
    text: str,
    config: SimulationConfig | None = None,
) -> Scenario:
    """Parse and validate scenario text.

    Args:
        text: Full contents of a scenario file.
        config: Validation limits (defaults to ``SimulationConfig()``).

    Returns:
        The validated scenario.

    Raises:
        SimulationError: The first validation failure found, as one of
            its subclasses.
    """
    config = config or SimulationConfig()
    tokens = _Tokens(text)

    size = tokens.next_int()
    if not config.min_board_size <= size <= config.max_board_size:
        raise InvalidBoardSizeError()

    n = tokens.next_int()
    if not config.min_entities <= n <= config.max_insects:
        raise InvalidInsectCountError()

    m = tokens.next_int()
    if not config.min_entities <= m <= config.max_food_points:
        raise InvalidFoodCountError()

    scenario = Scenario(board_size=size)
    identities: set[tuple[Species, Color]] = set()
    occupied: set[Position] = set()

    for _ in range(n):
        color_token = tokens.next()
        species_token = tokens.next()
        pos = Position(tokens.next_int(), tokens.next_int())

        try:
            color = Color(color_token)
        except ValueError:
            raise InvalidInsectColorError() from None
        try:
            species = Species(species_token)
        except ValueError:
            raise InvalidInsectTypeError() from None
        if not pos.within(size):
            raise InvalidEntityPositionError()
        if (species, color) in identities:
            raise DuplicateInsectError()
        identities.add((species, color))
        if pos in occupied:
            raise EntityCollisionError()
        occupied.add(pos)

        scenario.insects.append(Insect(position=pos, color=color, species=species))

    for _ in range(m):
        value = tokens.next_int()
        pos = Position(tokens.next_int(), tokens.next_int())

        if not pos.within(size):
            raise InvalidEntityPositionError()
        if pos in occupied:
            raise EntityCollisionError()
        occupied.add(pos)

        scenario.food_points.append(FoodPoint(position=pos, value=value))

    return scenario


def load_scenario(
    path: str | Path,
    config: SimulationConfig | None = None,
) -> Scenario:
    """Read and validate a scenario file.

    Raises:
        FileNotFoundError: If the file does not exist.
        SimulationError: If the contents fail validation or are not
            valid text.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        logger.warning("Rejected scenario %s: not valid UTF-8 text", path)
        raise MalformedInputError() from None
    try:
        scenario = parse_scenario(text, config)
    except SimulationError as exc:
        logger.warning("Rejected scenario %s: %s", path, exc)
        raise
    logger.info(
        "Loaded %s: board %dx%d, %d insects, %d food points",
        path,
        scenario.board_size,
        scenario.board_size,
        len(scenario.insects),
        len(scenario.food_points),
    )
    return scenario
