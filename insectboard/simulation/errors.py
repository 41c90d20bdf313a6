"""Errors raised while reading and validating a scenario.

Each error carries the exact one-line message written to the output
file in place of results, so ``str(error)`` is user-facing text.
"""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for scenario errors.  Also used for malformed input."""

    message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class MalformedInputError(SimulationError):
    """A token is missing or is not an integer where one is expected."""


class InvalidBoardSizeError(SimulationError):
    message = "Invalid board size"


class InvalidInsectCountError(SimulationError):
    message = "Invalid number of insects"


class InvalidFoodCountError(SimulationError):
    message = "Invalid number of food points"


class InvalidInsectColorError(SimulationError):
    message = "Invalid insect color"


class InvalidInsectTypeError(SimulationError):
    message = "Invalid insect type"


class InvalidEntityPositionError(SimulationError):
    message = "Invalid entity position"


class DuplicateInsectError(SimulationError):
    """Two insects share both species and colour."""

    message = "Duplicate insects"


class EntityCollisionError(SimulationError):
    """Two entities were given the same cell."""

    message = "Two entities in the same position"
