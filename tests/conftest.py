"""Shared fixtures for the insectboard test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from insectboard.simulation.config import SimulationConfig
from insectboard.world.board import Board
from insectboard.world.entities import Color, FoodPoint, Insect, Species
from insectboard.world.position import Position


@pytest.fixture
def small_board() -> Board:
    """An empty 4x4 board, the smallest size the loader accepts."""
    return Board(size=4)


@pytest.fixture
def board() -> Board:
    """An empty 6x6 board for fast tests."""
    return Board(size=6)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default run config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def put_insect() -> Callable[..., Insect]:
    """Factory placing an insect on a board: ``put_insect(board, x, y, ...)``."""

    def _put(
        board: Board,
        x: int,
        y: int,
        species: Species = Species.ANT,
        color: Color = Color.RED,
    ) -> Insect:
        insect = Insect(position=Position(x, y), color=color, species=species)
        board.place(insect)
        return insect

    return _put


@pytest.fixture
def put_food() -> Callable[..., FoodPoint]:
    """Factory placing a food point on a board: ``put_food(board, x, y, value)``."""

    def _put(board: Board, x: int, y: int, value: int) -> FoodPoint:
        food = FoodPoint(position=Position(x, y), value=value)
        board.place(food)
        return food

    return _put