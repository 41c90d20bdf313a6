"""SimulationEngine — the turn loop.

Owns the board and the insects in input order and plays one insect turn
per step:

1. Scan every direction of the insect's gait (read-only)
2. Pick the best direction (first maximum wins)
3. Travel it, eating food and vacating the start cell

Each turn sees the board exactly as earlier turns left it.  Insects are
never revisited.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from insectboard.movement.directions import Direction
from insectboard.movement.engine import take_turn
from insectboard.simulation.loader import Scenario
from insectboard.world.board import Board
from insectboard.world.entities import Color, Insect, Species

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnResult:
    """Outcome of one insect's turn.

    Attributes:
        color: Colour of the insect that moved.
        species: Species of the insect that moved.
        direction: Direction it chose.
        eaten: Total food value it collected.
    """

    color: Color
    species: Species
    direction: Direction
    eaten: int

    def format_line(self) -> str:
        """Render as an output line, e.g. ``"Yellow Butterfly East 5"``."""
        return (
            f"{self.color.value} {self.species.value} "
            f"{self.direction.label} {self.eaten}"
        )


@dataclass
class SimulationEngine:
    """Drives the simulation forward one insect at a time.

    Attributes:
        board: The shared board, mutated by every turn.
        insects: All insects in turn order.  The list keeps insects that
            have already left the board so results can be reported.
        results: One result per completed turn, in turn order.
        turn: Index of the next insect to move.
    """

    board: Board
    insects: list[Insect]
    results: list[TurnResult] = field(init=False, default_factory=list)
    turn: int = 0

    @classmethod
    def from_scenario(cls, scenario: Scenario) -> SimulationEngine:
        """Build a board from a validated scenario and wrap it in an engine.

        Insects are placed before food, both in input order.
        """
        board = Board(size=scenario.board_size)
        for insect in scenario.insects:
            board.place(insect)
        for food in scenario.food_points:
            board.place(food)
        return cls(board=board, insects=list(scenario.insects))

    @property
    def finished(self) -> bool:
        """Return True once every insect has taken its turn."""
        return self.turn >= len(self.insects)

    def step(self) -> TurnResult | None:
        """Play the next insect's turn.

        Returns:
            The turn's result, or None if every insect has already moved.
        """
        if self.finished:
            return None

        insect = self.insects[self.turn]
        direction, eaten = take_turn(self.board, insect)
        result = TurnResult(
            color=insect.color,
            species=insect.species,
            direction=direction,
            eaten=eaten,
        )
        self.results.append(result)
        self.turn += 1
        logger.info(
            "Turn %d: %s went %s and ate %d",
            self.turn,
            insect.name,
            direction.label,
            eaten,
        )
        return result

    def run(self) -> list[TurnResult]:
        """Play all remaining turns.

        Returns:
            Results of every turn played so far, in turn order.
        """
        while not self.finished:
            self.step()
        return self.results
