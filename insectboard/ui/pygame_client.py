"""Pygame 2D visualization for insect board runs.

Renders the board, food, and the insects still waiting for their turn
in a window.  The simulation plays insect turns at a configurable rate
while the display refreshes at the Pygame frame rate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from insectboard.simulation.engine import SimulationEngine

from insectboard.world.entities import Color

# Colour palette
_BG = (30, 20, 10)
_GRID_LINE = (40, 30, 20)
_TEXT = (200, 200, 200)

_INSECT_COLOURS: dict[Color, tuple[int, int, int]] = {
    Color.RED: (230, 60, 60),
    Color.GREEN: (90, 220, 90),
    Color.BLUE: (80, 140, 255),
    Color.YELLOW: (250, 220, 50),
}

# Food colour range (dark brown -> bright orange)
_FOOD_LO = np.array([70, 45, 15], dtype=np.float64)
_FOOD_HI = np.array([240, 150, 40], dtype=np.float64)


class PygameRenderer:
    """Renders a SimulationEngine state into a Pygame window.

    Board cell ``(x, y)`` is drawn at row ``x - 1``, column ``y - 1`` so
    that "North" points up the screen.

    Attributes:
        engine: The simulation engine to visualise.
        cell_size: Pixel size of each grid cell.
        screen: The Pygame display surface.
    """

    # Speed presets: insect turns per second
    _SPEED_STEPS: ClassVar[list[float]] = [0.25, 0.5, 1.0, 2.0, 4.0, 8.0, 16.0]

    def __init__(
        self,
        engine: SimulationEngine,
        cell_size: int = 24,
        turns_per_second: float = 1.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            engine: The simulation engine to render.
            cell_size: Pixel width/height per grid cell.
            turns_per_second: Insect turns played per real-time second.
        """
        self.engine = engine
        self.cell_size = cell_size
        self.turns_per_second = turns_per_second
        self._speed_index = self._nearest_speed(turns_per_second)
        self._turn_accumulator = 0.0

        side = engine.board.size * cell_size
        self._panel_width = 260
        self._win_w = side + self._panel_width
        self._win_h = max(side, 360)

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption("Insect Board")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    def _nearest_speed(self, tps: float) -> int:
        """Return the index of the closest speed preset."""
        diffs = [abs(s - tps) for s in self._SPEED_STEPS]
        return diffs.index(min(diffs))

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, play turns, render.

        The window stays open after the last turn until it is closed.

        Args:
            fps: Target frames per second.
        """
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused and not self.engine.finished:
                self._turn_accumulator += self.turns_per_second * dt
                turns = int(self._turn_accumulator)
                self._turn_accumulator -= turns
                for _ in range(turns):
                    self.engine.step()
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.turns_per_second = self._SPEED_STEPS[self._speed_index]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_grid()
        self._draw_food()
        self._draw_insects()
        self._draw_info_panel()
        pygame.display.flip()

    def _draw_grid(self) -> None:
        cs = self.cell_size
        side = self.engine.board.size * cs
        for i in range(self.engine.board.size + 1):
            pygame.draw.line(self.screen, _GRID_LINE, (i * cs, 0), (i * cs, side))
            pygame.draw.line(self.screen, _GRID_LINE, (0, i * cs), (side, i * cs))

    def _draw_food(self) -> None:
        """Draw food as squares shaded by value relative to the richest cell."""
        cs = self.cell_size
        grid = self.engine.board.food_grid()
        max_val = grid.max()
        if max_val <= 0:
            return
        for row, col in zip(*np.nonzero(grid)):
            t = grid[row, col] / max_val
            colour = _FOOD_LO + t * (_FOOD_HI - _FOOD_LO)
            pygame.draw.rect(
                self.screen,
                colour.astype(int).tolist(),
                (col * cs + 1, row * cs + 1, cs - 2, cs - 2),
            )

    def _draw_insects(self) -> None:
        """Draw each insect still on the board as a coloured dot."""
        cs = self.cell_size
        radius = max(2, cs // 3)
        for insect in self.engine.board.insects():
            colour = _INSECT_COLOURS[insect.color]
            cx = (insect.position.y - 1) * cs + cs // 2
            cy = (insect.position.x - 1) * cs + cs // 2
            pygame.draw.circle(self.screen, colour, (cx, cy), radius)
            if cs >= 16:
                label = self.font.render(insect.species.value[0], True, _BG)
                self.screen.blit(label, label.get_rect(center=(cx, cy)))

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        engine = self.engine
        panel_x = engine.board.size * self.cell_size + 10
        y = 10

        lines = [
            f"Turn: {engine.turn}/{len(engine.insects)}",
            f"Speed: {self.turns_per_second:.2f} t/s",
            "DONE" if engine.finished else ("PAUSED" if self.paused else "RUNNING"),
            f"Food left: {engine.board.total_food()}",
            "",
            "--- Results ---",
        ]
        lines += [result.format_line() for result in engine.results]
        lines += [
            "",
            "--- Controls ---",
            "SPACE: pause",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, _TEXT)
            self.screen.blit(surf, (panel_x, y))
            y += 18
