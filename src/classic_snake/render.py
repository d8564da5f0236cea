"""Pygame rendering of a game session."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from classic_snake.board import CellType
from classic_snake.config import Palette

if TYPE_CHECKING:
    from classic_snake.engine import GameEngine


class SnakeRenderer:
    """Draws the board as a grid of solid ``cell_size`` squares.

    Rendering is stateless: every frame redraws the latest committed
    state, so a finished game simply stays frozen on screen.
    """

    def __init__(self, cell_size: int = 32, palette: Palette | None = None) -> None:
        if cell_size < 1:
            raise ValueError("cell_size must be at least 1.")
        self.cell_size = cell_size
        self.palette = palette if palette is not None else Palette()
        self._colors = {
            CellType.BODY: self.palette.body,
            CellType.HEAD: self.palette.head,
            CellType.FOOD: self.palette.food,
        }

    def cell_rect(self, x: int, y: int) -> pygame.Rect:
        """Screen rectangle covering board cell ``(x, y)``."""
        return pygame.Rect(
            x * self.cell_size, y * self.cell_size,
            self.cell_size, self.cell_size,
        )

    def draw(self, surface: pygame.Surface, engine: GameEngine) -> None:
        """Render the snake and food of *engine* onto *surface*."""
        surface.fill(self.palette.background)
        cells = engine.board.occupancy(engine.snake.body, engine.food)
        for cell_type, color in self._colors.items():
            for y, x in np.argwhere(cells == cell_type).tolist():
                pygame.draw.rect(surface, color, self.cell_rect(x, y))
