"""Toroidal board geometry for the snake game."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from classic_snake.snake import Direction


class Position(NamedTuple):
    """An ``(x, y)`` cell coordinate. ``y`` grows downward."""

    x: int
    y: int


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy raster."""

    EMPTY = 0
    BODY = 1
    HEAD = 2
    FOOD = 3


def random_position(
    rng: np.random.Generator, max_x: int, max_y: int,
) -> Position:
    """Draw a uniform position in ``[0, max_x) x [0, max_y)``.

    Every draw is accepted; the result may land on an occupied cell.
    """
    x = int(rng.integers(0, max_x))
    y = int(rng.integers(0, max_y))
    return Position(x, y)


class Board:
    """Fixed-size board whose edges wrap around.

    The board holds no cell state of its own; it is the modulus for
    coordinate arithmetic and knows how to rasterise a snake and food.
    """

    def __init__(self, width: int = 40, height: int = 40) -> None:
        if width < 2 or height < 2:
            raise ValueError("Board dimensions must be at least 2×2.")
        self.width = width
        self.height = height

    def contains(self, position: Position) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def wrap(self, x: int, y: int) -> Position:
        """Wrap raw coordinates onto the board with floor modulo."""
        return Position(x % self.width, y % self.height)

    def move(self, position: Position, direction: Direction) -> Position:
        """Return the cell one step from *position* in *direction*."""
        dx, dy = direction.value
        return self.wrap(position.x + dx, position.y + dy)

    def random_position(self, rng: np.random.Generator) -> Position:
        return random_position(rng, self.width, self.height)

    def occupancy(
        self, segments: Iterable[Position], food: Position | None = None,
    ) -> np.ndarray:
        """Rasterise *segments* (head first) and *food* into a grid.

        The array is indexed ``[y, x]``. Food lying under a body segment
        stays visible; the head is drawn over both.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        segments = list(segments)
        for seg in segments[1:]:
            cells[seg.y, seg.x] = CellType.BODY
        if food is not None:
            cells[food.y, food.x] = CellType.FOOD
        if segments:
            head = segments[0]
            cells[head.y, head.x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize board dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
