"""Snake representation, movement and turn handling."""

from __future__ import annotations

import enum
from collections import deque
from typing import TYPE_CHECKING

from classic_snake.board import Position

if TYPE_CHECKING:
    from classic_snake.board import Board


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def inverse(self) -> Direction:
        """Return the direction pointing the opposite way."""
        return _OPPOSITES[self]

    @classmethod
    def from_key(cls, key: str) -> Direction | None:
        """Map an arrow-key name (as reported by pygame) to a direction.

        Unmapped keys return ``None``.
        """
        return _KEYS.get(key.lower())


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_KEYS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


class Touched(enum.Enum):
    """What the head ran into on the last tick."""

    NONE = "none"
    BODY = "body"
    FOOD = "food"


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``. There is no separate
    head field.
    """

    def __init__(
        self,
        board: Board,
        start: Position,
        direction: Direction = Direction.RIGHT,
        length: int = 2,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        if not board.contains(start):
            raise ValueError("Snake must start on the board.")
        self.board = board
        back = direction.inverse()
        self.body: deque[Position] = deque([Position(*start)])
        for _ in range(length - 1):
            self.body.append(board.move(self.body[-1], back))
        self.direction = direction
        self.last_direction = direction
        self.pending_direction: Direction | None = None
        self.touched = Touched.NONE

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def request_direction(self, direction: Direction) -> None:
        """Apply a turn request from the player.

        While a turn is still in flight (``direction`` differs from
        ``last_direction``) the request is queued and committed by
        :meth:`update` after one full tick. A direct turn discards any older
        queued request. Repeats of the current direction and requests that
        would reverse the snake onto itself are dropped.
        """
        if direction in (self.direction, self.direction.inverse()):
            return
        if self.direction != self.last_direction:
            self.pending_direction = direction
        else:
            self.direction = direction
            self.pending_direction = None

    def update(self, food: Position) -> Touched:
        """Advance one tick and report what the new head touched."""
        if (
            self.last_direction == self.direction
            and self.pending_direction is not None
        ):
            self.direction = self.pending_direction
            self.pending_direction = None

        new_head = self.board.move(self.head, self.direction)

        # The tail has not moved yet, so running into it is fatal.
        if new_head in self.body:
            touched = Touched.BODY
        elif new_head == food:
            touched = Touched.FOOD
        else:
            touched = Touched.NONE

        self.body.appendleft(new_head)
        if touched is Touched.NONE:
            self.body.pop()

        self.last_direction = self.direction
        self.touched = touched
        return touched

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
            "last_direction": self.last_direction.name.lower(),
            "pending_direction": (
                self.pending_direction.name.lower()
                if self.pending_direction is not None else None
            ),
            "touched": self.touched.value,
        }
