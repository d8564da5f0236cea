"""Step-based game session composing board, snake and food."""

from __future__ import annotations

import logging
import secrets

import numpy as np

from classic_snake.board import Board, Position
from classic_snake.config import GameConfig
from classic_snake.snake import Direction, Snake, Touched

logger = logging.getLogger(__name__)

INITIAL_LENGTH = 2


class EntropyUnavailableError(RuntimeError):
    """The operating system could not supply a random seed."""


def seed_from_entropy() -> int:
    """Draw a 128-bit seed from the OS entropy source."""
    try:
        seed = secrets.randbits(128)
    except (NotImplementedError, OSError) as exc:
        raise EntropyUnavailableError(
            "Unable to read a random seed from the OS entropy source."
        ) from exc
    logger.debug("Drew seed %d from OS entropy.", seed)
    return seed


class GameEngine:
    """Single-snake, step-based game session.

    The engine owns the board, the random generator, the snake and the
    food. Each call to :meth:`step` advances the game by one tick and
    returns the updated state dictionary. Once the snake runs into itself
    the session is over and further steps are no-ops; start a new game by
    constructing a new engine.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.board_width, self.config.board_height)
        self.seed = seed if seed is not None else seed_from_entropy()
        self.rng = np.random.default_rng(self.seed)

        start = Position(self.board.width // 2, self.board.height // 2)
        self.snake = Snake(
            self.board, start, Direction.RIGHT, length=INITIAL_LENGTH,
        )
        self.food = self.board.random_position(self.rng)

        self.score = 0
        self.tick = 0
        self.over = False
        logger.info(
            "New game on a %dx%d board (seed=%d).",
            self.board.width, self.board.height, self.seed,
        )

    def handle_key(self, key: str) -> None:
        """Turn the snake if *key* names an arrow key.

        Other keys, and any key once the game is over, are ignored.
        """
        if self.over:
            return
        direction = Direction.from_key(key)
        if direction is not None:
            self.snake.request_direction(direction)

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict.
        """
        if self.over:
            return self.get_state()

        touched = self.snake.update(self.food)
        self.tick += 1

        if touched is Touched.BODY:
            self.over = True
            logger.info(
                "Snake ran into itself at tick %d with score %d.",
                self.tick, self.score,
            )
        elif touched is Touched.FOOD:
            self.score += 1
            self.food = self.board.random_position(self.rng)
            logger.debug(
                "Food eaten at tick %d; relocated to %s.", self.tick, self.food,
            )

        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "score": self.score,
            "over": self.over,
            "board": self.board.to_dict(),
            "snake": self.snake.to_dict(),
            "food": list(self.food),
            "cells": self.board.occupancy(self.snake.body, self.food).tolist(),
        }
