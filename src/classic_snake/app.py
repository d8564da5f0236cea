"""Window bootstrap and event loop."""

from __future__ import annotations

import logging

import pygame

from classic_snake.clock import FixedRateGate
from classic_snake.config import GameConfig
from classic_snake.engine import GameEngine
from classic_snake.render import SnakeRenderer

logger = logging.getLogger(__name__)

RESTART_KEY = "r"


class SnakeApp:
    """Couples one engine to the window, the keyboard and two clocks.

    Simulation ticks are released by a :class:`FixedRateGate`; frames are
    paced by pygame's clock. Both run on the calling thread.
    """

    def __init__(self, config: GameConfig, seed: int | None = None) -> None:
        self.config = config
        self.engine = GameEngine(config, seed=seed)
        self.renderer = SnakeRenderer(config.cell_size, config.colors)
        self.gate = FixedRateGate(config.ticks_per_second)
        self.running = True

    def restart(self) -> None:
        """Replace the finished session with a fresh one."""
        logger.info("Restarting after game over (score %d).", self.engine.score)
        self.engine = GameEngine(self.config)
        self.gate.reset()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Quit, restart or steer in response to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            key = pygame.key.name(event.key)
            if self.engine.over and key == RESTART_KEY:
                self.restart()
            else:
                self.engine.handle_key(key)

    def update(self) -> None:
        """Step the engine if a tick is due."""
        if self.gate.ready():
            self.engine.step()

    def run(self) -> None:
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.config.screen_size)
            pygame.display.set_caption(self.config.title)
            frame_clock = pygame.time.Clock()
            self.gate.reset()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                self.update()
                self.renderer.draw(screen, self.engine)
                pygame.display.flip()
                frame_clock.tick(self.config.frame_rate)
        finally:
            pygame.quit()
        logger.info(
            "Window closed at tick %d with score %d.",
            self.engine.tick, self.engine.score,
        )


def run(config: GameConfig | None = None, seed: int | None = None) -> None:
    """Open the game window and play until it is closed."""
    SnakeApp(config if config is not None else GameConfig(), seed=seed).run()
