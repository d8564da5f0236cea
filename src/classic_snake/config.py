"""Startup configuration for the snake game."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Colours used by the renderer."""

    background: RGB = (0, 0, 0)
    head: RGB = (0, 220, 100)
    body: RGB = (0, 160, 70)
    food: RGB = (0, 0, 255)


@dataclass(frozen=True)
class GameConfig:
    """Board, timing and window settings, fixed for a whole session.

    Supports JSON serialization so a launch can be reproduced.
    """

    # Board
    board_width: int = 40
    board_height: int = 40

    # Timing
    ticks_per_second: float = 8.0
    frame_rate: int = 60

    # Window
    cell_size: int = 32
    title: str = "Snake"
    colors: Palette = field(default_factory=Palette)

    def __post_init__(self) -> None:
        if self.board_width < 2 or self.board_height < 2:
            raise ValueError("Board dimensions must be at least 2×2.")
        if self.ticks_per_second <= 0:
            raise ValueError("ticks_per_second must be positive.")
        if self.frame_rate <= 0:
            raise ValueError("frame_rate must be positive.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be at least 1.")

    @property
    def screen_size(self) -> tuple[int, int]:
        """Window size in pixels."""
        return (
            self.board_width * self.cell_size,
            self.board_height * self.cell_size,
        )

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must hold a JSON object.")
        color_data = raw.pop("colors", {})
        if not isinstance(color_data, dict):
            raise ValueError("Config 'colors' must be a JSON object.")
        raw["colors"] = Palette(
            **{name: tuple(rgb) for name, rgb in color_data.items()},
        )
        return cls(**raw)
