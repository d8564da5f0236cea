"""Command-line launcher for the snake game."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-snake",
        description="Play Snake on a wrap-around board.",
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for food placement (default: OS entropy).",
    )
    parser.add_argument(
        "--log-level", type=str.upper, default="INFO", choices=_LOG_LEVELS,
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``classic-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    from classic_snake.app import run
    from classic_snake.config import GameConfig
    from classic_snake.engine import EntropyUnavailableError

    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
    except (OSError, ValueError, TypeError) as exc:
        logger.error("Could not load config %s: %s", args.config, exc)
        return 1

    try:
        run(config, seed=args.seed)
    except EntropyUnavailableError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
