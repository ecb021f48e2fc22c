"""Command line entry point for Timed Snake."""

from __future__ import annotations

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="timed-snake",
        description="Grid snake with expiring food and a limited number of lives.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Open a window and play.")
    play_p.add_argument(
        "--assets", type=str, default=None,
        help="Directory containing head.png, body.png and apple.png.",
    )
    play_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    play_p.add_argument("--seed", type=int, default=None)
    play_p.add_argument("--fps", type=int, default=60)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Play sessions headlessly with random headings.",
    )
    sim_p.add_argument("--sessions", type=int, default=100)
    sim_p.add_argument("--seed", type=int, default=42)
    sim_p.add_argument("--max-ticks", type=int, default=10_000)
    sim_p.add_argument("--config", type=str, default=None)
    sim_p.add_argument(
        "--show", action="store_true",
        help="Print an ASCII frame after every tick.",
    )

    return parser


def _load_config(path: str | None):
    from timed_snake.config import GameConfig

    return GameConfig.load(path) if path else GameConfig()


def _run_play(args: argparse.Namespace) -> int:
    import time

    import pygame

    from timed_snake.engine import GameEngine
    from timed_snake.frontend import SnakeWindow

    config = _load_config(args.config)
    pygame.init()
    try:
        engine = GameEngine(config, now=time.monotonic(), seed=args.seed)
        try:
            window = SnakeWindow(engine, assets_dir=args.assets)
        except (OSError, pygame.error) as exc:
            logger.critical("Failed to load sprites: %s", exc)
            return 1
        window.run(fps=args.fps)
    finally:
        pygame.quit()
    return 0


def _run_simulate(args: argparse.Namespace) -> int:
    from timed_snake.simulate import simulate_sessions

    result = simulate_sessions(
        sessions=args.sessions,
        seed=args.seed,
        max_ticks=args.max_ticks,
        config=_load_config(args.config),
        show=args.show,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``timed-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "play": _run_play,
        "simulate": _run_simulate,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
