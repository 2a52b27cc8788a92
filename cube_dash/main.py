#!/usr/bin/env python3
"""
Cube Dash - Main Entry Point

Run through a random maze collecting coins. Power-ups let you eat the
enemies for a few seconds; otherwise touching one costs a life. Clear
every coin to advance a level.

Usage:
    cube-dash [--seed N] [--fps N] [--log-level LEVEL]

Controls:
    Arrow keys: Move
    Space: Start / restart
    Escape: Quit
"""
import argparse
import logging
import random
import sys

import pygame

from cube_dash.config import Settings, get_settings
from cube_dash.gameplay.drawing import build_draw_commands, surface_size
from cube_dash.gameplay.game import SimulationCore
from cube_dash.ui.input_handler import InputHandler
from cube_dash.ui.renderer import CaptionHud, Renderer

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cube Dash maze arcade game")
    parser.add_argument("--seed", type=int, default=None, help="Seed the random source")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags win over environment settings."""
    overrides = {
        key: value
        for key, value in (("seed", args.seed), ("fps", args.fps), ("log_level", args.log_level))
        if value is not None
    }
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    settings = apply_overrides(get_settings(), args)
    configure_logging(settings.log_level)

    pygame.init()
    width, height = surface_size(settings.rows, settings.cols, settings.tile_size)
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(settings.window_title)

    input_handler = InputHandler()
    hud = CaptionHud(settings.window_title)
    renderer = Renderer(screen)
    core = SimulationCore(
        rows=settings.rows,
        cols=settings.cols,
        rng=random.Random(settings.seed),
        input_source=input_handler,
        ui_sink=hud,
        max_spawn_attempts=settings.max_spawn_attempts,
        max_maze_attempts=settings.max_maze_attempts,
    )
    clock = pygame.time.Clock()

    logger.info(f"Cube Dash running at {settings.fps} fps ({settings.cols}x{settings.rows} maze)")

    try:
        running = True
        while running:
            for event in pygame.event.get():
                if input_handler.handle_event(event):
                    running = False

            input_handler.poll()
            core.advance()
            renderer.draw(build_draw_commands(core.render_snapshot(), settings.tile_size))
            pygame.display.flip()
            clock.tick(settings.fps)
    finally:
        pygame.quit()

    logger.info(f"Quit with score {core.score} on level {core.level}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
