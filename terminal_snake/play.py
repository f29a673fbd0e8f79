#!/usr/bin/env python3
"""
Terminal Snake

Play snake on a glyph grid. Arrow keys or WASD to steer, P/ESC to pause,
R to restart after a game over, Q to quit.
"""

import logging
import sys

import pygame

from .errors import TerminalSetupError
from .game import GameConfig, PygameClock, SnakeGame
from .render import GlyphTerminal

logger = logging.getLogger(__name__)


def run(config):
    """Open the window and run the game loop until quit is requested"""
    terminal = None

    try:
        terminal = GlyphTerminal(config).open()
        game = SnakeGame(config, clock=PygameClock())
        frame_clock = pygame.time.Clock()

        while not game.quit_requested:
            game.tick(terminal, pygame.event.get())
            terminal.present()
            frame_clock.tick(config.frames_per_second)
    finally:
        if terminal is not None:
            terminal.close()

    return game.score


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = GameConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)

    try:
        score = run(config)
        logger.info(f"Final score: {score}")
    except TerminalSetupError as e:
        logger.error(f"Could not start the game: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Game interrupted by user")


if __name__ == "__main__":
    main()
