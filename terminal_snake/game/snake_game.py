"""
Snake Game Implementation

Runs one frame per tick: drain input, advance the logic, draw the board.
The snake itself only moves every 1 / slithers_per_second seconds, so the
render rate and the simulation rate are independent.
"""

import logging

import numpy as np
import pygame

from ..errors import NoSpaceForFruitError
from .clock import SystemClock
from .config import GameConfig
from .direction import Direction, MOVEMENT_KEYS
from .objects import Cell
from .snake import Snake

logger = logging.getLogger(__name__)

PAUSE_KEYS = (pygame.K_ESCAPE, pygame.K_p)
RESTART_KEY = pygame.K_r
QUIT_KEY = pygame.K_q

OFF_MAP = (-1, -1)


class SnakeGame:
    """Single player snake game driven by a host loop calling tick()"""

    def __init__(self, config=None, clock=None, rng=None):
        self.config = config or GameConfig()
        self.clock = clock or SystemClock()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self._snake = Snake(self.config)
        # Initially positioned outside of the map
        self._fruit = Cell(OFF_MAP, self.config.fruit_glyph, self.config.fruit_colour)
        self._score = 0
        self.game_over = False
        self.paused = False
        self.quit_requested = False
        self.previous_snake_update_time = self.clock.now()

        self.spawn_fruit()

    def reset(self):
        """Start a new round with a fresh snake, fruit, score and timer"""
        self._snake = Snake(self.config)
        self.spawn_fruit()
        self.previous_snake_update_time = self.clock.now()
        self._score = 0
        self.game_over = False
        logger.info("Game reset")

    @property
    def snake(self):
        return self._snake

    @property
    def fruit(self):
        return self._fruit

    @property
    def score(self):
        return self._score

    @property
    def won(self):
        return self.game_over and self.snake.alive

    def tick(self, surface, events):
        """Run one frame against the given surface and pending events"""
        self.handle_input(events)

        if not self.paused:
            self.handle_logic()

        self.handle_rendering(surface)

    def get_empty_points(self):
        """Map cells not covered by the snake or the current fruit, in row-major order"""
        occupied = np.zeros((self.config.map_height, self.config.map_width), dtype=bool)

        for x, y in self.snake.positions():
            if not self.snake.is_out_of_bounds((x, y)):
                occupied[y, x] = True

        if not self.snake.is_out_of_bounds(self.fruit.position):
            fruit_x, fruit_y = self.fruit.position
            occupied[fruit_y, fruit_x] = True

        return [(int(x), int(y)) for y, x in np.argwhere(~occupied)]

    def spawn_fruit(self):
        spawn_locations = self.get_empty_points()

        if not spawn_locations:
            raise NoSpaceForFruitError(
                f"Failed to spawn fruit: no free cell on a {self.config.map_width}x{self.config.map_height} map"
            )

        self.fruit.position = spawn_locations[self.rng.integers(len(spawn_locations))]
        logger.debug(f"Fruit spawned at {self.fruit.position}")

    def update_snake(self):
        now = self.clock.now()
        update_delta = now - self.previous_snake_update_time

        # After a loss the dead snake keeps updating so it can shrink away
        if (not self.snake.alive or not self.game_over) and update_delta > self.config.update_interval:
            self.snake.update()
            self.previous_snake_update_time = now

    def execute_input(self, key):
        if key == QUIT_KEY:
            self.quit_requested = True
            return

        if not self.game_over:
            if key in MOVEMENT_KEYS:
                if self.snake.alive and not self.paused:
                    self.snake.set_direction(Direction.from_key(key))
            elif key in PAUSE_KEYS:
                self.paused = not self.paused
                logger.info("Game paused" if self.paused else "Game resumed")
        elif key == RESTART_KEY:
            self.reset()

    def handle_input(self, events):
        for event in events:
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                self.execute_input(event.key)

    def handle_logic(self):
        # Check and store the status of the game
        if not self.game_over:
            won = len(self.snake) == self.config.cell_count
            lost = not self.snake.alive
            self.game_over = won or lost

            if won:
                logger.info(f"Game won with score {self.score}")
            elif lost:
                logger.info(f"Game over with score {self.score}")

        # If the snake reaches the fruit, grow the snake and respawn the fruit
        if not self.game_over and self.snake.head.position == self.fruit.position:
            self._score += 1
            self.snake.grow()
            logger.debug(f"Fruit eaten at {self.fruit.position}, score {self.score}")

            if len(self.snake) == self.config.cell_count:
                # No cell is left for another fruit
                self.game_over = True
                logger.info(f"Game won with score {self.score}")
            else:
                # Must respawn the fruit after the snake grows
                self.spawn_fruit()

        self.update_snake()

    def handle_rendering(self, surface):
        background = self.config.background_colour
        text_colour = self.config.text_colour
        centre_x, centre_y = self.config.map_centre

        surface.cls_bg(background)

        if self.paused:
            surface.print_centered(centre_x, centre_y, text_colour, background, "PAUSED")
            return

        self.snake.render(surface, background)

        # If the game is over, print end-game information instead of the fruit
        if self.game_over:
            result = "You won!" if self.snake.alive else f"Score: {self.score}"
            surface.print_centered(centre_x, centre_y - 3, text_colour, background, "GAME OVER")
            surface.print_centered(centre_x, centre_y, text_colour, background, result)
            surface.print_centered(centre_x, centre_y + 3, text_colour, background, "[R] Restart [Q] Quit")
        else:
            self.fruit.render(surface, background)
