"""
Game configuration.

Every tunable of the game lives on one frozen GameConfig instance that is
handed to the Snake, the Game and the terminal at construction time.
"""

import os
from dataclasses import dataclass, replace

from .direction import Direction

WHITE = (255, 255, 255)

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class GameConfig:
    title: str = "Snake"

    # Grid
    map_dimensions: tuple = (25, 25)
    tile_dimensions: tuple = (25, 25)  # pixels per cell

    # Pacing
    frames_per_second: float = 60.0
    slithers_per_second: int = 15

    # Snake
    starting_length: int = 5
    starting_direction: Direction = Direction.EAST
    horizontal_glyph: str = '═'
    vertical_glyph: str = '║'
    corner_glyphs: tuple = ('╔', '╗', '╚', '╝')
    snake_colour: tuple = (128, 255, 128)
    dead_colour: tuple = (128, 128, 128)

    # Fruit
    fruit_glyph: str = '*'
    fruit_colour: tuple = (255, 128, 128)

    # Screen
    background_colour: tuple = (45, 51, 57)
    text_colour: tuple = WHITE
    scanlines: bool = True

    seed: int = None
    log_level: str = "INFO"

    def __post_init__(self):
        if self.starting_length < 2:
            raise ValueError(f"starting_length must be at least 2, got {self.starting_length}")
        if self.slithers_per_second <= 0:
            raise ValueError(f"slithers_per_second must be positive, got {self.slithers_per_second}")
        if self.frames_per_second <= 0:
            raise ValueError(f"frames_per_second must be positive, got {self.frames_per_second}")
        width, height = self.map_dimensions
        if width < 3 or height < 1:
            raise ValueError(f"map_dimensions too small: {self.map_dimensions}")

    @property
    def map_width(self):
        return self.map_dimensions[0]

    @property
    def map_height(self):
        return self.map_dimensions[1]

    @property
    def map_centre(self):
        return (self.map_width // 2, self.map_height // 2)

    @property
    def cell_count(self):
        return self.map_width * self.map_height

    @property
    def update_interval(self):
        """Seconds between two snake moves"""
        return 1.0 / self.slithers_per_second

    @property
    def window_size(self):
        return (self.map_width * self.tile_dimensions[0], self.map_height * self.tile_dimensions[1])

    @property
    def straight_glyphs(self):
        return (self.horizontal_glyph, self.vertical_glyph)

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from SNAKE_* environment variables, falling back to defaults"""
        environ = os.environ if environ is None else environ
        overrides = {}

        if environ.get("SNAKE_SLITHERS_PER_SECOND"):
            overrides["slithers_per_second"] = int(environ["SNAKE_SLITHERS_PER_SECOND"])
        if environ.get("SNAKE_FPS"):
            overrides["frames_per_second"] = float(environ["SNAKE_FPS"])
        if environ.get("SNAKE_SEED"):
            overrides["seed"] = int(environ["SNAKE_SEED"])
        if environ.get("SNAKE_SCANLINES"):
            overrides["scanlines"] = _parse_bool("SNAKE_SCANLINES", environ["SNAKE_SCANLINES"])
        if environ.get("SNAKE_LOG_LEVEL"):
            level = environ["SNAKE_LOG_LEVEL"].upper()
            if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
                raise ValueError(f"Invalid SNAKE_LOG_LEVEL: {environ['SNAKE_LOG_LEVEL']}")
            overrides["log_level"] = level

        return replace(cls(), **overrides)


def _parse_bool(name, raw):
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: {raw}")
