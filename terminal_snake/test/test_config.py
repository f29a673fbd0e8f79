from dataclasses import FrozenInstanceError

import pytest

from terminal_snake.game import Direction, GameConfig


def test_defaults():
    config = GameConfig()
    assert config.map_dimensions == (25, 25)
    assert config.map_centre == (12, 12)
    assert config.cell_count == 625
    assert config.starting_length == 5
    assert config.starting_direction is Direction.EAST
    assert config.update_interval == pytest.approx(1 / 15)
    assert config.window_size == (625, 625)
    assert config.scanlines is True
    assert config.seed is None


def test_config_is_frozen():
    config = GameConfig()
    with pytest.raises(FrozenInstanceError):
        config.slithers_per_second = 30


def test_from_env_overrides():
    config = GameConfig.from_env({
        "SNAKE_SLITHERS_PER_SECOND": "10",
        "SNAKE_FPS": "30",
        "SNAKE_SEED": "42",
        "SNAKE_SCANLINES": "off",
        "SNAKE_LOG_LEVEL": "debug",
    })
    assert config.slithers_per_second == 10
    assert config.frames_per_second == 30.0
    assert config.seed == 42
    assert config.scanlines is False
    assert config.log_level == "DEBUG"


def test_from_env_without_variables_uses_defaults():
    assert GameConfig.from_env({}) == GameConfig()


@pytest.mark.parametrize("environ", [
    {"SNAKE_SLITHERS_PER_SECOND": "fast"},
    {"SNAKE_SLITHERS_PER_SECOND": "0"},
    {"SNAKE_SCANLINES": "maybe"},
    {"SNAKE_LOG_LEVEL": "LOUD"},
])
def test_from_env_rejects_invalid_values(environ):
    with pytest.raises(ValueError):
        GameConfig.from_env(environ)


def test_rejects_too_short_snake():
    with pytest.raises(ValueError, match="starting_length"):
        GameConfig(starting_length=1)
