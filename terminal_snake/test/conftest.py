"""
Shared fixtures: a surface that records draw calls, a hand-driven clock and
a seeded game.
"""

import numpy as np
import pytest

from terminal_snake.game import GameConfig, SnakeGame

from .helpers import ManualClock, RecordingSurface


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def make_game(config, clock):
    def _make(seed=0, game_config=None):
        return SnakeGame(game_config or config, clock=clock, rng=np.random.default_rng(seed))
    return _make


@pytest.fixture
def game(make_game):
    return make_game()
