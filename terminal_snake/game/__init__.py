"""
Snake Game Module

This module contains the core game logic: directions, grid cells, the snake
and the game that drives them.
"""

from .direction import Direction
from .config import GameConfig
from .objects import Cell, GameObject
from .snake import Snake
from .clock import Clock, SystemClock, PygameClock
from .snake_game import SnakeGame

__all__ = ['Direction', 'GameConfig', 'Cell', 'GameObject', 'Snake',
           'Clock', 'SystemClock', 'PygameClock', 'SnakeGame']
