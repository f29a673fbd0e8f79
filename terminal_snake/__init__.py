"""
Terminal Snake

A real-time snake game drawn on a grid of character cells.
"""

from .errors import SnakeGameError, TerminalSetupError, NoSpaceForFruitError
from .game import Direction, GameConfig, Cell, Snake, SnakeGame

__version__ = "0.1.0"

__all__ = ['Direction', 'GameConfig', 'Cell', 'Snake', 'SnakeGame',
           'SnakeGameError', 'TerminalSetupError', 'NoSpaceForFruitError']
