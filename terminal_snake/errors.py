"""
Exceptions raised by the snake game.
"""


class SnakeGameError(Exception):
    """Base class for all game errors"""


class TerminalSetupError(SnakeGameError):
    """The pygame window or font could not be created"""


class NoSpaceForFruitError(SnakeGameError, RuntimeError):
    """Fruit was respawned while every map cell was taken"""
