import pygame
from enum import Enum


class Direction(Enum):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    @staticmethod
    def from_key(key):
        """Map a pygame key code to a direction, or None for any other key"""
        return _KEY_DIRECTIONS.get(key)

    def to_vector(self):
        return self.value

    @property
    def is_vertical(self):
        return self in (Direction.NORTH, Direction.SOUTH)


_KEY_DIRECTIONS = {
    pygame.K_w: Direction.NORTH,
    pygame.K_UP: Direction.NORTH,
    pygame.K_a: Direction.WEST,
    pygame.K_LEFT: Direction.WEST,
    pygame.K_s: Direction.SOUTH,
    pygame.K_DOWN: Direction.SOUTH,
    pygame.K_d: Direction.EAST,
    pygame.K_RIGHT: Direction.EAST,
}

MOVEMENT_KEYS = frozenset(_KEY_DIRECTIONS)
