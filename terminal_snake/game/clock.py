"""
Monotonic time sources used to pace the snake independently of the frame rate.
"""

import time

import pygame


class Clock:
    def now(self):
        """Current time in seconds"""
        raise NotImplementedError


class SystemClock(Clock):
    def now(self):
        return time.perf_counter()


class PygameClock(Clock):
    """Time since pygame.init(), read from the SDL tick counter"""

    def now(self):
        return pygame.time.get_ticks() / 1000.0
