"""
Test doubles for the render surface, the clock and the event queue.
"""

import pygame


class RecordingSurface:
    """Stands in for GlyphTerminal and keeps the last frame as a dict of cells"""

    def __init__(self):
        self.cells = {}
        self.texts = []
        self.clears = 0

    def set(self, x, y, fg, bg, glyph):
        self.cells[(x, y)] = (glyph, fg, bg)

    def cls_bg(self, colour):
        self.cells = {}
        self.texts = []
        self.clears += 1

    def print_centered(self, x, y, fg, bg, text):
        self.texts.append((x, y, text))

    def text_lines(self):
        return [text for _, _, text in self.texts]


class ManualClock:
    def __init__(self, start=0.0):
        self.time = start

    def now(self):
        return self.time

    def advance(self, seconds):
        self.time += seconds


def key_down(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def key_up(key):
    return pygame.event.Event(pygame.KEYUP, key=key)


def close_request():
    return pygame.event.Event(pygame.QUIT)
