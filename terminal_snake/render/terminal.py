"""
Pygame window drawn as a grid of character cells.
"""

import logging

import pygame

from ..errors import TerminalSetupError
from ..game.config import GameConfig

logger = logging.getLogger(__name__)

# Monospace fonts that carry the box drawing characters used for the snake
FONT_NAMES = "dejavusansmono,liberationmono,menlo,consolas,couriernew"
SCANLINE_ALPHA = 60


class GlyphTerminal:
    """Render surface with set-cell, clear and centred-text primitives"""

    def __init__(self, config=None):
        self.config = config or GameConfig()
        self.columns, self.rows = self.config.map_dimensions
        self.tile_width, self.tile_height = self.config.tile_dimensions

        self.window = None
        self.font = None
        self.scanline_overlay = None
        self._glyph_cache = {}

    def open(self):
        """Create the window and load the font"""
        pygame.init()

        try:
            self.window = pygame.display.set_mode(self.config.window_size)
            pygame.display.set_caption(self.config.title)
            self.font = self._load_font()
        except pygame.error as e:
            pygame.quit()
            raise TerminalSetupError(f"Failed to build application window: {e}") from e

        if self.config.scanlines:
            self.scanline_overlay = self._build_scanlines()

        logger.info(f"Opened {self.columns}x{self.rows} terminal ({self.config.window_size[0]}x{self.config.window_size[1]} px)")
        return self

    def _load_font(self):
        if pygame.font.match_font(FONT_NAMES) is None:
            logger.warning("No monospace font found, using the pygame default font")
            return pygame.font.Font(None, self.tile_height)
        return pygame.font.SysFont(FONT_NAMES, self.tile_height - 4)

    def _build_scanlines(self):
        overlay = pygame.Surface(self.config.window_size, pygame.SRCALPHA)
        width, height = self.config.window_size
        for y in range(0, height, 2):
            pygame.draw.line(overlay, (0, 0, 0, SCANLINE_ALPHA), (0, y), (width - 1, y))
        return overlay

    def _render_glyph(self, glyph, colour):
        key = (glyph, tuple(colour))
        if key not in self._glyph_cache:
            self._glyph_cache[key] = self.font.render(glyph, True, colour)
        return self._glyph_cache[key]

    def in_bounds(self, x, y):
        return 0 <= x < self.columns and 0 <= y < self.rows

    def set(self, x, y, fg, bg, glyph):
        """Draw one glyph in cell (x, y); cells outside the grid are ignored"""
        if not self.in_bounds(x, y):
            return

        rect = pygame.Rect(x * self.tile_width, y * self.tile_height, self.tile_width, self.tile_height)
        self.window.fill(bg, rect)

        if glyph != ' ':
            text = self._render_glyph(glyph, fg)
            self.window.blit(text, text.get_rect(center=rect.center))

    def cls_bg(self, colour):
        self.window.fill(colour)

    def print_centered(self, x, y, fg, bg, text):
        """Write text on row y, centred on column x"""
        start = x - len(text) // 2
        for offset, glyph in enumerate(text):
            self.set(start + offset, y, fg, bg, glyph)

    def present(self):
        if self.scanline_overlay is not None:
            self.window.blit(self.scanline_overlay, (0, 0))
        pygame.display.flip()

    def close(self):
        pygame.quit()
        self.window = None
        self._glyph_cache.clear()
        logger.info("Terminal closed")
