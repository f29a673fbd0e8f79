"""
Rendering Module

Pygame-backed glyph terminal the game draws onto.
"""

from .terminal import GlyphTerminal

__all__ = ['GlyphTerminal']
