"""
Renderable objects placed on the glyph grid.
"""

from dataclasses import dataclass, replace


class GameObject:
    """Anything the game can draw onto a surface and advance by one tick"""

    def render(self, surface, background):
        raise NotImplementedError

    def update(self):
        pass


@dataclass(eq=False)
class Cell(GameObject):
    """A single glyph at an (x, y) grid position"""

    position: tuple
    glyph: str
    colour: tuple

    def render(self, surface, background):
        x, y = self.position
        surface.set(x, y, self.colour, background, self.glyph)

    def copy(self, **changes):
        """Return an independent copy, optionally with some fields replaced"""
        return replace(self, **changes)

    def moved(self, vector):
        x, y = self.position
        return (x + vector[0], y + vector[1])
