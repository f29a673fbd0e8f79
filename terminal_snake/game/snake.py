"""
The player's snake.

The body is a deque of Cells from head (index 0) to tail. Moving pops the
tail and pushes a new head; the popped tail is kept until the next move so
that eating a fruit can put it back.
"""

import logging
from collections import deque
from itertools import islice

from .config import GameConfig
from .objects import Cell, GameObject

logger = logging.getLogger(__name__)


class Snake(GameObject):
    """Snake body with movement, growth, collision and corner glyphs"""

    def __init__(self, config=None):
        self.config = config or GameConfig()

        centre_x, centre_y = self.config.map_centre
        self.direction = self.config.starting_direction

        # Segments behind the head all start on the centre cell and unfold as the snake moves
        body_segment = Cell((centre_x, centre_y), self.config.horizontal_glyph, self.config.snake_colour)
        self.body = deque(body_segment.copy() for _ in range(self.config.starting_length - 1))
        self.body.appendleft(body_segment.copy(position=body_segment.moved(self.direction.to_vector())))

        self.popped_tail = None
        self.requires_corner_update = False
        self.alive = True

    def __len__(self):
        return len(self.body)

    def __getitem__(self, index):
        return self.body[index]

    def __iter__(self):
        return iter(self.body)

    @property
    def head(self):
        return self.body[0]

    def positions(self):
        return [segment.position for segment in self.body]

    def set_direction(self, direction):
        """Turn the snake, unless the turn would put the head onto the neck"""
        if self.head.moved(direction.to_vector()) != self.body[1].position:
            self.direction = direction
            self.requires_corner_update = True

    def grow(self):
        """Put the last popped tail back on the end of the body"""
        if self.popped_tail is not None:
            self.body.append(self.popped_tail)
            self.popped_tail = None

    def is_out_of_bounds(self, position):
        x, y = position
        return not (0 <= x < self.config.map_width and 0 <= y < self.config.map_height)

    def is_self_colliding(self):
        head_position = self.head.position
        return any(segment.position == head_position for segment in islice(self.body, 1, None))

    def update(self):
        """Move one cell forward, or shrink by one segment once dead"""
        if self.alive:
            out_of_bounds = self.is_out_of_bounds(self.head.position)
            self_collision = self.is_self_colliding()
            self.alive = not out_of_bounds and not self_collision

            if not self.alive:
                logger.info(f"Snake died at {self.head.position} "
                            f"({'wall' if out_of_bounds else 'self'}), length {len(self.body)}")
                for segment in self.body:
                    segment.colour = self.config.dead_colour

        if self.alive:
            new_head = self.head.copy(
                position=self.head.moved(self.direction.to_vector()),
                glyph=self.config.vertical_glyph if self.direction.is_vertical else self.config.horizontal_glyph,
            )

            self.popped_tail = self.body.pop()
            self.body.appendleft(new_head)

            self.update_corner_glyphs()
        elif self.body:
            # A dead snake shrinks from the head end
            self.body.popleft()

    def update_corner_glyphs(self):
        """Straighten the tail and place a corner glyph on the neck after a turn"""
        if len(self.body) <= 2:
            return

        straight = self.config.straight_glyphs
        down_right, down_left, up_right, up_left = self.config.corner_glyphs

        new_glyph = self.body[-2].glyph
        head = self.body[0]
        tail = self.body[-1]

        # Straighten out tail if necessary
        if new_glyph in straight and tail.glyph not in straight:
            tail.glyph = new_glyph

        if self.requires_corner_update:
            neck = self.body[1]
            behind_neck = self.body[2]
            neck_x, neck_y = neck.position
            behind_x, behind_y = behind_neck.position
            head_x, head_y = head.position

            if behind_x != neck_x:
                if head_y > neck_y:
                    neck.glyph = down_right if behind_x > neck_x else down_left
                elif head_y < neck_y:
                    neck.glyph = up_right if behind_x > neck_x else up_left
            elif behind_y != neck_y:
                if head_x > neck_x:
                    neck.glyph = down_right if behind_y > neck_y else up_right
                elif head_x < neck_x:
                    neck.glyph = down_left if behind_y > neck_y else up_left

            self.requires_corner_update = False

    def render(self, surface, background):
        for segment in self.body:
            segment.render(surface, background)
