"""Ant agent: position, heading and display color."""
import numpy as np

from .palette import ANT_COLOR

# Heading encoding: 0 = up, then clockwise. y grows downwards.
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
HEADINGS = (UP, RIGHT, DOWN, LEFT)
STEP_X = np.array([0, 1, 0, -1], dtype=int)
STEP_Y = np.array([-1, 0, 1, 0], dtype=int)


class Ant:
    """Single ant state: position, heading and the color it draws."""

    def __init__(self, x, y, heading, color=ANT_COLOR):
        self.x = int(x)
        self.y = int(y)
        heading = int(heading)
        if heading not in HEADINGS:
            raise ValueError(f"heading must be in 0..3, got {heading}")
        self.heading = heading
        self.color = color

    @property
    def position(self):
        return self.x, self.y

    def turn_clockwise(self):
        self.heading = (self.heading + 1) % 4

    def turn_counterclockwise(self):
        # +3 keeps the value non-negative.
        self.heading = (self.heading + 3) % 4

    def move_one_step(self, width, height):
        """Advance one cell along the current heading, wrapping at the edges."""
        self.x = (self.x + int(STEP_X[self.heading])) % width
        self.y = (self.y + int(STEP_Y[self.heading])) % height

    def __repr__(self):
        return f"Ant(x={self.x}, y={self.y}, heading={self.heading}, color={self.color!r})"


def random_heading(rng):
    """Draw a uniform heading from `rng`."""
    return int(rng.integers(0, len(HEADINGS)))
