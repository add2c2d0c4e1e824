"""Toroidal cell grid with a trail layer and an ant-overlay layer.

Note
----
State is stored in two parallel NumPy arrays indexed `[y, x]`:

* `levels` (`int8`) holds the underlying trail level of every cell. While an
  ant stands on a cell this is the level to restore once it leaves.
* `overlay` (object array of str) holds the color of the ant drawn on top of
  the cell, or the empty string when no ant is shown there.

The displayed color of a cell is the overlay when present and the trail color
otherwise, so the overlay never destroys the trail underneath it.
"""
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from .palette import ANT_LEVEL, BACKGROUND_COLOR, EMPTY_LEVEL, MARKER_LEVEL, level_to_color

# Ant colors are free-form strings, so the overlay holds Python str objects.
_OVERLAY_DTYPE = object
# Lookup from stored level to trail color. An uncovered level 5 shows as background.
_LEVEL_COLOR_TABLE = np.array(
    [level_to_color(level) for level in range(EMPTY_LEVEL, MARKER_LEVEL + 1)] + [BACKGROUND_COLOR],
    dtype=object,
)


@dataclass(frozen=True)
class Cell:
    """One grid position as seen by renderers.

    `trail_level` is the underlying level; `overlay` is the ant color drawn
    over it (empty string when the cell is not occupied).
    """
    x: int
    y: int
    trail_level: int = EMPTY_LEVEL
    overlay: str = ""

    @property
    def occupied(self) -> bool:
        return bool(self.overlay)

    @property
    def display_color(self) -> str:
        if self.overlay:
            return self.overlay
        return str(_LEVEL_COLOR_TABLE[self.trail_level])

    @property
    def alive(self) -> bool:
        return self.occupied or self.trail_level > EMPTY_LEVEL


class Grid:
    """Fixed-size toroidal grid. All coordinates wrap around both edges."""

    def __init__(self, width: int, height: int, levels=None, overlay=None):
        if width <= 0 or height <= 0:
            raise ValueError("grid width and height must be positive")
        self.width = int(width)
        self.height = int(height)
        shape = (self.height, self.width)

        if levels is None:
            levels = np.zeros(shape, dtype=np.int8)
        if overlay is None:
            overlay = np.full(shape, "", dtype=_OVERLAY_DTYPE)
        if levels.shape != shape or overlay.shape != shape:
            raise ValueError("levels and overlay must have shape (height, width)")

        self.levels = levels
        self.overlay = overlay

    @classmethod
    def create_empty(cls, width: int, height: int) -> "Grid":
        """Return a grid with every cell at level 0 and no ants."""
        return cls(width, height)

    def wrap(self, x: int, y: int) -> Tuple[int, int]:
        """Map any integer coordinate onto the torus."""
        return ((x % self.width) + self.width) % self.width, ((y % self.height) + self.height) % self.height

    def get(self, x: int, y: int) -> Cell:
        x, y = self.wrap(x, y)
        return Cell(x, y, int(self.levels[y, x]), str(self.overlay[y, x]))

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Write `cell`'s level and overlay at (x, y); the cell's own x/y are ignored."""
        x, y = self.wrap(x, y)
        if not (EMPTY_LEVEL <= cell.trail_level <= ANT_LEVEL):
            raise ValueError(f"trail level must be in 0..5, got {cell.trail_level}")
        self.levels[y, x] = cell.trail_level
        self.overlay[y, x] = cell.overlay

    def level(self, x: int, y: int) -> int:
        x, y = self.wrap(x, y)
        return int(self.levels[y, x])

    def set_level(self, x: int, y: int, level: int) -> None:
        """Write the underlying level and drop any overlay on that cell."""
        self.set(x, y, Cell(x, y, int(level)))

    def is_occupied(self, x: int, y: int) -> bool:
        x, y = self.wrap(x, y)
        return self.overlay[y, x] != ""

    def cover(self, x: int, y: int, color: str) -> None:
        """Draw an ant of `color` over (x, y), keeping the level underneath."""
        x, y = self.wrap(x, y)
        self.overlay[y, x] = color

    def uncover(self, x: int, y: int) -> int:
        """Remove the overlay at (x, y) and return the restored level.

        Anything that is not a trail level (an ant placed without history)
        comes back as background.
        """
        x, y = self.wrap(x, y)
        self.overlay[y, x] = ""
        if not (EMPTY_LEVEL < self.levels[y, x] <= MARKER_LEVEL):
            self.levels[y, x] = EMPTY_LEVEL
        return int(self.levels[y, x])

    def marker_sites(self) -> List[Tuple[int, int]]:
        """Return uncovered marker cells as (x, y), scanning column by column."""
        mask = (self.levels == MARKER_LEVEL) & (self.overlay == "")
        return [(int(x), int(y)) for x, y in np.argwhere(mask.T)]

    def colors(self) -> np.ndarray:
        """Return the displayed color of every cell as a `[y, x]` array."""
        trail = _LEVEL_COLOR_TABLE[self.levels]
        return np.where(self.overlay != "", self.overlay, trail)

    def alive_mask(self) -> np.ndarray:
        return (self.levels > EMPTY_LEVEL) | (self.overlay != "")

    @property
    def cells(self) -> List[List[Cell]]:
        """Cells as nested lists, `cells[y][x]`."""
        return [[self.get(x, y) for x in range(self.width)] for y in range(self.height)]

    def snapshot(self) -> "Grid":
        """Return a deep copy that later writes to this grid cannot touch."""
        return Grid(self.width, self.height, self.levels.copy(), self.overlay.copy())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.levels, other.levels)
            and np.array_equal(self.overlay, other.overlay)
        )

    __hash__ = None

    def __repr__(self):
        return f"Grid(width={self.width}, height={self.height}, alive={int(self.alive_mask().sum())})"
