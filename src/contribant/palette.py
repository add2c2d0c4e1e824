"""Trail level <-> display color mapping.

Levels follow the contribution-graph scale: 0 is the empty background,
1..3 are the ordinary trail shades written by the flip rule and 4 is the
spawn marker. Level 5 never appears as a trail value; it only records that
an ant was placed on a cell with nothing worth restoring underneath.
"""
from typing import Tuple

EMPTY_LEVEL = 0
MARKER_LEVEL = 4
ANT_LEVEL = 5

BACKGROUND_COLOR = "#161b22"
# Ordinary trail shades, darkest first. Index is level - 1.
TRAIL_COLORS: Tuple[str, str, str] = ("#0e4429", "#006d32", "#26a641")
MARKER_COLOR = "#39d353"
ANT_COLOR = "#00FF00"

LEVEL_COLORS = (BACKGROUND_COLOR,) + TRAIL_COLORS + (MARKER_COLOR,)
TRAIL_LEVELS = tuple(range(1, len(TRAIL_COLORS) + 1))

_COLOR_LEVELS = {color.lower(): level for level, color in enumerate(LEVEL_COLORS)}


def level_to_color(level: int) -> str:
    """Return the display color for a trail level in 0..4."""
    level = int(level)
    if not (EMPTY_LEVEL <= level <= MARKER_LEVEL):
        raise ValueError(f"trail level must be in 0..4, got {level}")
    return LEVEL_COLORS[level]


def color_to_level(color) -> int:
    """Recover the trail level shown by `color`.

    Colors outside the mapping (including the ant color) read as level 0.
    """
    if not color:
        return EMPTY_LEVEL
    return _COLOR_LEVELS.get(str(color).lower(), EMPTY_LEVEL)
