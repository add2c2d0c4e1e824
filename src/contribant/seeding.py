"""Initial trail and ant population.

Each seeding strategy writes trail levels onto an empty grid and returns the
candidate spawn sites for ants, as (x, y) pairs. `place_ants` then applies
the shared placement rule, and `initialize` picks the strategy for a config.
"""
import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .ant import Ant, random_heading
from .config import ALL_SITES, AUTO, CONTRIBUTION, EMPTY, RANDOM, SimulationConfig
from .grid import Grid
from .palette import ANT_LEVEL, EMPTY_LEVEL, MARKER_LEVEL, TRAIL_LEVELS

logger = logging.getLogger(__name__)

Site = Tuple[int, int]

# Random seeding: fraction of colored cells, and of those the share of ordinary shades.
POPULATION_DENSITY = 0.25
ORDINARY_SHARE = 0.8

# Simulated contribution field: bonuses added to a uniform draw, then thresholded.
RECENCY_WEIGHT = 0.3
WEEKDAY_BONUS = 0.2
WEEKDAY_ROWS = (1, 5)
STREAK_BONUS = 0.3
STREAK_FREQUENCY = 0.5
STREAK_THRESHOLD = 0.5
# (score above, level), checked from the top.
ACTIVITY_THRESHOLDS = ((0.8, 4), (0.6, 3), (0.4, 2), (0.25, 1))

# Random draws tried per grid cell before falling back to a linear scan.
FREE_CELL_ATTEMPTS_PER_CELL = 4


def _sites_at_level(grid: Grid, level: int) -> List[Site]:
    """Cells at `level`, column by column (x-major, then y)."""
    return [(int(x), int(y)) for x, y in np.argwhere((grid.levels == level).T)]


def seed_random(grid: Grid, rng) -> List[Site]:
    """Scatter random trail shades and marker cells over the grid.

    About a quarter of the cells get colored; 80% of those get an ordinary
    shade (1..3), the rest the marker level. Marker cells are the spawn sites.
    """
    shape = (grid.height, grid.width)
    colored = rng.random(shape) < POPULATION_DENSITY
    ordinary = rng.random(shape) < ORDINARY_SHARE
    shades = rng.integers(TRAIL_LEVELS[0], TRAIL_LEVELS[-1] + 1, size=shape)

    levels = np.where(ordinary, shades, MARKER_LEVEL)
    grid.levels[...] = np.where(colored, levels, EMPTY_LEVEL).astype(np.int8)
    grid.overlay[...] = ""

    sites = _sites_at_level(grid, MARKER_LEVEL)
    logger.info("Random seeding: %d colored cells, %d marker cells", int(colored.sum()), len(sites))
    return sites


def seed_contribution(grid: Grid, data: Sequence[Tuple[int, int, int]]) -> List[Site]:
    """Copy contribution levels onto the grid.

    Entries outside the grid are dropped and levels above the marker level
    are capped to it. Cells at the highest level left on the grid are the
    spawn sites; dropped entries play no part in choosing them.
    """
    dropped = 0
    for x, y, level in data:
        if not (0 <= x < grid.width and 0 <= y < grid.height):
            dropped += 1
            continue
        level = min(int(level), MARKER_LEVEL)
        if level > EMPTY_LEVEL:
            grid.set_level(x, y, level)

    if dropped:
        logger.debug("Dropped %d contribution entries outside the %dx%d grid", dropped, grid.width, grid.height)

    highest = int(grid.levels.max())
    sites = _sites_at_level(grid, highest) if highest > EMPTY_LEVEL else []
    logger.info(
        "Applied %d contribution entries; %d cells at highest level %d",
        len(data) - dropped,
        len(sites),
        highest,
    )
    return sites


def activity_field(width: int, height: int, rng) -> np.ndarray:
    """Contribution-like activity score for every cell, `[y, x]`.

    Uniform noise plus a bonus growing towards recent weeks (large x), a
    weekday bonus for the middle rows and a periodic streak bonus.
    """
    ys, xs = np.indices((height, width))
    base = rng.random((height, width))
    recency = (xs / width) * RECENCY_WEIGHT
    lo, hi = WEEKDAY_ROWS
    weekday = np.where((ys >= lo) & (ys <= hi), WEEKDAY_BONUS, 0.0)
    streak = np.where(np.sin(xs * STREAK_FREQUENCY) > STREAK_THRESHOLD, STREAK_BONUS, 0.0)
    return base + recency + weekday + streak


def seed_simulated(grid: Grid, rng) -> List[Site]:
    """Synthesize a contribution-like pattern. Level-4 cells are the spawn sites."""
    score = activity_field(grid.width, grid.height, rng)
    conditions = [score > threshold for threshold, _ in ACTIVITY_THRESHOLDS]
    choices = [level for _, level in ACTIVITY_THRESHOLDS]
    grid.levels[...] = np.select(conditions, choices, default=EMPTY_LEVEL).astype(np.int8)
    grid.overlay[...] = ""

    sites = _sites_at_level(grid, MARKER_LEVEL)
    logger.info("Simulated contribution pattern with %d high-activity cells", len(sites))
    return sites


def find_free_cell(grid: Grid, taken, rng) -> Optional[Site]:
    """Pick a random cell without an ant.

    Random draws are capped; after that the first free cell in column order
    is used. Returns None when every cell already holds an ant.
    """
    if len(taken) >= grid.width * grid.height:
        return None
    for _ in range(FREE_CELL_ATTEMPTS_PER_CELL * grid.width * grid.height):
        site = (int(rng.integers(0, grid.width)), int(rng.integers(0, grid.height)))
        if site not in taken:
            return site
    for x in range(grid.width):
        for y in range(grid.height):
            if (x, y) not in taken:
                return x, y
    return None


def place_ants(
    grid: Grid,
    sites: Sequence[Site],
    ant_count: int,
    rng,
    under_level: int = ANT_LEVEL,
    shuffle: bool = True,
) -> List[Ant]:
    """Put ants on the grid following the shared placement rule.

    With `ant_count == -1` every site gets an ant. Otherwise up to
    `ant_count` sites are used and any remaining ants go to random free
    cells. `under_level` is the level stored beneath each new ant.
    """
    sites = list(sites)
    if shuffle and len(sites) > 1:
        sites = [sites[i] for i in rng.permutation(len(sites))]

    n_sites = len(sites) if ant_count == ALL_SITES else min(ant_count, len(sites))
    ants = []
    taken = set()

    def put(x, y):
        ant = Ant(x, y, random_heading(rng))
        grid.set_level(x, y, under_level)
        grid.cover(x, y, ant.color)
        ants.append(ant)
        taken.add((x, y))

    for x, y in sites[:n_sites]:
        put(x, y)

    if ant_count != ALL_SITES:
        while len(ants) < ant_count:
            site = find_free_cell(grid, taken, rng)
            if site is None:
                logger.warning(
                    "Grid %dx%d is full: placed %d of %d requested ants",
                    grid.width,
                    grid.height,
                    len(ants),
                    ant_count,
                )
                break
            put(*site)

    return ants


def initialize(config: SimulationConfig, rng) -> Tuple[Grid, List[Ant]]:
    """Build the generation-0 grid and ant registry for `config`.

    `contribution` without data falls back to the simulated pattern; `auto`
    without data falls back to random seeding with an ant on every marker.
    """
    grid = Grid.create_empty(config.width, config.height)
    ant_count = config.ant_count
    under_level = ANT_LEVEL
    shuffle = True

    if config.mode == RANDOM:
        sites = seed_random(grid, rng)
    elif config.mode == EMPTY:
        # The first ant always starts in the middle; ants leave no trail behind.
        sites = [(config.width // 2, config.height // 2)]
        under_level = EMPTY_LEVEL
        shuffle = False
    elif config.mode == CONTRIBUTION:
        if config.has_contribution_data:
            sites = seed_contribution(grid, config.contribution_data)
        else:
            sites = seed_simulated(grid, rng)
    elif config.mode == AUTO:
        if config.has_contribution_data:
            sites = seed_contribution(grid, config.contribution_data)
        else:
            sites = seed_random(grid, rng)
            ant_count = ALL_SITES
    else:
        raise ValueError(f"unknown mode: {config.mode!r}")

    ants = place_ants(grid, sites, ant_count, rng, under_level=under_level, shuffle=shuffle)
    logger.info("Placed %d ants (%s mode, %dx%d)", len(ants), config.mode, config.width, config.height)
    return grid, ants
