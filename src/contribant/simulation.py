"""Generation loop for multi-ant Langton's ant on a toroidal grid."""
import logging
from typing import List, Optional, Tuple

import numpy as np

from .ant import Ant, random_heading
from .config import SimulationConfig
from .grid import Grid
from .palette import ANT_LEVEL, EMPTY_LEVEL, TRAIL_LEVELS
from .seeding import initialize

logger = logging.getLogger(__name__)


class Simulation:
    """Langton's ant run over a seeded grid.

    The simulation owns the grid and the ant registry. Ants are only ever
    appended to the registry, and every phase of a step walks it in order.
    """

    def __init__(self, config: SimulationConfig, rng: Optional[np.random.Generator] = None):
        """Validate `config` and seed the generation-0 grid.

        `rng` defaults to a generator seeded from `config.seed`.
        """
        config.validate()
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.seed)
        self.grid, self.ants = initialize(config, self.rng)
        self.generation = 0

    @property
    def ant_count(self) -> int:
        return len(self.ants)

    def uncover_ants(self) -> None:
        """Lift every ant off its cell, restoring the trail underneath."""
        for ant in self.ants:
            if self.grid.is_occupied(ant.x, ant.y):
                self.grid.uncover(ant.x, ant.y)

    def promote_markers(self) -> List[Ant]:
        """Turn every visible marker cell into an ant and return the new ones.

        A marker under an existing ant is covered but does not add a second ant.
        """
        # Later ants win a shared cell, as when covering.
        occupants = {ant.position: ant for ant in self.ants}
        spawned = []
        for x, y in self.grid.marker_sites():
            ant = occupants.get((x, y))
            if ant is None:
                ant = Ant(x, y, random_heading(self.rng))
                self.ants.append(ant)
                occupants[(x, y)] = ant
                spawned.append(ant)
            self.grid.set_level(x, y, ANT_LEVEL)
            self.grid.cover(x, y, ant.color)
        if spawned:
            logger.debug("Generation %d: %d ants spawned from markers", self.generation + 1, len(spawned))
        return spawned

    def apply_rule(self, ant: Ant) -> None:
        """Turn and flip the ant's cell, then move it one step.

        On a colored cell (any nonzero level) the ant turns clockwise and
        clears the cell; on an empty cell it turns counter-clockwise and
        paints a random ordinary trail shade.
        """
        x, y = ant.position
        if self.grid.level(x, y) != EMPTY_LEVEL:
            ant.turn_clockwise()
            self.grid.set_level(x, y, EMPTY_LEVEL)
        else:
            ant.turn_counterclockwise()
            shade = int(self.rng.integers(TRAIL_LEVELS[0], TRAIL_LEVELS[-1] + 1))
            self.grid.set_level(x, y, shade)
        ant.move_one_step(self.grid.width, self.grid.height)

    def cover_ants(self) -> None:
        """Draw every ant on its new cell; the last ant on a shared cell shows."""
        for ant in self.ants:
            self.grid.cover(ant.x, ant.y, ant.color)

    def step(self) -> None:
        """Advance the simulation by one generation.

        The sequence is:
          1. Uncover every ant's cell.
          2. Promote visible marker cells to new ants.
          3. For each ant in registry order, apply the turn/flip rule and
             move one cell with wraparound.
          4. Draw all ants on their new cells.
        """
        self.uncover_ants()
        self.promote_markers()
        for ant in self.ants:
            self.apply_rule(ant)
        self.cover_ants()
        self.generation += 1

    def run(self, generations: Optional[int] = None) -> List[Grid]:
        """Run and return `generations + 1` independent grid snapshots.

        The first snapshot is the current state before any step. Defaults to
        `config.generations`.
        """
        if generations is None:
            generations = self.config.generations
        if generations < 0:
            raise ValueError("generations must be non-negative")

        grids = [self.grid.snapshot()]
        for _ in range(generations):
            self.step()
            grids.append(self.grid.snapshot())
        logger.info("Simulated %d generations with %d ants", generations, self.ant_count)
        return grids

    def is_extinct(self) -> bool:
        """Return True if no cell is alive."""
        return not self.grid.alive_mask().any()

    def alive_points(self) -> List[Tuple[int, int]]:
        """Alive cells as (x, y), column by column."""
        return [(int(x), int(y)) for x, y in np.argwhere(self.grid.alive_mask().T)]


def simulate(config: SimulationConfig, rng: Optional[np.random.Generator] = None) -> List[Grid]:
    """Seed and run one simulation for `config.generations` generations."""
    return Simulation(config, rng).run()
