#!/usr/bin/env python3
"""Runner for the contribution-grid ant simulator.

Creates a `SimulationConfig` and `Simulation`, runs a few generations and
prints each snapshot as a text strip: `.` empty, `1`-`3` trail shades,
`4` marker cells and `@` ants.

Usage::

    python scripts/run_one.py [mode] [generations] [ant_count]
"""
import logging
import os
import sys

# Make `src` importable when running from repo root (scripts/ is sibling of src/)
script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(script_dir, ".."))
src_dir = os.path.join(project_root, "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from contribant.config import SimulationConfig
from contribant.simulation import Simulation


def render_text(grid):
    rows = []
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            cell = grid.get(x, y)
            if cell.occupied:
                row.append("@")
            elif cell.trail_level:
                row.append(str(cell.trail_level))
            else:
                row.append(".")
        rows.append("".join(row))
    return "\n".join(rows)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    mode = argv[0] if len(argv) > 0 else "random"
    generations = int(argv[1]) if len(argv) > 1 else 5
    ant_count = int(argv[2]) if len(argv) > 2 else 1

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = SimulationConfig(mode=mode, generations=generations, ant_count=ant_count)
    cfg.validate()
    sim = Simulation(cfg)
    print("Grid:", sim.grid.width, "x", sim.grid.height)
    print("Mode:", cfg.mode, "seed:", cfg.seed)
    print("Ant count:", sim.ant_count)

    print(f"Running {generations} generations...")
    grids = sim.run()
    for g, grid in enumerate(grids):
        print(f"g={g}: alive={int(grid.alive_mask().sum())}")
        print(render_text(grid))
    print("Ants at end:", sim.ant_count, "extinct:", sim.is_extinct())


if __name__ == "__main__":
    main()
