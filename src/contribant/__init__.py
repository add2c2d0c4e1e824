"""Langton's ant over contribution-graph grids: package exports."""
from .ant import Ant, HEADINGS, STEP_X, STEP_Y
from .config import ALL_SITES, MODES, SimulationConfig
from .contributions import ContributionCell, cells_from_calendar
from .grid import Cell, Grid
from .palette import color_to_level, level_to_color
from .seeding import initialize, place_ants
from .simulation import Simulation, simulate

__all__ = [
    "ALL_SITES",
    "Ant",
    "Cell",
    "ContributionCell",
    "Grid",
    "HEADINGS",
    "MODES",
    "STEP_X",
    "STEP_Y",
    "Simulation",
    "SimulationConfig",
    "cells_from_calendar",
    "color_to_level",
    "initialize",
    "level_to_color",
    "place_ants",
    "simulate",
]
