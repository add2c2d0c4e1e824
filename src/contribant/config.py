"""Simulation configuration.

Defines the configuration used to initialize a run: grid shape, number of
generations, ant count, seeding mode and optional contribution data.
Defaults reproduce the contribution-graph shape (53 weeks by 7 days).
"""
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .contributions import as_triples

RANDOM = "random"
EMPTY = "empty"
CONTRIBUTION = "contribution"
AUTO = "auto"
MODES = (RANDOM, EMPTY, CONTRIBUTION, AUTO)

# ant_count sentinel: one ant on every candidate spawn site.
ALL_SITES = -1


def _is_int(value) -> bool:
    # bool is an int subclass but never a valid size or count.
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """Simulation settings.

    `contribution_data` accepts `(x, y, level)` triples or
    `ContributionCell` records; it is normalised to triples on construction.
    """
    width: int = 53
    height: int = 7
    generations: int = 50
    ant_count: int = 1
    mode: str = AUTO
    contribution_data: Optional[Sequence[Tuple[int, int, int]]] = field(default=None)
    seed: Optional[int] = 0

    def __post_init__(self):
        if self.contribution_data is not None:
            self.contribution_data = as_triples(self.contribution_data)

    @property
    def has_contribution_data(self) -> bool:
        return bool(self.contribution_data)

    def validate(self) -> None:
        """Sanity-check the configuration.

        Raises `ValueError` with a human-friendly message when something is
        wrong. Contribution entries are not checked here: out-of-range
        coordinates are dropped and levels above 4 capped during seeding.
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_int(value) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")

        if not _is_int(self.generations) or self.generations < 0:
            raise ValueError("generations must be a non-negative integer")

        if not _is_int(self.ant_count) or (self.ant_count < 1 and self.ant_count != ALL_SITES):
            raise ValueError("ant_count must be >= 1, or -1 for every marker cell")

        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {', '.join(MODES)}")

        if self.seed is not None and not _is_int(self.seed):
            raise ValueError("seed must be an integer or None")
