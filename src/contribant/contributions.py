"""Contribution-calendar records.

The calendar itself is fetched elsewhere; this module only turns an already
decoded payload into `(x, y, level)` triples the seeding code understands.
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# Quartile names used by the contribution calendar, in level order.
CONTRIBUTION_LEVELS = {
    "NONE": 0,
    "FIRST_QUARTILE": 1,
    "SECOND_QUARTILE": 2,
    "THIRD_QUARTILE": 3,
    "FOURTH_QUARTILE": 4,
}


@dataclass(frozen=True)
class ContributionCell:
    """One day of the calendar placed on the grid: week `x`, weekday `y`."""
    x: int
    y: int
    level: int
    date: Optional[str] = None
    count: int = 0

    def as_triple(self) -> Tuple[int, int, int]:
        return self.x, self.y, self.level


def level_from_name(name) -> int:
    """Map a quartile name to 0..4; unknown names count as no activity."""
    return CONTRIBUTION_LEVELS.get(name, 0)


def cells_from_calendar(weeks: Iterable[dict]) -> List[ContributionCell]:
    """Flatten `contributionCalendar.weeks` into grid-placed cells.

    Each week is one column; the day's `weekday` (0 = Sunday) is the row.
    """
    cells = []
    for x, week in enumerate(weeks):
        for day in week.get("contributionDays", []):
            cells.append(
                ContributionCell(
                    x=x,
                    y=int(day.get("weekday", 0)),
                    level=level_from_name(day.get("contributionLevel")),
                    date=day.get("date"),
                    count=int(day.get("contributionCount", 0)),
                )
            )
    return cells


def as_triples(data) -> List[Tuple[int, int, int]]:
    """Normalise contribution data to a list of `(x, y, level)` int triples."""
    triples = []
    for item in data or ():
        if isinstance(item, ContributionCell):
            item = item.as_triple()
        x, y, level = item
        triples.append((int(x), int(y), int(level)))
    return triples
