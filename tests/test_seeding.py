"""Unit tests for the seeding strategies and ant placement."""

import logging

import numpy as np
import pytest

from contribant.config import SimulationConfig
from contribant.grid import Grid
from contribant.palette import ANT_COLOR
from contribant.seeding import (
    activity_field,
    find_free_cell,
    initialize,
    place_ants,
    seed_contribution,
    seed_random,
    seed_simulated,
)


def positions(ants):
    return [a.position for a in ants]


def test_empty_mode_single_ant_at_center():
    cfg = SimulationConfig(width=53, height=7, mode="empty", ant_count=1)
    grid, ants = initialize(cfg, np.random.default_rng(0))
    assert positions(ants) == [(26, 3)]
    assert grid.alive_mask().sum() == 1
    cell = grid.get(26, 3)
    assert cell.alive and cell.display_color == ANT_COLOR
    assert cell.trail_level == 0


def test_empty_mode_extra_ants_leave_no_trail():
    cfg = SimulationConfig(width=9, height=5, mode="empty", ant_count=4)
    grid, ants = initialize(cfg, np.random.default_rng(1))
    assert len(ants) == 4
    assert ants[0].position == (4, 2)
    assert len(set(positions(ants))) == 4
    assert not grid.levels.any()
    assert grid.alive_mask().sum() == 4


@pytest.mark.parametrize("seed", range(5))
def test_random_all_sites_uses_every_marker(seed):
    sites = seed_random(Grid.create_empty(4, 4), np.random.default_rng(seed))

    cfg = SimulationConfig(width=4, height=4, mode="random", ant_count=-1)
    grid, ants = initialize(cfg, np.random.default_rng(seed))
    assert len(ants) == len(sites)
    assert sorted(positions(ants)) == sorted(sites)
    assert (grid.levels == 4).sum() == 0
    assert (grid.levels == 5).sum() == len(sites)


def test_random_seeding_levels():
    grid = Grid.create_empty(30, 20)
    sites = seed_random(grid, np.random.default_rng(7))
    assert set(np.unique(grid.levels)).issubset({0, 1, 2, 3, 4})
    assert sorted(sites) == sorted((int(x), int(y)) for y, x in np.argwhere(grid.levels == 4))
    assert not (grid.overlay != "").any()


def test_random_fills_missing_ants_on_free_cells():
    cfg = SimulationConfig(width=4, height=4, mode="random", ant_count=10)
    grid, ants = initialize(cfg, np.random.default_rng(2))
    assert len(ants) == 10
    assert len(set(positions(ants))) == 10
    for a in ants:
        assert grid.is_occupied(a.x, a.y)
        assert grid.level(a.x, a.y) == 5


def test_contribution_out_of_range_is_dropped():
    data = [(-1, 0, 3), (1, 1, 2), (53, 2, 4), (0, 7, 4)]
    cfg = SimulationConfig(width=53, height=7, mode="contribution", ant_count=1, contribution_data=data)
    grid, ants = initialize(cfg, np.random.default_rng(0))
    assert grid.levels.size == 53 * 7
    assert grid.level(52, 0) == 0
    # The only in-range entry is the brightest cell, so the ant sits on it.
    assert positions(ants) == [(1, 1)]
    assert grid.alive_mask().sum() == 1


def test_contribution_sites_at_highest_level():
    grid = Grid.create_empty(5, 3)
    data = [(0, 0, 1), (1, 0, 3), (2, 1, 3), (4, 2, 9), (3, 2, 0)]
    sites = seed_contribution(grid, data)
    assert grid.level(4, 2) == 4
    assert grid.level(3, 2) == 0
    assert sites == [(4, 2)]


def test_contribution_without_activity_has_no_sites():
    grid = Grid.create_empty(5, 3)
    assert seed_contribution(grid, [(0, 0, 0), (1, 1, 0)]) == []


def test_contribution_mode_without_data_simulates():
    cfg = SimulationConfig(width=20, height=7, mode="contribution", ant_count=-1)
    expected = Grid.create_empty(20, 7)
    sites = seed_simulated(expected, np.random.default_rng(4))

    grid, ants = initialize(cfg, np.random.default_rng(4))
    assert sorted(positions(ants)) == sorted(sites)
    untouched = grid.overlay == ""
    assert np.array_equal(grid.levels[untouched], expected.levels[untouched])


def test_auto_mode_without_data_puts_ant_on_every_marker():
    cfg = SimulationConfig(width=12, height=7, mode="auto", ant_count=1)
    sites = seed_random(Grid.create_empty(12, 7), np.random.default_rng(9))
    grid, ants = initialize(cfg, np.random.default_rng(9))
    assert len(ants) == len(sites)


def test_auto_mode_with_data_uses_contributions():
    cfg = SimulationConfig(width=5, height=3, mode="auto", ant_count=1, contribution_data=[(2, 2, 4), (0, 0, 2)])
    grid, ants = initialize(cfg, np.random.default_rng(0))
    assert positions(ants) == [(2, 2)]
    assert grid.level(0, 0) == 2


def test_activity_field_components():
    width, height = 12, 7
    field = activity_field(width, height, np.random.default_rng(3))
    base = np.random.default_rng(3).random((height, width))
    extra = field - base
    for y in range(height):
        for x in range(width):
            expected = 0.3 * x / width
            if 1 <= y <= 5:
                expected += 0.2
            if np.sin(0.5 * x) > 0.5:
                expected += 0.3
            assert extra[y, x] == pytest.approx(expected)


def test_simulated_levels_follow_thresholds():
    grid = Grid.create_empty(53, 7)
    score = activity_field(53, 7, np.random.default_rng(5))
    sites = seed_simulated(grid, np.random.default_rng(5))
    expected = np.zeros_like(grid.levels)
    expected[score > 0.25] = 1
    expected[score > 0.4] = 2
    expected[score > 0.6] = 3
    expected[score > 0.8] = 4
    assert np.array_equal(grid.levels, expected)
    assert len(sites) == int((expected == 4).sum())


def test_find_free_cell_on_full_grid():
    grid = Grid.create_empty(2, 2)
    taken = {(0, 0), (0, 1), (1, 0), (1, 1)}
    assert find_free_cell(grid, taken, np.random.default_rng(0)) is None
    assert find_free_cell(grid, taken - {(1, 0)}, np.random.default_rng(0)) == (1, 0)


def test_place_ants_stops_when_grid_is_full(caplog):
    grid = Grid.create_empty(2, 2)
    with caplog.at_level(logging.WARNING, logger="contribant.seeding"):
        ants = place_ants(grid, [], 6, np.random.default_rng(0))
    assert len(ants) == 4
    assert (grid.overlay != "").all()
    assert "placed 4 of 6" in caplog.text


def test_place_ants_fewer_than_sites():
    grid = Grid.create_empty(5, 5)
    sites = [(0, 0), (1, 1), (2, 2), (3, 3)]
    for x, y in sites:
        grid.set_level(x, y, 4)
    ants = place_ants(grid, sites, 2, np.random.default_rng(0))
    assert len(ants) == 2
    assert set(positions(ants)).issubset(sites)
    # Unused markers stay in place for promotion later.
    assert (grid.levels == 4).sum() == 2


def test_dropped_entries_do_not_set_highest_level():
    grid = Grid.create_empty(5, 3)
    sites = seed_contribution(grid, [(-1, 0, 4), (1, 1, 2), (7, 2, 3)])
    assert sites == [(1, 1)]
    assert grid.level(4, 0) == 0


def test_capped_level_joins_real_markers():
    grid = Grid.create_empty(5, 3)
    sites = seed_contribution(grid, [(0, 0, 4), (3, 1, 9), (2, 2, 3)])
    assert sites == [(0, 0), (3, 1)]
