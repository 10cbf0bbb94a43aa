"""Tests for FoodPlacer."""

from unittest.mock import Mock

import pytest

from gridsnake.errors import FoodPlacementExhausted
from gridsnake.food import FoodPlacer
from gridsnake.geometry import GridGeometry


def scripted_rng(*values):
    rng = Mock()
    rng.integers.side_effect = list(values)
    return rng


class TestFoodPlacer:

    def test_food_is_always_in_bounds(self):
        bounds = GridGeometry(cell_size=25, width=5, height=4)
        placer = FoodPlacer(seed=1)
        for _ in range(200):
            x, y = placer.place(bounds, [])
            assert 0 <= x < 5
            assert 0 <= y < 4

    def test_food_never_lands_on_snake(self):
        bounds = GridGeometry(cell_size=25, width=6, height=6)
        snake = [(x, 0) for x in range(6)] + [(x, 1) for x in range(6)]
        placer = FoodPlacer(seed=7)
        for _ in range(200):
            assert placer.place(bounds, snake) not in snake
            assert placer.exhausted is False

    def test_resamples_while_occupied(self):
        """Occupied candidates are skipped until a free one comes up."""
        bounds = GridGeometry(cell_size=25, width=3, height=3)
        placer = FoodPlacer(rng=scripted_rng(0, 0, 1, 1, 2, 1))
        cell = placer.place(bounds, [(0, 0), (1, 1)])
        assert cell == (2, 1)

    def test_same_seed_same_food(self):
        bounds = GridGeometry(cell_size=25, width=20, height=20)
        a = FoodPlacer(seed=42)
        b = FoodPlacer(seed=42)
        assert [a.place(bounds, []) for _ in range(10)] == [b.place(bounds, []) for _ in range(10)]

    def test_full_board_returns_last_candidate_and_warns(self):
        """Retry is bounded at 2 * width * height attempts."""
        bounds = GridGeometry(cell_size=25, width=2, height=2)
        occupied = [(0, 0), (1, 0), (0, 1), (1, 1)]
        rng = Mock()
        rng.integers.return_value = 1
        placer = FoodPlacer(rng=rng)

        with pytest.warns(FoodPlacementExhausted):
            cell = placer.place(bounds, occupied)

        assert cell == (1, 1)
        assert placer.exhausted is True
        # two draws (x and y) per attempt
        assert rng.integers.call_count == 2 * (2 * 2 * 2)

    def test_exhausted_flag_resets_on_next_success(self):
        bounds = GridGeometry(cell_size=25, width=1, height=1)
        placer = FoodPlacer(seed=0)
        with pytest.warns(FoodPlacementExhausted):
            placer.place(bounds, [(0, 0)])
        assert placer.exhausted
        assert placer.place(bounds, []) == (0, 0)
        assert not placer.exhausted

    def test_degenerate_grid_is_rejected(self):
        with pytest.raises(ValueError):
            FoodPlacer(seed=0).place(GridGeometry(cell_size=25, width=0, height=0), [])
