"""
Test cases for the logistic recurrence kernel and the scalar and vectorised forward simulations.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import numpy as np
import pytest

from engine.recurrence import mse_grid, round_half_up, simulate, simulate_grid, step


def test_step_formula():
    assert step(10, 2, 100) == pytest.approx(18.0)
    assert step(0, 3.5, 100) == 0
    # above capacity the recurrence goes negative; callers clamp
    assert step(200, 2, 100) < 0


def test_round_half_up_matches_away_from_even():
    assert round_half_up(2.5) == 3
    assert round_half_up(3.5) == 4
    assert round_half_up(1.4) == 1
    assert round_half_up(-2.5) == -2


def test_simulate_is_deterministic():
    first = simulate(50.0, 2.7, 1000.0, 25)
    second = simulate(50.0, 2.7, 1000.0, 25)
    assert first == second
    assert len(first) == 25


def test_simulate_values():
    assert simulate(10, 2, 100, 3) == [10, 18, 30]


def test_simulate_floors_at_zero():
    assert simulate(300, 2, 100, 3) == [300, 0, 0]


def test_simulate_zero_length():
    assert simulate(10, 2, 100, 0) == []


def test_grid_matches_scalar_simulation():
    r_values = [0.5, 1.5, 2.0, 3.2, 4.0]
    k_values = [500.0, 1000.0, 2500.0]
    grid = simulate_grid(100.0, r_values, k_values, 12)
    assert grid.shape == (5, 3, 12)
    for i, r in enumerate(r_values):
        for j, K in enumerate(k_values):
            np.testing.assert_array_equal(grid[i, j], simulate(100.0, r, K, 12))


def test_mse_grid():
    grid = simulate_grid(10.0, [2.0], [100.0], 3)
    assert mse_grid([10, 18, 30], grid)[0, 0] == 0
    assert mse_grid([11, 18, 30], grid)[0, 0] == pytest.approx(1 / 3)


def test_mse_grid_empty_actual():
    grid = simulate_grid(10.0, [1.0, 2.0], [100.0], 0)
    assert mse_grid([], grid).shape == (2, 1)
    assert not mse_grid([], grid).any()
