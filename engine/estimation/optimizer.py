"""
Grid-search refinement of (r, K) around a starting estimate, minimising the in-sample
mean squared error of the simulated trajectory.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np

from config import settings
from engine.models import ModelParameters, Observation, values_of
from engine.recurrence import mse_grid, simulate_grid

log = logging.getLogger(__name__)


def search_bounds(initial: ModelParameters) -> Tuple[Tuple[float, float], Tuple[float, float]]:
    r_bounds = (
        max(settings.r_min, initial.r * settings.optimizer_r_low),
        min(settings.r_max, initial.r * settings.optimizer_r_high),
    )
    k_bounds = (
        max(initial.P0 * settings.optimizer_k_p0_floor, initial.K * settings.optimizer_k_low),
        initial.K * settings.optimizer_k_high,
    )
    return r_bounds, k_bounds


def _axis(bounds: Tuple[float, float], intervals: int) -> np.ndarray:
    low, high = bounds
    if low > high:
        return np.empty(0)
    return np.linspace(low, high, intervals + 1)


def optimize(
    series: Sequence[Observation],
    initial: ModelParameters,
    iterations: int | None = None,
) -> ModelParameters:
    """Refine ``initial`` over a ~sqrt(iterations) x sqrt(iterations) grid.

    The best-so-far is seeded with ``initial`` itself, so the returned parameters are
    never worse in-sample than the starting point. Cells are scanned r-major, K-minor,
    both ascending; the first strict minimum wins.
    """
    if iterations is None:
        iterations = settings.optimizer_iterations
    actual = values_of(series)
    intervals = max(1, int(round(math.sqrt(max(1, iterations)))))
    r_bounds, k_bounds = search_bounds(initial)
    r_axis = _axis(r_bounds, intervals)
    k_axis = _axis(k_bounds, intervals)

    best_mse = float(mse_grid(actual, simulate_grid(initial.P0, [initial.r], [initial.K], len(actual)))[0, 0])
    best = initial.optimized(initial.r, initial.K)

    if r_axis.size == 0 or k_axis.size == 0:
        log.debug("optimize: empty search window r=%s K=%s", r_bounds, k_bounds)
        return best

    grid = mse_grid(actual, simulate_grid(initial.P0, r_axis, k_axis, len(actual)))
    flat = int(np.argmin(grid))
    i, j = divmod(flat, k_axis.size)
    if grid[i, j] < best_mse:
        best_mse = float(grid[i, j])
        best = initial.optimized(float(r_axis[i]), float(k_axis[j]))

    log.debug("optimize: r=%.4f K=%.1f mse=%.3f over %dx%d grid", best.r, best.K, best_mse, r_axis.size, k_axis.size)
    return best
