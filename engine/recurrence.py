"""
Discrete logistic recurrence P(n) = r * P(n-1) * (1 - P(n-1) / K) and the forward
simulations built on it, in scalar form and vectorised over an (r, K) grid.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np


def step(prev: float, r: float, K: float) -> float:
    return r * prev * (1 - prev / K)


def round_half_up(x: float) -> float:
    return float(math.floor(x + 0.5))


def simulate(p0: float, r: float, K: float, length: int) -> List[float]:
    """Trajectory of ``length`` rounded values starting at ``p0``.

    The running value is floored at zero after every step but never capped;
    the capped variant used for published forecasts lives in
    :mod:`engine.forecast.predictions`.
    """
    out: List[float] = []
    current = p0
    for _ in range(max(0, length)):
        out.append(round_half_up(current))
        current = max(0.0, step(current, r, K))
    return out


def simulate_grid(
    p0: float,
    r_values: Sequence[float],
    k_values: Sequence[float],
    length: int,
) -> np.ndarray:
    r = np.asarray(r_values, dtype=float)[:, None]
    K = np.asarray(k_values, dtype=float)[None, :]
    current = np.full((r.shape[0], K.shape[1]), float(p0))
    out = np.empty((r.shape[0], K.shape[1], max(0, length)))
    for i in range(max(0, length)):
        out[..., i] = np.floor(current + 0.5)
        current = np.maximum(0.0, r * current * (1 - current / K))
    return out


def mse_grid(actual: Sequence[float], trajectories: np.ndarray) -> np.ndarray:
    """Mean squared error of every trajectory in the grid against ``actual``."""
    target = np.asarray(actual, dtype=float)
    if target.size == 0:
        return np.zeros(trajectories.shape[:-1])
    return np.mean((trajectories - target) ** 2, axis=-1)
