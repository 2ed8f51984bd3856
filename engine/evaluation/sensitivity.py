"""
One-at-a-time sensitivity sweeps of r and K around a fitted parameter set, reporting the
error curve, the best sampled value per axis and the range where error stays near its minimum.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np

from config import settings
from engine.models import (
    ModelParameters,
    Observation,
    SensitivityAnalysis,
    SensitivitySample,
    StableZone,
    values_of,
)
from engine.recurrence import mse_grid, simulate_grid


def _multipliers(sweep: Tuple[float, float, int]) -> np.ndarray:
    low, high, count = sweep
    return np.linspace(low, high, int(count))


def _stable_range(samples: Tuple[SensitivitySample, ...]) -> Tuple[float, float]:
    floor = min(s.mse for s in samples)
    if floor > 0:
        stable = [s.value for s in samples if s.mse < floor * settings.sensitivity_stable_factor]
    else:
        stable = [s.value for s in samples if s.mse == 0]
    return min(stable), max(stable)


def _best(samples: Tuple[SensitivitySample, ...]) -> float:
    best = samples[0]
    for s in samples[1:]:
        if s.mse < best.mse:
            best = s
    return best.value


def analyze(series: Sequence[Observation], params: ModelParameters) -> SensitivityAnalysis:
    actual = values_of(series)
    length = len(actual)

    r_values = params.r * _multipliers(settings.sensitivity_r_sweep)
    k_values = params.K * _multipliers(settings.sensitivity_k_sweep)

    r_mse = mse_grid(actual, simulate_grid(params.P0, r_values, [params.K], length))[:, 0]
    k_mse = mse_grid(actual, simulate_grid(params.P0, [params.r], k_values, length))[0, :]

    r_samples = tuple(SensitivitySample(value=float(v), mse=float(m)) for v, m in zip(r_values, r_mse))
    k_samples = tuple(SensitivitySample(value=float(v), mse=float(m)) for v, m in zip(k_values, k_mse))

    r_min, r_max = _stable_range(r_samples)
    k_min, k_max = _stable_range(k_samples)

    return SensitivityAnalysis(
        r_sensitivity=r_samples,
        k_sensitivity=k_samples,
        stable_zone=StableZone(r_min=r_min, r_max=r_max, k_min=k_min, k_max=k_max),
        optimal_r=_best(r_samples),
        optimal_k=_best(k_samples),
    )
