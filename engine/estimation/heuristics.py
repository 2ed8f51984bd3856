"""
Heuristic starting estimates for the logistic growth rate r and carrying capacity K.
The basic estimator averages consecutive ratios; the advanced estimator weights recent
ratios more heavily and reads K off the saturation trend of the second half of the series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import numpy as np

from config import settings
from engine.models import ModelParameters, Observation


def _clamp_r(r: float) -> float:
    return min(max(r, settings.r_min), settings.r_max)


def default_parameters(series: Sequence[Observation]) -> ModelParameters:
    first = series[0].value if series else 0.0
    K = first * settings.default_capacity_multiplier if first else settings.default_capacity
    return ModelParameters(
        r=settings.default_r,
        K=K,
        P0=first if first else settings.default_p0,
        r_original=settings.default_r,
        K_original=K,
        optimization_applied=False,
    )


def _ratios(series: Sequence[Observation]) -> List[tuple[int, float]]:
    return [
        (i, series[i].value / series[i - 1].value)
        for i in range(1, len(series))
        if series[i - 1].value > 0
    ]


def estimate_basic(series: Sequence[Observation]) -> ModelParameters:
    if len(series) < 2:
        return default_parameters(series)

    P0 = series[0].value
    ratios = [rate for _, rate in _ratios(series)]
    avg_rate = float(np.mean(ratios)) if ratios else settings.default_r
    peak = max(obs.value for obs in series)
    K = max(peak * settings.basic_capacity_max_factor, P0 * settings.basic_capacity_p0_factor)
    return ModelParameters(r=_clamp_r(avg_rate), K=K, P0=P0)


def _recent_growth(working: Sequence[Observation]) -> float:
    recent = working[-math.ceil(len(working) / 2):]
    rates = [
        (curr.value - prev.value) / prev.value
        for prev, curr in zip(recent, recent[1:])
        if prev.value > 0
    ]
    return float(np.mean(rates)) if rates else settings.advanced_default_recent_growth


def _capacity_from_trend(series: Sequence[Observation], recent_growth: float) -> float:
    peak = max(obs.value for obs in series)
    last = series[-1].value
    if recent_growth < settings.advanced_saturated_growth and last > peak * settings.advanced_saturated_last_ratio:
        return peak * settings.advanced_saturated_factor
    if recent_growth < settings.advanced_slowing_growth:
        return peak * settings.advanced_slowing_factor
    return peak * (settings.advanced_active_base + recent_growth * settings.advanced_active_growth_scale)


def estimate_advanced(
    series: Sequence[Observation],
    smoothed: Optional[Sequence[Observation]] = None,
) -> ModelParameters:
    """Time-weighted estimate used for real forecasts.

    Ratios are computed on ``smoothed`` when supplied (and non-empty), otherwise on
    ``series``. The ratio ending at index ``i`` of ``n`` carries weight
    ``exp(i / n * 1.1)``, so the latest steps count roughly three times the earliest.
    ``P0``, the observed peak and the last value always come from ``series``.
    """
    if len(series) < 2:
        return default_parameters(series)

    working = smoothed if smoothed else series
    P0 = series[0].value
    n = len(working)

    weighted_sum = 0.0
    weight_sum = 0.0
    for i, rate in _ratios(working):
        weight = math.exp((i / n) * settings.advanced_time_weight)
        weighted_sum += rate * weight
        weight_sum += weight
    r_original = weighted_sum / weight_sum if weight_sum > 0 else settings.default_r

    K_original = _capacity_from_trend(series, _recent_growth(working))

    return ModelParameters(
        r=_clamp_r(r_original),
        K=max(K_original, P0 * settings.advanced_capacity_p0_floor),
        P0=P0,
        r_original=r_original,
        K_original=K_original,
        optimization_applied=False,
    )
