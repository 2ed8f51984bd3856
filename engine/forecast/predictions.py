"""
Forward iteration of the logistic recurrence over the historical window plus a forecast
horizon, producing per-period predictions with heuristic confidence bounds. Growth on
forecast-only steps is optionally dampened by the saturation analysis.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from config import settings
from engine.models import ModelParameters, Observation, PredictionPoint, SaturationAnalysis
from engine.recurrence import round_half_up, step


def _clamp(value: float, K: float) -> float:
    return max(0.0, min(value, K * settings.prediction_overshoot_cap))


def confidence_halfwidth(index: int, history_length: int) -> float:
    if index < history_length:
        return settings.confidence_base
    return settings.confidence_base + (index - history_length) * settings.confidence_growth_per_period


def generate(
    series: Sequence[Observation],
    params: ModelParameters,
    horizon: int,
    saturation: Optional[SaturationAnalysis] = None,
) -> List[PredictionPoint]:
    n = len(series)
    start = series[0].period if series else settings.default_start_period
    damped_r = params.r * saturation.dynamic_growth_adjustment if saturation else params.r

    results: List[PredictionPoint] = []
    current = _clamp(params.P0, params.K)
    for i in range(n + max(0, horizon)):
        actual = series[i].value if i < n else None
        predicted = round_half_up(current)
        half = confidence_halfwidth(i, n)
        results.append(
            PredictionPoint(
                period=start + i,
                actual=actual,
                predicted=predicted,
                error=abs(actual - predicted) if actual is not None else None,
                confidence_low=round_half_up(predicted * (1 - half)),
                confidence_high=round_half_up(predicted * (1 + half)),
            )
        )
        r = damped_r if i >= n else params.r
        current = _clamp(step(current, r, params.K), params.K)
    return results
