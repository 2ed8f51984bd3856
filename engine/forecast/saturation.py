"""
Saturation analysis: how close the latest observation sits to the carrying capacity,
the growth dampening that proximity implies for forecast steps, and the first forecast
period expected to reach capacity.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional, Sequence

from config import settings
from engine.models import ModelParameters, Observation, PredictionPoint, SaturationAnalysis

_EXPLANATIONS = {
    "near": (
        "The series has reached near-saturation levels. Growth is significantly reduced "
        "by capacity constraints and further growth will be minimal."
    ),
    "approaching": (
        "The series is approaching its carrying capacity. Growth is slowing as limits "
        "become more impactful; expect gradual stabilisation."
    ),
    "moderate": (
        "The series is at moderate density relative to its carrying capacity. Growth "
        "continues but may begin slowing in future periods."
    ),
    "room": (
        "The series is well below its carrying capacity. The current trajectory leaves "
        "room for significant expansion before limits are reached."
    ),
}


def dampening_factor(saturation_pct: float) -> float:
    for cutoff, factor in settings.saturation_dampening:
        if saturation_pct > cutoff:
            return factor
    return 1.0


def explain(saturation_pct: float) -> str:
    if saturation_pct > settings.saturation_near_pct:
        return _EXPLANATIONS["near"]
    if saturation_pct > settings.saturation_approaching_pct:
        return _EXPLANATIONS["approaching"]
    if saturation_pct > settings.saturation_moderate_pct:
        return _EXPLANATIONS["moderate"]
    return _EXPLANATIONS["room"]


def _saturation_period(predictions: Sequence[PredictionPoint], K: float) -> Optional[int]:
    threshold = K * settings.saturation_reached_ratio
    for point in predictions:
        if point.is_forecast and point.predicted >= threshold:
            return point.period
    return None


def analyze(
    series: Sequence[Observation],
    predictions: Sequence[PredictionPoint],
    params: ModelParameters,
) -> SaturationAnalysis:
    last = series[-1].value if series else 0.0
    pct = last / params.K * 100

    return SaturationAnalysis(
        is_approaching_saturation=pct > settings.saturation_approaching_pct,
        saturation_period=_saturation_period(predictions, params.K),
        saturation_percentage=pct,
        dynamic_growth_adjustment=dampening_factor(pct),
        explanation=explain(pct),
    )
