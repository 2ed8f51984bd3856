"""
What-if simulation over a fitted model: re-run the forecast with an overridden growth
rate and optionally apply a one-off percentage shock at a chosen prediction index.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from engine.forecast.predictions import generate
from engine.models import ModelParameters, Observation, PredictionPoint
from engine.recurrence import round_half_up


@dataclass(frozen=True)
class Scenario:
    params: ModelParameters
    predictions: Tuple[PredictionPoint, ...]
    r_change_pct: float
    shock_pct: float
    shock_index: int


def simulate(
    series: Sequence[Observation],
    params: ModelParameters,
    horizon: int,
    r: Optional[float] = None,
    shock_pct: float = 0.0,
    shock_index: Optional[int] = None,
) -> Scenario:
    adjusted = params.with_r(r) if r is not None else params
    if shock_index is None:
        shock_index = horizon // 2

    predictions = generate(series, adjusted, horizon)
    if shock_pct and 0 <= shock_index < len(predictions):
        hit = predictions[shock_index]
        predictions[shock_index] = dataclasses.replace(
            hit, predicted=round_half_up(hit.predicted * (1 + shock_pct / 100))
        )

    r_change = (adjusted.r - params.r) / params.r * 100 if params.r else 0.0
    return Scenario(
        params=adjusted,
        predictions=tuple(predictions),
        r_change_pct=r_change,
        shock_pct=shock_pct,
        shock_index=shock_index,
    )
