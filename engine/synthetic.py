"""
Synthetic series generation, used for demos and as test fixtures: a deterministic
series from the pure logistic recurrence and a noisy continuous-logistic random walk.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from config import settings
from engine.models import Observation
from engine.recurrence import round_half_up, step


def logistic_series(start_period: int, count: int, p0: float, r: float, K: float) -> List[Observation]:
    data: List[Observation] = []
    value = p0
    for i in range(count):
        data.append(Observation(period=start_period + i, value=round_half_up(value)))
        value = max(0.0, step(value, r, K))
    return data


def random_series(start_period: int, count: int, seed: Optional[int] = None) -> List[Observation]:
    rng = np.random.default_rng(seed)
    value = float(rng.integers(settings.synthetic_start_low, settings.synthetic_start_high))
    growth = settings.synthetic_growth_low + rng.random() * settings.synthetic_growth_span
    K = value * (settings.synthetic_capacity_low + rng.random() * settings.synthetic_capacity_span)

    data: List[Observation] = []
    for i in range(count):
        data.append(Observation(period=start_period + i, value=round_half_up(value)))
        r = growth + (rng.random() - 0.5) * settings.synthetic_noise
        value = max(settings.synthetic_floor, value * (1 + r * (1 - value / K)))
    return data
