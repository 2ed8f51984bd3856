"""
Descriptive statistics and a quality assessment for a raw series, flagging short
histories, period gaps, negative values and implausible single-step growth.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

from config import settings
from engine.models import DatasetStats, Observation, QualityReport


def average_growth_rate(series: Sequence[Observation]) -> float:
    """Mean relative change per period.

    Steps with a non-positive denominator contribute nothing but still count
    towards the ``n - 1`` divisor.
    """
    if len(series) < 2:
        return 0.0
    total = 0.0
    for prev, curr in zip(series, series[1:]):
        if prev.value > 0:
            total += (curr.value - prev.value) / prev.value
    return total / (len(series) - 1)


def describe(series: Sequence[Observation]) -> DatasetStats:
    if not series:
        return DatasetStats(size=0, min_period=0, max_period=0, min_value=0.0, max_value=0.0, avg_growth_rate=0.0)

    periods = [obs.period for obs in series]
    values = [obs.value for obs in series]
    return DatasetStats(
        size=len(series),
        min_period=min(periods),
        max_period=max(periods),
        min_value=min(values),
        max_value=max(values),
        avg_growth_rate=average_growth_rate(series),
    )


def assess(series: Sequence[Observation]) -> QualityReport:
    issues: List[str] = []
    warnings: List[str] = []

    if len(series) < settings.quality_min_points:
        warnings.append("Limited data points may reduce prediction accuracy")

    for prev, curr in zip(series, series[1:]):
        if curr.period - prev.period > 1:
            warnings.append(f"Gap detected between periods {prev.period} and {curr.period}")

    if any(obs.value < 0 for obs in series):
        issues.append("Negative values detected")

    for prev, curr in zip(series, series[1:]):
        if prev.value <= 0:
            continue
        rate = (curr.value - prev.value) / prev.value
        if abs(rate) > settings.quality_unusual_growth:
            warnings.append(
                f"Unusual growth rate ({rate * 100:.0f}%) between {prev.period} and {curr.period}"
            )
            break

    return QualityReport(stats=describe(series), issues=tuple(issues), warnings=tuple(warnings))
