"""
Insight generation: categorical growth, stability, risk and confidence labels derived
from the fitted model and its error metrics, plus the explanatory sentences shown
alongside a forecast.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import List, Sequence

import numpy as np

from config import settings
from engine.enums import ConfidenceLevel, GrowthTrend, RiskLevel, StabilityLevel
from engine.models import (
    ConfidenceFactors,
    ErrorMetrics,
    Insight,
    ModelParameters,
    Observation,
    PredictionPoint,
    ValidationResult,
    values_of,
)
from engine.preprocessing.quality import average_growth_rate


def dispersion_ratio(series: Sequence[Observation]) -> float:
    """Population standard deviation relative to the last observed value."""
    values = values_of(series)
    std = float(np.std(values)) if values else 0.0
    last = values[-1] if values else 0.0
    if last > 0:
        return std / last
    return math.inf if std > 0 else 0.0


def confidence_factors(
    series: Sequence[Observation], stability: StabilityLevel, metrics: ErrorMetrics
) -> ConfidenceFactors:
    return ConfidenceFactors(
        data_consistency=max(0.0, 100 - dispersion_ratio(series) * 100),
        error_score=max(0.0, 100 - metrics.mape),
        stability_score=stability.score(),
        data_quality=min(100.0, len(series) * settings.insight_quality_per_point),
    )


def confidence_score(factors: ConfidenceFactors) -> float:
    w_consistency, w_error, w_stability, w_quality = settings.insight_confidence_weights
    return (
        factors.data_consistency * w_consistency
        + factors.error_score * w_error
        + factors.stability_score * w_stability
        + factors.data_quality * w_quality
    )


def _trend_sentence(trend: GrowthTrend, growth: float) -> str:
    if trend is GrowthTrend.exponential:
        return f"The series exhibits strong exponential growth with an average rate of {growth * 100:.1f}% per period."
    if trend is GrowthTrend.logistic:
        return "The series shows characteristic logistic growth, gradually approaching the carrying capacity."
    if trend is GrowthTrend.stable:
        return "The series has reached a relatively stable equilibrium near the carrying capacity."
    return "The series shows a declining trend, possibly due to capacity constraints or resource limitations."


def generate(
    series: Sequence[Observation],
    predictions: Sequence[PredictionPoint],
    params: ModelParameters,
    metrics: ErrorMetrics,
    validation: ValidationResult,
) -> Insight:
    growth = average_growth_rate(series)
    last_predicted = predictions[-1].predicted if predictions else 0.0

    trend = GrowthTrend.from_rate(growth)
    stability = StabilityLevel.from_ratio(dispersion_ratio(series))
    risk = RiskLevel.from_capacity_ratio(last_predicted / params.K if params.K else 0.0)

    factors = confidence_factors(series, stability, metrics)
    score = confidence_score(factors)
    confidence = ConfidenceLevel.from_score(score)

    summary: List[str] = [
        _trend_sentence(trend, growth),
        f"The estimated carrying capacity (K = {params.K:,.0f}) is the maximum sustainable level.",
    ]
    if validation.improvement > 0:
        summary.append(
            f"Model optimisation improved prediction accuracy by {validation.improvement:.1f}% "
            "compared to baseline parameters."
        )
    summary.append(
        f"Based on {len(series)} historical data points, the model achieves {confidence.value} confidence "
        f"({score:.0f}%) with MAPE of {metrics.mape:.1f}%."
    )

    parameter_explanation: List[str] = [
        f"Growth Rate (r = {params.r:.4f}): estimated with a time-weighted analysis of historical "
        "growth, giving recent periods higher importance.",
        f"Carrying Capacity (K = {params.K:,.0f}): derived from the saturation trend and the maximum "
        "observed value.",
    ]
    if params.optimization_applied:
        parameter_explanation.append(
            "Parameters were optimised with a grid search minimising mean squared error over the history."
        )

    accuracy_explanation: List[str] = [
        f"Mean Absolute Error: {metrics.mae:,.2f} (average deviation per period)",
        f"Root Mean Square Error: {metrics.rmse:,.2f} (penalises large errors)",
        f"R² Score: {metrics.r2 * 100:.1f}% (variance explained by the model)",
    ]
    if validation.improvement > 0:
        accuracy_explanation.append(
            f"Tuning improved MSE by {validation.improvement:.1f}% over default estimation."
        )

    return Insight(
        growth_trend=trend,
        stability_level=stability,
        risk_level=risk,
        confidence=confidence,
        confidence_score=score,
        confidence_factors=factors,
        summary=tuple(summary),
        parameter_explanation=tuple(parameter_explanation),
        accuracy_explanation=tuple(accuracy_explanation),
    )
