"""
Test cases for insight generation and confidence scoring.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math

import pytest

from engine.enums import ConfidenceLevel, GrowthTrend, RiskLevel, StabilityLevel
from engine.estimation import estimate_basic
from engine.insights import dispersion_ratio, generate_insights
from engine.models import ErrorMetrics, ModelParameters, PredictionPoint, ValidationResult
from conftest import make_series


def _validation(improvement=0.0):
    params = ModelParameters(r=1.5, K=1000.0, P0=100.0)
    return ValidationResult(
        train_metrics=ErrorMetrics(),
        test_metrics=ErrorMetrics(),
        improvement=improvement,
        tuned_params=params,
        untuned_params=params,
    )


def test_steady_series_near_capacity():
    series = make_series(*[(2000 + i, 1000) for i in range(5)])
    predictions = [PredictionPoint(period=2005, actual=None, predicted=950)]
    insight = generate_insights(
        series, predictions, ModelParameters(r=1.0, K=1000.0, P0=1000.0), ErrorMetrics(), _validation()
    )
    assert insight.growth_trend is GrowthTrend.stable
    assert insight.stability_level is StabilityLevel.stable
    assert insight.risk_level is RiskLevel.high
    assert insight.confidence_factors.data_consistency == 100
    assert insight.confidence_factors.error_score == 100
    assert insight.confidence_factors.stability_score == 90
    assert insight.confidence_factors.data_quality == 50
    assert insight.confidence_score == pytest.approx(88)
    assert insight.confidence is ConfidenceLevel.high


def test_short_volatile_series():
    series = make_series((1, 100), (2, 300))
    predictions = [PredictionPoint(period=3, actual=None, predicted=400)]
    insight = generate_insights(
        series, predictions, ModelParameters(r=3.0, K=2000.0, P0=100.0), ErrorMetrics(mape=80), _validation()
    )
    assert insight.growth_trend is GrowthTrend.exponential
    assert insight.stability_level is StabilityLevel.unstable
    assert insight.risk_level is RiskLevel.low
    assert insight.confidence_score == pytest.approx(100 / 6 + 7 + 6 + 4)
    assert insight.confidence is ConfidenceLevel.low
    assert "exponential growth" in insight.summary[0]
    assert "200.0%" in insight.summary[0]


def test_improvement_is_reported():
    series = make_series((1, 100), (2, 105), (3, 108))
    predictions = [PredictionPoint(period=4, actual=None, predicted=110)]
    params = estimate_basic(series)
    with_gain = generate_insights(series, predictions, params, ErrorMetrics(), _validation(12.5))
    without = generate_insights(series, predictions, params, ErrorMetrics(), _validation(0.0))
    assert len(with_gain.summary) == len(without.summary) + 1
    assert any("12.5%" in line for line in with_gain.summary)
    assert any("12.5%" in line for line in with_gain.accuracy_explanation)


def test_optimised_parameters_are_explained():
    series = make_series((1, 100), (2, 105))
    params = ModelParameters(r=1.2, K=500.0, P0=100.0).optimized(1.3, 600.0)
    insight = generate_insights(series, [], params, ErrorMetrics(), _validation())
    assert len(insight.parameter_explanation) == 3
    assert insight.risk_level is RiskLevel.low


def test_dispersion_ratio():
    assert dispersion_ratio([]) == 0
    assert dispersion_ratio(make_series((1, 5), (2, 5))) == 0
    assert dispersion_ratio(make_series((1, 100), (2, 300))) == pytest.approx(1 / 3)
    assert math.isinf(dispersion_ratio(make_series((1, 5), (2, 0))))
