"""
Integration tests for the full forecasting pipeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from concurrent.futures import ThreadPoolExecutor

from config import NO_DATA_ISSUE, settings
from engine import pipeline
from engine.enums import ConfidenceLevel
from engine.synthetic import random_series
from conftest import make_series


def test_growing_series_end_to_end(growing_series):
    res = pipeline.run(growing_series, 2)
    assert len(res.predictions) == 6
    assert [p.period for p in res.predictions] == list(range(2010, 2016))
    assert all(p.actual is None for p in res.predictions[4:])
    assert all(p.actual is not None for p in res.predictions[:4])
    assert 0 <= res.error_metrics.r2 <= 1
    assert res.error_metrics.mape >= 0
    assert res.params.optimization_applied is True
    assert res.validation.improvement >= 0
    assert res.insights.confidence in set(ConfidenceLevel)
    assert res.steps[0] == "=== Prediction Process ==="


def test_working_series_is_smoothed(growing_series):
    res = pipeline.run(growing_series, 1)
    # window of two over four points
    assert [p.actual for p in res.predictions[:4]] == [1000, 1050, 1155, 1271]
    assert res.preprocessing.cleaned == tuple(growing_series)


def test_predictions_stay_within_capacity_band(saturating_series):
    res = pipeline.run(saturating_series, 20)
    cap = res.params.K * settings.prediction_overshoot_cap + 0.5
    assert all(0 <= p.predicted <= cap for p in res.predictions)
    assert all(p.confidence_low <= p.predicted <= p.confidence_high for p in res.predictions)


def test_empty_series_uses_defaults():
    res = pipeline.run([], 2)
    assert res.preprocessing.issues == (NO_DATA_ISSUE,)
    assert [p.period for p in res.predictions] == [2020, 2021]
    assert res.params.P0 == 1000
    assert res.params.K == 10000
    assert res.error_metrics.mse == 0


def test_single_point():
    res = pipeline.run(make_series((2020, 500)), 3)
    assert len(res.predictions) == 4
    assert res.predictions[0].predicted == 500
    assert res.validation.improvement == 0


def test_gaps_and_bad_values_are_repaired():
    res = pipeline.run(make_series((2020, 100), (2022, 300), (2023, 0), (2024, 420)), 2)
    assert [o.period for o in res.preprocessing.cleaned] == [2020, 2021, 2022, 2023, 2024]
    assert all(o.value > 0 for o in res.preprocessing.cleaned)
    assert res.preprocessing.corrections[0].startswith("Applied")
    assert len(res.predictions) == 7


def test_runs_are_independent():
    inputs = [(random_series(2000, 12, seed=seed), 5) for seed in range(6)]
    sequential = [pipeline.run(series, horizon) for series, horizon in inputs]
    with ThreadPoolExecutor(max_workers=4) as pool:
        concurrent = list(pool.map(lambda args: pipeline.run(*args), inputs))
    assert concurrent == sequential


def test_all_zero_series_runs():
    res = pipeline.run(make_series((2020, 0), (2021, 0), (2022, 0)), 2)
    assert [o.value for o in res.preprocessing.cleaned] == [1, 1, 1]
    assert res.params.K > 0
    assert len(res.predictions) == 5
    assert all(p.predicted >= 0 for p in res.predictions)
