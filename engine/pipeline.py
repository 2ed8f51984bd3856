"""
Forecast pipeline: preprocess the raw series, estimate and validate parameters, refine
them by grid search, probe sensitivity and saturation, and produce the final forecast
with error metrics, insights and a calculation trace.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import time
from typing import Sequence

from engine.estimation import estimate_advanced, optimize
from engine.evaluation import analyze_sensitivity, compute_metrics, validate
from engine.forecast import analyze_saturation, generate_predictions
from engine.insights import generate_insights, trace
from engine.models import Observation, PipelineResult, values_of
from engine.preprocessing import preprocess

log = logging.getLogger(__name__)


def run(series: Sequence[Observation], horizon: int) -> PipelineResult:
    started = time.perf_counter()

    preprocessing = preprocess(series)
    working = list(preprocessing.working)
    log.debug("pipeline: %d raw -> %d working point(s), %d issue(s)",
              len(series), len(working), len(preprocessing.issues))

    base = estimate_advanced(working, preprocessing.smoothed)
    validation = validate(working)
    params = optimize(working, base)
    log.debug("pipeline: base r=%.4f K=%.1f -> optimised r=%.4f K=%.1f",
              base.r, base.K, params.r, params.K)

    sensitivity = analyze_sensitivity(working, params)

    probe = generate_predictions(working, params, horizon)
    saturation = analyze_saturation(working, probe, params)
    predictions = generate_predictions(working, params, horizon, saturation)

    in_sample = [p.predicted for p in predictions[: len(working)]]
    error_metrics = compute_metrics(values_of(working), in_sample)

    insights = generate_insights(working, predictions, params, error_metrics, validation)
    steps = trace(params, working[0].value if working else 0.0, saturation, error_metrics)

    log.info(
        "pipeline: %d point(s) + %d horizon, r=%.4f K=%.1f mape=%.2f confidence=%s in %.1fms",
        len(working),
        horizon,
        params.r,
        params.K,
        error_metrics.mape,
        insights.confidence.value,
        (time.perf_counter() - started) * 1000,
    )

    return PipelineResult(
        predictions=tuple(predictions),
        params=params,
        insights=insights,
        error_metrics=error_metrics,
        validation=validation,
        preprocessing=preprocessing,
        sensitivity=sensitivity,
        saturation=saturation,
        steps=tuple(steps),
    )
