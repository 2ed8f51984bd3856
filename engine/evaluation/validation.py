"""
Rolling train/test validation: fit tuned (advanced estimate + grid search) and untuned
(basic estimate) parameters on the leading share of the series and compare how each
generalises to the held-out tail.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from config import settings
from engine.estimation import estimate_advanced, estimate_basic, optimize
from engine.evaluation.metrics import compute as compute_metrics
from engine.models import ErrorMetrics, Observation, ValidationResult, values_of
from engine.recurrence import simulate

log = logging.getLogger(__name__)


def validate(series: Sequence[Observation], train_ratio: float | None = None) -> ValidationResult:
    if train_ratio is None:
        train_ratio = settings.validation_train_ratio
    split = math.floor(len(series) * train_ratio)
    train, test = series[:split], series[split:]

    if len(train) < settings.validation_min_train or len(test) < settings.validation_min_test:
        log.debug("validate: split %d/%d too small, skipping", len(train), len(test))
        fallback = estimate_basic(series)
        return ValidationResult(
            train_metrics=ErrorMetrics(),
            test_metrics=ErrorMetrics(),
            improvement=0.0,
            tuned_params=fallback,
            untuned_params=fallback,
        )

    untuned = estimate_basic(train)
    tuned = optimize(train, estimate_advanced(train))

    n = len(series)
    untuned_preds = simulate(untuned.P0, untuned.r, untuned.K, n)
    tuned_preds = simulate(tuned.P0, tuned.r, tuned.K, n)

    train_actual = values_of(train)
    test_actual = values_of(test)
    train_metrics = compute_metrics(train_actual, tuned_preds[:split])
    test_metrics = compute_metrics(test_actual, tuned_preds[split:])
    untuned_test = compute_metrics(test_actual, untuned_preds[split:])

    improvement = 0.0
    if untuned_test.mse > 0:
        improvement = (untuned_test.mse - test_metrics.mse) / untuned_test.mse * 100

    return ValidationResult(
        train_metrics=train_metrics,
        test_metrics=test_metrics,
        improvement=max(0.0, improvement),
        tuned_params=tuned,
        untuned_params=untuned,
    )
