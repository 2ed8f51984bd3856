"""
Error metrics (MAE, MSE, RMSE, MAPE, R²) between an observed and a predicted sequence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from engine.models import ErrorMetrics


def compute(actual: Sequence[float], predicted: Sequence[float]) -> ErrorMetrics:
    if len(actual) == 0 or len(actual) != len(predicted):
        return ErrorMetrics()

    a = np.asarray(actual, dtype=float)
    p = np.asarray(predicted, dtype=float)
    n = a.size
    err = a - p

    mse = float(np.sum(err ** 2) / n)

    # zero actuals are skipped in the numerator but n is not reduced
    nonzero = a != 0
    mape = float(np.sum(np.abs(err[nonzero] / a[nonzero])) / n * 100)

    ss_tot = float(np.sum((a - np.mean(a)) ** 2))
    r2 = 1.0 - float(np.sum(err ** 2)) / ss_tot if ss_tot > 0 else 0.0

    return ErrorMetrics(
        mae=float(np.sum(np.abs(err)) / n),
        mse=mse,
        rmse=float(np.sqrt(mse)),
        mape=mape,
        r2=max(0.0, r2),
    )
