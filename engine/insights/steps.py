"""
Step-by-step calculation trace: parameter rationale, optimisation summary, the first
few recurrence expansions from P0 and a saturation warning when it applies.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List

from config import settings
from engine.models import ErrorMetrics, ModelParameters, SaturationAnalysis
from engine.recurrence import round_half_up, step


def trace(
    params: ModelParameters,
    initial: float,
    saturation: SaturationAnalysis,
    metrics: ErrorMetrics,
    steps: int | None = None,
) -> List[str]:
    if steps is None:
        steps = settings.trace_steps
    lines: List[str] = [
        "=== Prediction Process ===",
        "",
        "Parameter Selection Rationale:",
        f"• Growth rate r = {params.r:.4f} was selected using time-weighted historical analysis",
        f"• Carrying capacity K = {params.K:,.0f} represents the estimated limit",
        f"• Initial value P₀ = {initial:,.0f}",
        "",
    ]

    if params.optimization_applied:
        lines += [
            "Optimization Applied:",
            "• Parameters tuned to minimize prediction error",
            f"• Final MAPE: {metrics.mape:.2f}%",
            f"• R² Score: {metrics.r2 * 100:.1f}%",
            "",
        ]

    lines += [
        "Step-by-Step Calculations:",
        "Using P(n) = r × P(n-1) × (1 - P(n-1)/K)",
        "",
    ]

    p = initial
    for n in range(1, steps + 1):
        factor = 1 - p / params.K
        nxt = step(p, params.r, params.K)
        shown = round_half_up(p)
        lines += [
            f"Period {n}:",
            f"  P({n}) = {params.r:.4f} × {shown:,.0f} × (1 - {shown:,.0f}/{params.K:,.0f})",
            f"  P({n}) = {params.r:.4f} × {shown:,.0f} × {factor:.4f}",
            f"  P({n}) = {round_half_up(nxt):,.0f}",
            "",
        ]
        p = nxt

    if saturation.is_approaching_saturation:
        lines += [
            "Saturation Detection:",
            f"• Series at {saturation.saturation_percentage:.1f}% of carrying capacity",
            f"• Growth rate dynamically reduced by factor of {saturation.dynamic_growth_adjustment:.2f}",
        ]
        if saturation.saturation_period is not None:
            lines.append(f"• Estimated saturation period: {saturation.saturation_period}")

    return lines
