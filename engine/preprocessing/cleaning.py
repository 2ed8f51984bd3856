"""
Series cleaning ahead of parameter estimation: ordering, duplicate resolution, linear
gap interpolation, repair of non-positive values, centred moving-average smoothing and
max-normalisation. Every repair is reported back as a human readable issue or correction.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import List, Sequence, Tuple

from config import NO_DATA_ISSUE
from engine.models import Observation, PreprocessingResult
from engine.recurrence import round_half_up

log = logging.getLogger(__name__)


def _format_periods(periods: List[int], limit: int = 3) -> str:
    shown = ", ".join(str(p) for p in periods[:limit])
    return shown + ("..." if len(periods) > limit else "")


def _dedupe(ordered: List[Observation], issues: List[str]) -> List[Observation]:
    by_period: dict[int, Observation] = {}
    duplicated: List[int] = []
    for obs in ordered:
        if obs.period in by_period and obs.period not in duplicated:
            duplicated.append(obs.period)
        by_period[obs.period] = obs
    if duplicated:
        issues.append(f"Duplicate values for periods: {_format_periods(duplicated)} (kept last)")
    return list(by_period.values())


def _fill_gaps(
    known: List[Observation], issues: List[str], corrections: List[str]
) -> List[Observation]:
    periods = [obs.period for obs in known]
    present = set(periods)
    missing = [p for p in range(periods[0], periods[-1] + 1) if p not in present]
    if not missing:
        return known

    issues.append(f"Missing data for periods: {_format_periods(missing)}")
    filled = list(known)
    for period in missing:
        idx = bisect.bisect_left(periods, period)
        if idx == 0 or idx >= len(known):
            continue
        before, after = known[idx - 1], known[idx]
        ratio = (period - before.period) / (after.period - before.period)
        value = round_half_up(before.value + ratio * (after.value - before.value))
        filled.append(Observation(period=period, value=value))
        corrections.append(f"Interpolated period {period}: {value:,.0f}")
    filled.sort(key=lambda obs: obs.period)
    return filled


def _repair_non_positive(
    series: List[Observation], issues: List[str], corrections: List[str]
) -> List[Observation]:
    invalid = [i for i, obs in enumerate(series) if obs.value <= 0]
    if not invalid:
        return series

    issues.append(f"Found {len(invalid)} zero or negative values")
    repaired = list(series)
    for i in invalid:
        # non-positive neighbours count as absent; the previous one is already repaired
        prev = repaired[i - 1].value if i > 0 else 0.0
        nxt = series[i + 1].value if i + 1 < len(series) else 0.0
        neighbours = [v for v in (prev, nxt) if v > 0]
        fixed = round_half_up(sum(neighbours) / len(neighbours)) if neighbours else 1.0
        fixed = max(1.0, fixed)
        original = series[i]
        repaired[i] = Observation(period=original.period, value=fixed)
        corrections.append(f"Fixed period {original.period}: {original.value:,.0f} → {fixed:,.0f}")
    return repaired


def smooth(series: Sequence[Observation]) -> Tuple[Observation, ...]:
    n = len(series)
    window = min(3, n // 2)
    if n < 4 or window < 2:
        return tuple(series)

    out = []
    for i, obs in enumerate(series):
        start = max(0, i - window // 2)
        end = min(n, i + math.ceil(window / 2))
        chunk = series[start:end]
        avg = sum(o.value for o in chunk) / len(chunk)
        out.append(Observation(period=obs.period, value=round_half_up(avg)))
    return tuple(out)


def normalize(series: Sequence[Observation]) -> Tuple[float, Tuple[Observation, ...]]:
    peak = max(obs.value for obs in series)
    factor = peak if peak > 0 else 1.0
    return factor, tuple(Observation(period=o.period, value=o.value / factor) for o in series)


def preprocess(series: Sequence[Observation]) -> PreprocessingResult:
    if not series:
        return PreprocessingResult(
            cleaned=(),
            normalized=(),
            smoothed=(),
            issues=(NO_DATA_ISSUE,),
            corrections=(),
            normalization_factor=1.0,
        )

    issues: List[str] = []
    corrections: List[str] = []

    ordered = sorted(series, key=lambda obs: obs.period)
    cleaned = _dedupe(ordered, issues)
    cleaned = _fill_gaps(cleaned, issues, corrections)
    cleaned = _repair_non_positive(cleaned, issues, corrections)

    smoothed = smooth(cleaned)
    factor, normalized = normalize(cleaned)

    if corrections:
        corrections.insert(0, f"Applied {len(corrections)} data corrections for improved stability")
        log.debug("preprocess: %d correction(s) over %d point(s)", len(corrections) - 1, len(cleaned))

    return PreprocessingResult(
        cleaned=tuple(cleaned),
        normalized=normalized,
        smoothed=smoothed,
        issues=tuple(issues),
        corrections=tuple(corrections),
        normalization_factor=factor,
    )
