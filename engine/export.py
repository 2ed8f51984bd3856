"""
Delimited text import and export: the forecast table (period, actual, predicted, error,
confidence bounds, fitted r and K on the first row, optional metrics footer) and the
period/value series accepted as input.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import csv
import io
import logging
from typing import List, Optional, Sequence

from config import CSV_PLACEHOLDER, EXPORT_HEADERS, IMPORT_PERIOD_COLUMNS, IMPORT_VALUE_COLUMNS
from engine.exceptions import SeriesFormatError
from engine.models import ErrorMetrics, ModelParameters, Observation, PredictionPoint
from engine.recurrence import round_half_up

log = logging.getLogger(__name__)


def _cell(value: Optional[float]) -> str:
    if value is None:
        return CSV_PLACEHOLDER
    number = float(value)
    return str(int(number)) if number.is_integer() else str(number)


def to_csv(
    predictions: Sequence[PredictionPoint],
    params: ModelParameters,
    metrics: Optional[ErrorMetrics] = None,
) -> str:
    rows = [",".join(EXPORT_HEADERS)]
    for index, p in enumerate(predictions):
        rows.append(",".join([
            str(p.period),
            _cell(p.actual),
            _cell(p.predicted),
            f"{int(round_half_up(p.error))}" if p.error is not None else CSV_PLACEHOLDER,
            _cell(p.confidence_low),
            _cell(p.confidence_high),
            f"{params.r:.4f}" if index == 0 else "",
            f"{params.K:.0f}" if index == 0 else "",
        ]))
    text = "\n".join(rows)

    if metrics is not None:
        text += "\n\nError Metrics\n"
        text += f"MAE,{metrics.mae:.2f}\n"
        text += f"MSE,{metrics.mse:.2f}\n"
        text += f"RMSE,{metrics.rmse:.2f}\n"
        text += f"MAPE,{metrics.mape:.2f}%\n"
        text += f"R²,{metrics.r2 * 100:.2f}%"
    return text


def _column(fieldnames: Sequence[str], accepted: Sequence[str]) -> Optional[str]:
    for name in fieldnames:
        if name and name.strip().lower() in accepted:
            return name
    return None


def from_csv(text: str) -> List[Observation]:
    reader = csv.DictReader(io.StringIO(text.strip()))
    fieldnames = reader.fieldnames or []
    period_col = _column(fieldnames, IMPORT_PERIOD_COLUMNS)
    value_col = _column(fieldnames, IMPORT_VALUE_COLUMNS)
    if period_col is None or value_col is None:
        raise SeriesFormatError("Invalid CSV format. Please ensure columns: Period, Value")

    series: List[Observation] = []
    for line_no, row in enumerate(reader, start=2):
        if not any(str(cell or "").strip() for cell in row.values()):
            continue
        try:
            period = int(float(row[period_col]))
            value = round_half_up(float(row[value_col]))
        except (TypeError, ValueError, OverflowError) as exc:
            raise SeriesFormatError(f"Invalid data on line {line_no}: {row}") from exc
        series.append(Observation(period=period, value=value))

    if len(series) < 2:
        raise SeriesFormatError("CSV must contain at least 2 data points")

    series.sort(key=lambda obs: obs.period)
    log.debug("from_csv: parsed %d observation(s)", len(series))
    return series
