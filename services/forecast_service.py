"""
Forecast service: converts API requests into engine calls and engine results into
response models.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import dataclasses

from api.requests import CsvImportRequest, ForecastRequest, ScenarioRequest, SyntheticRequest
from api.responses import ForecastReport, ImportedSeries, ScenarioReport, SyntheticSeries
from config import settings
from engine import export, pipeline, synthetic
from engine.exceptions import HorizonError
from engine.forecast import simulate_scenario
from engine.models import PipelineResult
from engine.preprocessing import assess


def _check_horizon(horizon: int) -> None:
    if horizon < 0 or horizon > settings.max_horizon:
        raise HorizonError(f"horizon must be between 0 and {settings.max_horizon}, got {horizon}")


def fit(req: ForecastRequest) -> PipelineResult:
    _check_horizon(req.horizon)
    return pipeline.run(req.observations(), req.horizon)


def run_forecast(req: ForecastRequest) -> ForecastReport:
    return ForecastReport.model_validate(dataclasses.asdict(fit(req)))


def export_forecast(req: ForecastRequest) -> str:
    result = fit(req)
    return export.to_csv(result.predictions, result.params, result.error_metrics)


def import_series(req: CsvImportRequest) -> ImportedSeries:
    series = export.from_csv(req.content)
    return ImportedSeries.model_validate({
        "series": [dataclasses.asdict(o) for o in series],
        "quality": dataclasses.asdict(assess(series)),
    })


def run_scenario(req: ScenarioRequest) -> ScenarioReport:
    result = fit(req)
    working = list(result.preprocessing.working)
    scenario = simulate_scenario(
        working,
        result.params,
        req.horizon,
        r=req.r,
        shock_pct=req.shock_pct,
        shock_index=req.shock_index,
    )
    payload = dataclasses.asdict(scenario)
    payload["base_params"] = dataclasses.asdict(result.params)
    return ScenarioReport.model_validate(payload)


def generate_series(req: SyntheticRequest) -> SyntheticSeries:
    if req.mode == "logistic":
        series = synthetic.logistic_series(req.start_period, req.count, req.p0, req.r, req.K)
    else:
        series = synthetic.random_series(req.start_period, req.count, seed=req.seed)
    return SyntheticSeries(mode=req.mode, series=[dataclasses.asdict(o) for o in series])
