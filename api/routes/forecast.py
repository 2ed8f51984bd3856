"""
Forecast routes: full pipeline run, delimited export, series import and what-if scenarios.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from api.requests import CsvImportRequest, ForecastRequest, ScenarioRequest
from api.responses import ForecastReport, ImportedSeries, ScenarioReport
from api.routes.exception import handle_exceptions
from services import forecast_service

router = APIRouter(tags=["Forecast"])


@router.post("/forecast", summary="Fit the logistic model and forecast the requested horizon")
@handle_exceptions
async def forecast(req: ForecastRequest) -> ForecastReport:
    return forecast_service.run_forecast(req)


@router.post("/forecast/export", summary="Forecast table as delimited text")
@handle_exceptions
async def export_forecast(req: ForecastRequest) -> Response:
    body = forecast_service.export_forecast(req)
    return Response(
        content=body,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="forecast.csv"'},
    )


@router.post("/forecast/import", summary="Parse a delimited period/value series")
@handle_exceptions
async def import_series(req: CsvImportRequest) -> ImportedSeries:
    return forecast_service.import_series(req)


@router.post("/forecast/scenario", summary="What-if simulation over the fitted model")
@handle_exceptions
async def scenario(req: ScenarioRequest) -> ScenarioReport:
    return forecast_service.run_scenario(req)
