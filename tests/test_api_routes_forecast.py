"""
Test Suite for API Routes - Forecast, Series and Health

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest
from fastapi import HTTPException

from api.requests import CsvImportRequest, ForecastRequest, ScenarioRequest, SyntheticRequest
from api.routes import forecast as forecast_route
from api.routes import health as health_route
from api.routes import series as series_route
from config import EXPORT_HEADERS, settings
from services import forecast_service

SERIES = [
    {"period": 2010, "value": 1000},
    {"period": 2011, "value": 1100},
    {"period": 2012, "value": 1210},
    {"period": 2013, "value": 1331},
]


@pytest.mark.asyncio
async def test_forecast_route():
    report = await forecast_route.forecast(ForecastRequest(series=SERIES, horizon=2))
    assert len(report.predictions) == 6
    assert report.predictions[-1].actual is None
    assert 0 <= report.error_metrics.r2 <= 1
    payload = report.model_dump()
    assert payload["insights"]["confidence"] in ("high", "medium", "low")
    assert len(payload["sensitivity"]["r_sensitivity"]) == 11


@pytest.mark.asyncio
async def test_forecast_route_rejects_horizon_over_limit(monkeypatch):
    monkeypatch.setattr(settings, "max_horizon", 1)
    with pytest.raises(HTTPException) as exc:
        await forecast_route.forecast(ForecastRequest(series=SERIES, horizon=2))
    assert exc.value.status_code == 422
    assert "horizon" in exc.value.detail


@pytest.mark.asyncio
async def test_unexpected_errors_become_500(monkeypatch):
    def boom(req):
        raise RuntimeError("kaput")

    monkeypatch.setattr(forecast_service, "run_forecast", boom)
    with pytest.raises(HTTPException) as exc:
        await forecast_route.forecast(ForecastRequest(series=SERIES, horizon=2))
    assert exc.value.status_code == 500
    assert exc.value.detail == "kaput"


@pytest.mark.asyncio
async def test_export_route():
    response = await forecast_route.export_forecast(ForecastRequest(series=SERIES, horizon=1))
    assert response.media_type == "text/csv"
    assert "forecast.csv" in response.headers["content-disposition"]
    body = response.body.decode("utf-8")
    assert body.startswith(",".join(EXPORT_HEADERS))
    assert "Error Metrics" in body


@pytest.mark.asyncio
async def test_import_route():
    res = await forecast_route.import_series(CsvImportRequest(content="Year,Population\n2021,150\n2020,100\n"))
    assert [o.period for o in res.series] == [2020, 2021]
    assert res.quality.stats.size == 2
    assert "Limited data points may reduce prediction accuracy" in res.quality.warnings


@pytest.mark.asyncio
async def test_import_route_rejects_bad_content():
    with pytest.raises(HTTPException) as exc:
        await forecast_route.import_series(CsvImportRequest(content="a,b\n1,2\n3,4\n"))
    assert exc.value.status_code == 422


@pytest.mark.asyncio
async def test_scenario_route():
    req = ScenarioRequest(series=SERIES, horizon=4, r=2.0, shock_pct=-20, shock_index=5)
    res = await forecast_route.scenario(req)
    assert res.params.r == 2.0
    assert res.base_params.r != 2.0 or res.r_change_pct == 0
    assert res.shock_index == 5
    assert len(res.predictions) == 8


@pytest.mark.asyncio
async def test_synthetic_route():
    res = await series_route.synthetic_series(
        SyntheticRequest(mode="logistic", start_period=2000, count=5, p0=100, r=2.0, K=1000)
    )
    assert [o.value for o in res.series] == [100, 180, 295, 416, 486]
    seeded = SyntheticRequest(mode="random", count=8, seed=11)
    first = await series_route.synthetic_series(seeded)
    second = await series_route.synthetic_series(seeded)
    assert first == second


@pytest.mark.asyncio
async def test_health_route():
    assert await health_route.health() == {"status": "ok", "max_horizon": settings.max_horizon}
