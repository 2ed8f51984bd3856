"""
Test cases for request validation and response serialisation models.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest
from pydantic import ValidationError

from api.requests import CsvImportRequest, ForecastRequest, ScenarioRequest, SyntheticRequest
from api.responses import ObservationModel, SyntheticSeries
from engine.models import Observation
from services import forecast_service


def test_forecast_request_defaults():
    req = ForecastRequest()
    assert req.series == []
    assert req.horizon == 5
    assert req.observations() == []


def test_forecast_request_builds_observations():
    req = ForecastRequest(series=[{"period": 2020, "value": 10}, {"period": 2021, "value": 12.5}], horizon=0)
    assert req.observations() == [Observation(2020, 10.0), Observation(2021, 12.5)]


@pytest.mark.parametrize("horizon", [-1, 10_000])
def test_forecast_request_rejects_out_of_range_horizon(horizon):
    with pytest.raises(ValidationError):
        ForecastRequest(horizon=horizon)


def test_forecast_request_rejects_non_numeric_value():
    with pytest.raises(ValidationError):
        ForecastRequest(series=[{"period": 2020, "value": "many"}])


def test_scenario_request_bounds():
    with pytest.raises(ValidationError):
        ScenarioRequest(r=0)
    with pytest.raises(ValidationError):
        ScenarioRequest(shock_pct=-150)
    req = ScenarioRequest(r=2.5, shock_pct=10)
    assert req.shock_index is None


def test_synthetic_request_mode():
    assert SyntheticRequest().mode == "random"
    with pytest.raises(ValidationError):
        SyntheticRequest(mode="chaotic")


def test_csv_request_requires_content():
    with pytest.raises(ValidationError):
        CsvImportRequest(content="")


def test_forecast_report_serialises_engine_values():
    req = ForecastRequest(series=[{"period": 2020, "value": 100}, {"period": 2021, "value": 150}], horizon=1)
    payload = json.loads(forecast_service.run_forecast(req).model_dump_json())
    assert isinstance(payload["params"]["r"], float)
    assert payload["insights"]["growth_trend"] in ("exponential", "logistic", "stable", "declining")
    assert len(payload["sensitivity"]["k_sensitivity"]) == 11
    assert payload["predictions"][-1]["actual"] is None


def test_synthetic_series_dump():
    res = SyntheticSeries(mode="random", series=[ObservationModel(period=1, value=2.0)])
    assert res.model_dump() == {"mode": "random", "series": [{"period": 1, "value": 2.0}]}
