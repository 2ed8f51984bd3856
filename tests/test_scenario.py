"""
Test cases for what-if scenarios.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from engine.forecast import generate_predictions, simulate_scenario
from engine.models import ModelParameters
from engine.recurrence import round_half_up
from conftest import make_series

SERIES = make_series((2000, 100), (2001, 150), (2002, 220))
PARAMS = ModelParameters(r=1.6, K=1000.0, P0=100.0)


def test_growth_override():
    sc = simulate_scenario(SERIES, PARAMS, 4, r=2.0)
    assert sc.params.r == 2.0
    assert sc.params.K == PARAMS.K
    assert sc.r_change_pct == pytest.approx(25)
    assert list(sc.predictions) == generate_predictions(SERIES, PARAMS.with_r(2.0), 4)


def test_no_override_is_baseline():
    sc = simulate_scenario(SERIES, PARAMS, 4)
    assert sc.params == PARAMS
    assert sc.r_change_pct == 0
    assert sc.shock_index == 2
    assert list(sc.predictions) == generate_predictions(SERIES, PARAMS, 4)


def test_shock_applies_at_index():
    base = generate_predictions(SERIES, PARAMS, 6)
    sc = simulate_scenario(SERIES, PARAMS, 6, shock_pct=-50, shock_index=4)
    assert sc.predictions[4].predicted == round_half_up(base[4].predicted * 0.5)
    others = [p for i, p in enumerate(sc.predictions) if i != 4]
    assert others == [p for i, p in enumerate(base) if i != 4]


def test_shock_out_of_range_is_ignored():
    sc = simulate_scenario(SERIES, PARAMS, 2, shock_pct=30, shock_index=50)
    assert list(sc.predictions) == generate_predictions(SERIES, PARAMS, 2)
