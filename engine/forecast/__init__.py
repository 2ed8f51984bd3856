"""
Forecast generation for the logistic model: forward predictions with confidence bounds,
saturation analysis and growth dampening, and what-if scenarios.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.predictions import confidence_halfwidth, generate as generate_predictions
from engine.forecast.saturation import analyze as analyze_saturation, dampening_factor
from engine.forecast.scenario import Scenario, simulate as simulate_scenario

__all__ = [
    "generate_predictions",
    "confidence_halfwidth",
    "analyze_saturation",
    "dampening_factor",
    "Scenario",
    "simulate_scenario",
]
