"""
Explanations of a fitted forecast: categorical insight labels with a confidence score,
and the step-by-step calculation trace.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.insights.explain import confidence_score, dispersion_ratio, generate as generate_insights
from engine.insights.steps import trace

__all__ = ["generate_insights", "confidence_score", "dispersion_ratio", "trace"]
