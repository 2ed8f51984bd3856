"""
Model evaluation: error metrics, rolling train/test validation and parameter sensitivity.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.evaluation.metrics import compute as compute_metrics
from engine.evaluation.validation import validate
from engine.evaluation.sensitivity import analyze as analyze_sensitivity

__all__ = ["compute_metrics", "validate", "analyze_sensitivity"]
