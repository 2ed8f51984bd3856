"""
Parameter estimation for the logistic model: heuristic starting points and grid-search
optimisation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.estimation.heuristics import default_parameters, estimate_advanced, estimate_basic
from engine.estimation.optimizer import optimize, search_bounds

__all__ = ["default_parameters", "estimate_basic", "estimate_advanced", "optimize", "search_bounds"]
