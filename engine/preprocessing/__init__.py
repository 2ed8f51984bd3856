"""
Preprocessing of raw observation series: cleaning, smoothing, normalisation and quality
assessment ahead of parameter estimation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.preprocessing.cleaning import normalize, preprocess, smooth
from engine.preprocessing.quality import assess, average_growth_rate, describe

__all__ = ["preprocess", "smooth", "normalize", "assess", "describe", "average_growth_rate"]
