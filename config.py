"""
Constants and configuration for the logistic forecast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Tuple

from pydantic_settings import BaseSettings


LOGISTIC_LOG_LEVEL: str = os.getenv("LOGISTIC_LOG_LEVEL", "INFO").upper()
LOGISTIC_HOST: str = os.getenv("LOGISTIC_HOST", "0.0.0.0")
LOGISTIC_PORT: int = int(os.getenv("LOGISTIC_PORT", "4323"))
LOGISTIC_MAX_HORIZON: int = int(os.getenv("LOGISTIC_MAX_HORIZON", "200"))
LOGISTIC_MAX_SERIES_LENGTH: int = int(os.getenv("LOGISTIC_MAX_SERIES_LENGTH", "5000"))

NO_DATA_ISSUE = "No data provided."
CSV_PLACEHOLDER = "N/A"

# column headers of the delimited export; kept stable for previously exported files
EXPORT_HEADERS: List[str] = [
    "Period",
    "Original Value",
    "Predicted Value",
    "Error",
    "Confidence Low",
    "Confidence High",
    "Growth Rate (r)",
    "Carrying Capacity (K)",
]

# accepted (case-insensitive) column names when importing a delimited series
IMPORT_PERIOD_COLUMNS: Tuple[str, ...] = ("period", "year")
IMPORT_VALUE_COLUMNS: Tuple[str, ...] = ("value", "population")


class Settings(BaseSettings):
    log_level: str = LOGISTIC_LOG_LEVEL
    host: str = LOGISTIC_HOST
    port: int = LOGISTIC_PORT

    # request limits enforced at the API edge
    max_horizon: int = LOGISTIC_MAX_HORIZON
    max_series_length: int = LOGISTIC_MAX_SERIES_LENGTH

    # fallback parameters when fewer than two observations exist
    default_r: float = 1.5
    default_capacity: float = 10000.0
    default_p0: float = 1000.0
    default_capacity_multiplier: float = 10.0
    default_start_period: int = 2020

    # growth-rate clamp applied by both estimators and the optimizer
    r_min: float = 0.5
    r_max: float = 4.0

    # basic estimator capacity: max(observed_max * a, P0 * b)
    basic_capacity_max_factor: float = 1.5
    basic_capacity_p0_factor: float = 5.0

    # advanced estimator
    advanced_time_weight: float = 1.1
    advanced_default_recent_growth: float = 0.05
    advanced_saturated_growth: float = 0.02
    advanced_saturated_last_ratio: float = 0.9
    advanced_saturated_factor: float = 1.1
    advanced_slowing_growth: float = 0.05
    advanced_slowing_factor: float = 1.3
    advanced_active_base: float = 1.5
    advanced_active_growth_scale: float = 5.0
    advanced_capacity_p0_floor: float = 2.0

    # grid search
    optimizer_iterations: int = 100
    optimizer_r_low: float = 0.5
    optimizer_r_high: float = 1.5
    optimizer_k_low: float = 0.5
    optimizer_k_high: float = 2.0
    optimizer_k_p0_floor: float = 1.5

    # rolling validation
    validation_train_ratio: float = 0.7
    validation_min_train: int = 2
    validation_min_test: int = 1

    # sensitivity sweeps: (low multiplier, high multiplier, sample count)
    sensitivity_r_sweep: Tuple[float, float, int] = (0.5, 1.5, 11)
    sensitivity_k_sweep: Tuple[float, float, int] = (0.5, 2.0, 11)
    sensitivity_stable_factor: float = 2.0

    # saturation: (percentage cutoff, dampening multiplier), checked in order
    saturation_dampening: List[Tuple[float, float]] = [
        (90.0, 0.5),
        (80.0, 0.7),
        (70.0, 0.85),
    ]
    saturation_approaching_pct: float = 70.0
    saturation_moderate_pct: float = 50.0
    saturation_near_pct: float = 90.0
    saturation_reached_ratio: float = 0.95

    # prediction generator
    prediction_overshoot_cap: float = 1.05
    confidence_base: float = 0.10
    confidence_growth_per_period: float = 0.02

    # insight classification
    insight_exponential_growth: float = 0.05
    insight_logistic_growth: float = 0.01
    insight_declining_growth: float = -0.01
    insight_unstable_ratio: float = 0.30
    insight_moderate_ratio: float = 0.10
    insight_high_risk_ratio: float = 0.90
    insight_moderate_risk_ratio: float = 0.70
    insight_confidence_weights: Tuple[float, float, float, float] = (0.25, 0.35, 0.2, 0.2)
    insight_stability_scores: Tuple[float, float, float] = (90.0, 60.0, 30.0)
    insight_quality_per_point: float = 10.0
    insight_high_confidence: float = 70.0
    insight_medium_confidence: float = 50.0

    # calculation trace
    trace_steps: int = 3

    # data quality assessment
    quality_min_points: int = 3
    quality_unusual_growth: float = 0.5

    # synthetic series generator
    synthetic_start_low: int = 1000
    synthetic_start_high: int = 6000
    synthetic_growth_low: float = 0.02
    synthetic_growth_span: float = 0.08
    synthetic_capacity_low: float = 5.0
    synthetic_capacity_span: float = 10.0
    synthetic_noise: float = 0.02
    synthetic_floor: float = 100.0

    model_config = {
        "env_prefix": "LOGISTIC_",
        "extra": "ignore",
    }


settings = Settings()
