"""
Response models for API endpoints, mirroring the engine's value objects.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel

from engine.enums import ConfidenceLevel, GrowthTrend, RiskLevel, StabilityLevel


class ObservationModel(BaseModel):

    period: int
    value: float


class ModelParametersModel(BaseModel):

    r: float
    K: float
    P0: float
    r_original: Optional[float] = None
    K_original: Optional[float] = None
    optimization_applied: bool = False


class PredictionPointModel(BaseModel):

    period: int
    actual: Optional[float] = None
    predicted: float
    error: Optional[float] = None
    confidence_low: Optional[float] = None
    confidence_high: Optional[float] = None


class ErrorMetricsModel(BaseModel):

    mae: float
    mse: float
    rmse: float
    mape: float
    r2: float


class PreprocessingModel(BaseModel):

    cleaned: List[ObservationModel]
    normalized: List[ObservationModel]
    smoothed: List[ObservationModel]
    issues: List[str]
    corrections: List[str]
    normalization_factor: float


class ValidationModel(BaseModel):

    train_metrics: ErrorMetricsModel
    test_metrics: ErrorMetricsModel
    improvement: float
    tuned_params: ModelParametersModel
    untuned_params: ModelParametersModel


class SensitivitySampleModel(BaseModel):

    value: float
    mse: float


class StableZoneModel(BaseModel):

    r_min: float
    r_max: float
    k_min: float
    k_max: float


class SensitivityModel(BaseModel):

    r_sensitivity: List[SensitivitySampleModel]
    k_sensitivity: List[SensitivitySampleModel]
    stable_zone: StableZoneModel
    optimal_r: float
    optimal_k: float


class SaturationModel(BaseModel):

    is_approaching_saturation: bool
    saturation_period: Optional[int] = None
    saturation_percentage: float
    dynamic_growth_adjustment: float
    explanation: str


class ConfidenceFactorsModel(BaseModel):

    data_consistency: float
    error_score: float
    stability_score: float
    data_quality: float


class InsightModel(BaseModel):

    growth_trend: GrowthTrend
    stability_level: StabilityLevel
    risk_level: RiskLevel
    confidence: ConfidenceLevel
    confidence_score: float
    confidence_factors: ConfidenceFactorsModel
    summary: List[str]
    parameter_explanation: List[str]
    accuracy_explanation: List[str]


class ForecastReport(BaseModel):

    predictions: List[PredictionPointModel]
    params: ModelParametersModel
    insights: InsightModel
    error_metrics: ErrorMetricsModel
    validation: ValidationModel
    preprocessing: PreprocessingModel
    sensitivity: SensitivityModel
    saturation: SaturationModel
    steps: List[str]


class DatasetStatsModel(BaseModel):

    size: int
    min_period: int
    max_period: int
    min_value: float
    max_value: float
    avg_growth_rate: float


class QualityReportModel(BaseModel):

    stats: DatasetStatsModel
    issues: List[str]
    warnings: List[str]


class ImportedSeries(BaseModel):

    series: List[ObservationModel]
    quality: QualityReportModel


class ScenarioReport(BaseModel):

    params: ModelParametersModel
    base_params: ModelParametersModel
    predictions: List[PredictionPointModel]
    r_change_pct: float
    shock_pct: float
    shock_index: int


class SyntheticSeries(BaseModel):

    mode: str
    series: List[ObservationModel]
