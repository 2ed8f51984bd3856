"""
Value objects shared by every stage of the forecast pipeline. All of them are frozen;
each pipeline run builds fresh instances and nothing is mutated afterwards.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from engine.enums import ConfidenceLevel, GrowthTrend, RiskLevel, StabilityLevel


@dataclass(frozen=True)
class Observation:
    period: int
    value: float


@dataclass(frozen=True)
class ModelParameters:
    r: float
    K: float
    P0: float
    r_original: Optional[float] = None
    K_original: Optional[float] = None
    optimization_applied: bool = False

    def with_r(self, r: float) -> ModelParameters:
        return dataclasses.replace(self, r=r)

    def with_capacity(self, K: float) -> ModelParameters:
        return dataclasses.replace(self, K=K)

    def optimized(self, r: float, K: float) -> ModelParameters:
        return dataclasses.replace(self, r=r, K=K, optimization_applied=True)


@dataclass(frozen=True)
class PredictionPoint:
    period: int
    actual: Optional[float]
    predicted: float
    error: Optional[float] = None
    confidence_low: Optional[float] = None
    confidence_high: Optional[float] = None

    @property
    def is_forecast(self) -> bool:
        return self.actual is None


@dataclass(frozen=True)
class ErrorMetrics:
    mae: float = 0.0
    mse: float = 0.0
    rmse: float = 0.0
    mape: float = 0.0
    r2: float = 0.0


@dataclass(frozen=True)
class PreprocessingResult:
    cleaned: Tuple[Observation, ...]
    normalized: Tuple[Observation, ...]
    smoothed: Tuple[Observation, ...]
    issues: Tuple[str, ...]
    corrections: Tuple[str, ...]
    normalization_factor: float

    @property
    def working(self) -> Tuple[Observation, ...]:
        return self.smoothed if self.smoothed else self.cleaned


@dataclass(frozen=True)
class ValidationResult:
    train_metrics: ErrorMetrics
    test_metrics: ErrorMetrics
    improvement: float
    tuned_params: ModelParameters
    untuned_params: ModelParameters


@dataclass(frozen=True)
class SensitivitySample:
    value: float
    mse: float


@dataclass(frozen=True)
class StableZone:
    r_min: float
    r_max: float
    k_min: float
    k_max: float


@dataclass(frozen=True)
class SensitivityAnalysis:
    r_sensitivity: Tuple[SensitivitySample, ...]
    k_sensitivity: Tuple[SensitivitySample, ...]
    stable_zone: StableZone
    optimal_r: float
    optimal_k: float


@dataclass(frozen=True)
class SaturationAnalysis:
    is_approaching_saturation: bool
    saturation_period: Optional[int]
    saturation_percentage: float
    dynamic_growth_adjustment: float
    explanation: str


@dataclass(frozen=True)
class ConfidenceFactors:
    data_consistency: float
    error_score: float
    stability_score: float
    data_quality: float


@dataclass(frozen=True)
class Insight:
    growth_trend: GrowthTrend
    stability_level: StabilityLevel
    risk_level: RiskLevel
    confidence: ConfidenceLevel
    confidence_score: float
    confidence_factors: ConfidenceFactors
    summary: Tuple[str, ...] = ()
    parameter_explanation: Tuple[str, ...] = ()
    accuracy_explanation: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DatasetStats:
    size: int
    min_period: int
    max_period: int
    min_value: float
    max_value: float
    avg_growth_rate: float


@dataclass(frozen=True)
class QualityReport:
    stats: DatasetStats
    issues: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.issues and not self.warnings


@dataclass(frozen=True)
class PipelineResult:
    predictions: Tuple[PredictionPoint, ...]
    params: ModelParameters
    insights: Insight
    error_metrics: ErrorMetrics
    validation: ValidationResult
    preprocessing: PreprocessingResult
    sensitivity: SensitivityAnalysis
    saturation: SaturationAnalysis
    steps: Tuple[str, ...] = field(default_factory=tuple)


def values_of(series) -> List[float]:
    return [obs.value for obs in series]
