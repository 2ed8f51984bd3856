"""
Enumerations for growth trend, stability, risk and confidence labels.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum


class GrowthTrend(str, Enum):
    exponential = "exponential"
    logistic = "logistic"
    stable = "stable"
    declining = "declining"

    @classmethod
    def from_rate(cls, avg_growth: float) -> GrowthTrend:
        from config import settings

        if avg_growth > settings.insight_exponential_growth:
            return cls.exponential
        if avg_growth > settings.insight_logistic_growth:
            return cls.logistic
        if avg_growth < settings.insight_declining_growth:
            return cls.declining
        return cls.stable


class StabilityLevel(str, Enum):
    stable = "stable"
    moderate = "moderate"
    unstable = "unstable"

    @classmethod
    def from_ratio(cls, std_ratio: float) -> StabilityLevel:
        from config import settings

        if std_ratio > settings.insight_unstable_ratio:
            return cls.unstable
        if std_ratio > settings.insight_moderate_ratio:
            return cls.moderate
        return cls.stable

    def score(self) -> float:
        from config import settings

        stable, moderate, unstable = settings.insight_stability_scores
        return {
            StabilityLevel.stable: stable,
            StabilityLevel.moderate: moderate,
            StabilityLevel.unstable: unstable,
        }[self]


class RiskLevel(str, Enum):
    low = "low"
    moderate = "moderate"
    high = "high"

    @classmethod
    def from_capacity_ratio(cls, ratio: float) -> RiskLevel:
        from config import settings

        if ratio > settings.insight_high_risk_ratio:
            return cls.high
        if ratio > settings.insight_moderate_risk_ratio:
            return cls.moderate
        return cls.low


class ConfidenceLevel(str, Enum):
    high = "high"
    medium = "medium"
    low = "low"

    @classmethod
    def from_score(cls, score: float) -> ConfidenceLevel:
        from config import settings

        if score >= settings.insight_high_confidence:
            return cls.high
        if score >= settings.insight_medium_confidence:
            return cls.medium
        return cls.low
