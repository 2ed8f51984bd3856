from __future__ import annotations

from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from config import settings
from engine.models import Observation


class ObservationIn(BaseModel):
    period: int
    value: float

    def to_observation(self) -> Observation:
        return Observation(period=self.period, value=self.value)


class ForecastRequest(BaseModel):
    series: List[ObservationIn] = Field(default_factory=list, max_length=settings.max_series_length)
    horizon: int = Field(default=5, ge=0, le=settings.max_horizon)

    def observations(self) -> List[Observation]:
        return [o.to_observation() for o in self.series]


class ScenarioRequest(ForecastRequest):
    r: Optional[float] = Field(default=None, gt=0.0, le=settings.r_max)
    shock_pct: float = Field(default=0.0, ge=-100.0, le=1000.0)
    shock_index: Optional[int] = Field(default=None, ge=0)


class SyntheticRequest(BaseModel):
    mode: Literal["random", "logistic"] = "random"
    start_period: int = 2015
    count: int = Field(default=15, ge=1, le=settings.max_series_length)
    seed: Optional[int] = None
    p0: float = Field(default=1000.0, gt=0.0)
    r: float = Field(default=1.5, gt=0.0, le=settings.r_max)
    K: float = Field(default=10000.0, gt=0.0)


class CsvImportRequest(BaseModel):
    content: str = Field(min_length=1)
