"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from closest_pair.models.requests import PointModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    algorithms_registered: int = 0


class AlgorithmInfo(BaseModel):
    name: str
    complexity: str = ""
    exact: bool = True
    takes_bits: bool = False
    description: str = ""


class ClosestPairResponse(BaseModel):
    first: PointModel
    second: PointModel
    distance: float
    algorithm: str
    point_count: int = 0
    processing_time_ms: float = 0.0


class BenchmarkRow(BaseModel):
    algorithm: str
    n: int
    elapsed_ms: float
    distance: float
    reference_distance: float | None = None
    matches_reference: bool | None = None


class BenchmarkResponse(BaseModel):
    results: list[BenchmarkRow] = Field(default_factory=list)
