"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from closest_pair.engine.packing import MAX_PACK_BITS
from closest_pair.engine.primitives import COORDINATE_BITS, COORDINATE_MAX

MAX_BENCHMARK_SIZES = 8


class PointModel(BaseModel):
    x: int = Field(..., ge=0, le=COORDINATE_MAX, description="Unsigned 32-bit x coordinate")
    y: int = Field(..., ge=0, le=COORDINATE_MAX, description="Unsigned 32-bit y coordinate")


class ClosestPairRequest(BaseModel):
    points: list[PointModel] = Field(..., description="Point set to search")
    algorithm: str = Field(default="optimized", description="Registered algorithm name")
    bits: int | None = Field(
        default=None,
        ge=1,
        le=MAX_PACK_BITS,
        description="Packing bit width for bit_shift (defaults to settings.default_pack_bits)",
    )


class BenchmarkRequest(BaseModel):
    sizes: list[int] = Field(
        default_factory=lambda: [1_000],
        min_length=1,
        max_length=MAX_BENCHMARK_SIZES,
        description="Input sizes to time",
    )
    algorithms: list[str] = Field(default_factory=list, description="Empty = all registered")
    coordinate_bits: int = Field(default=31, ge=1, le=COORDINATE_BITS)
    pack_bits: int = Field(default=31, ge=1, le=MAX_PACK_BITS)
    seed: int | None = None
    repeats: int = Field(default=1, ge=1, le=10)
    cross_validate: bool = True
