"""POST /api/benchmark — time registered algorithms on random point sets."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from closest_pair.config import Settings
from closest_pair.dependencies import get_algorithms, get_settings, point_limit
from closest_pair.engine.benchmark import run_benchmark
from closest_pair.engine.config import BenchmarkConfig
from closest_pair.engine.errors import InvalidInput
from closest_pair.engine.registry import AlgorithmRegistry
from closest_pair.models.requests import BenchmarkRequest
from closest_pair.models.responses import BenchmarkResponse, BenchmarkRow

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/benchmark", response_model=BenchmarkResponse)
def benchmark(
    req: BenchmarkRequest,
    settings: Settings = Depends(get_settings),
    registry: AlgorithmRegistry = Depends(get_algorithms),
) -> BenchmarkResponse:
    too_small = [n for n in req.sizes if n < 2]
    too_large = [n for n in req.sizes if n > settings.max_benchmark_points]
    if too_small or too_large:
        raise HTTPException(
            status_code=422,
            detail=f"Sizes must be between 2 and {settings.max_benchmark_points}",
        )

    try:
        specs = [registry.get(name) for name in req.algorithms or registry.names]
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    largest = max(req.sizes)
    for spec in specs:
        limit = point_limit(spec, settings)
        if largest > limit:
            logger.warning("Rejected benchmark: %s at n=%d (limit %d)", spec.name, largest, limit)
            raise HTTPException(
                status_code=422,
                detail=f"Size {largest} too large for {spec.name} (limit {limit})",
            )

    config = BenchmarkConfig(
        sizes=req.sizes,
        algorithms=req.algorithms,
        coordinate_bits=req.coordinate_bits,
        pack_bits=req.pack_bits,
        seed=req.seed,
        repeats=req.repeats,
        cross_validate=req.cross_validate,
        cross_validate_max_points=min(
            BenchmarkConfig.cross_validate_max_points,
            settings.max_quadratic_points,
        ),
    )
    try:
        results = run_benchmark(config, registry)
    except InvalidInput as e:
        logger.warning("Rejected benchmark: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return BenchmarkResponse(
        results=[
            BenchmarkRow(
                algorithm=r.algorithm,
                n=r.n,
                elapsed_ms=r.elapsed_ms,
                distance=r.distance,
                reference_distance=r.reference_distance,
                matches_reference=r.matches_reference,
            )
            for r in results
        ]
    )
