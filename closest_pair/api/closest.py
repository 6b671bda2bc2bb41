"""POST /api/closest-pair — run one algorithm on a submitted point set."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from closest_pair.config import Settings
from closest_pair.dependencies import get_algorithms, get_settings, point_limit
from closest_pair.engine.errors import InvalidInput
from closest_pair.engine.primitives import Point
from closest_pair.engine.registry import AlgorithmRegistry
from closest_pair.models.requests import ClosestPairRequest, PointModel
from closest_pair.models.responses import ClosestPairResponse

router = APIRouter()
logger = logging.getLogger(__name__)


def _to_model(p: Point) -> PointModel:
    return PointModel(x=p.x, y=p.y)


@router.post("/closest-pair", response_model=ClosestPairResponse)
def find_closest_pair(
    req: ClosestPairRequest,
    settings: Settings = Depends(get_settings),
    registry: AlgorithmRegistry = Depends(get_algorithms),
) -> ClosestPairResponse:
    try:
        spec = registry.get(req.algorithm)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    limit = point_limit(spec, settings)
    if len(req.points) > limit:
        logger.warning("Rejected request: %d points for %s (limit %d)", len(req.points), spec.name, limit)
        raise HTTPException(
            status_code=422,
            detail=f"Too many points for {spec.name}: {len(req.points)} > {limit}",
        )

    points = [Point(p.x, p.y) for p in req.points]
    start = time.perf_counter()
    try:
        result = registry.run(req.algorithm, points, bits=req.bits)
    except InvalidInput as e:
        logger.warning("Rejected request: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000

    return ClosestPairResponse(
        first=_to_model(result.first),
        second=_to_model(result.second),
        distance=result.distance,
        algorithm=req.algorithm,
        point_count=len(points),
        processing_time_ms=round(elapsed, 3),
    )
