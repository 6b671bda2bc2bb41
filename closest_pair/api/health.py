"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from closest_pair import __version__
from closest_pair.dependencies import get_algorithms
from closest_pair.engine.registry import AlgorithmRegistry
from closest_pair.models.responses import AlgorithmInfo, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: AlgorithmRegistry = Depends(get_algorithms)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        algorithms_registered=registry.count,
    )


@router.get("/algorithms", response_model=list[AlgorithmInfo])
async def algorithms(registry: AlgorithmRegistry = Depends(get_algorithms)) -> list[AlgorithmInfo]:
    return [
        AlgorithmInfo(
            name=spec.name,
            complexity=spec.complexity,
            exact=spec.exact,
            takes_bits=spec.takes_bits,
            description=spec.description,
        )
        for spec in registry.all()
    ]
