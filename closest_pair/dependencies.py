"""FastAPI dependency injection."""

from __future__ import annotations

from closest_pair.config import Settings, settings
from closest_pair.engine.registry import AlgorithmRegistry, AlgorithmSpec, get_registry

QUADRATIC = "O(n^2)"


def get_settings() -> Settings:
    return settings


def get_algorithms() -> AlgorithmRegistry:
    return get_registry()


def point_limit(spec: AlgorithmSpec, settings: Settings) -> int:
    """Largest input one request may hand to ``spec``."""
    if spec.complexity == QUADRATIC:
        return min(settings.max_quadratic_points, settings.max_request_points)
    return settings.max_request_points
