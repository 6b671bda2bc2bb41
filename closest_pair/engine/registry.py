"""Algorithm registry — every closest-pair strategy is a plain function registered via decorator.

Usage:
    @algorithm(name="brute_force", complexity="O(n^2)", exact=True)
    def closest_pair_brute_force(points: Sequence[Point]) -> ClosestPair:
        ...

Callers that only know an algorithm by name (the API, the benchmark harness)
go through ``get_registry().run(name, points, bits=...)``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from closest_pair.engine.errors import InvalidInput

if TYPE_CHECKING:
    from closest_pair.engine.primitives import ClosestPair, Point

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmSpec:
    name: str
    fn: Callable[..., "ClosestPair"]
    complexity: str = ""
    exact: bool = True
    takes_bits: bool = False
    description: str = ""


class AlgorithmRegistry:
    """Singleton registry of all closest-pair algorithms."""

    def __init__(self) -> None:
        self._algorithms: dict[str, AlgorithmSpec] = {}

    def register(self, spec: AlgorithmSpec) -> None:
        if spec.name in self._algorithms:
            raise ValueError(f"Duplicate algorithm name: {spec.name}")
        self._algorithms[spec.name] = spec
        logger.debug("Registered algorithm %s (%s)", spec.name, spec.complexity)

    def get(self, name: str) -> AlgorithmSpec:
        try:
            return self._algorithms[name]
        except KeyError:
            known = ", ".join(self.names)
            raise InvalidInput(f"Unknown algorithm {name!r} (known: {known})") from None

    def all(self) -> list[AlgorithmSpec]:
        return sorted(self._algorithms.values(), key=lambda s: s.name)

    @property
    def names(self) -> list[str]:
        return sorted(self._algorithms)

    @property
    def count(self) -> int:
        return len(self._algorithms)

    def run(self, name: str, points: Sequence["Point"], bits: int | None = None) -> "ClosestPair":
        """Dispatch to a registered algorithm. ``bits`` only reaches algorithms that take it."""
        spec = self.get(name)
        if spec.takes_bits:
            if bits is None:
                from closest_pair.config import settings

                bits = settings.default_pack_bits
            return spec.fn(points, bits)
        return spec.fn(points)


# Module-level singleton
_registry = AlgorithmRegistry()


def get_registry() -> AlgorithmRegistry:
    return _registry


def algorithm(
    *,
    name: str,
    complexity: str = "",
    exact: bool = True,
    takes_bits: bool = False,
    description: str = "",
):
    """Decorator to register a closest-pair function."""

    def decorator(fn: Callable[..., "ClosestPair"]):
        spec = AlgorithmSpec(
            name=name,
            fn=fn,
            complexity=complexity,
            exact=exact,
            takes_bits=takes_bits,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
