"""Engine error taxonomy."""

from __future__ import annotations


class ClosestPairError(Exception):
    """Base class for every error raised by the closest-pair engine."""


class InvalidInput(ClosestPairError, ValueError):
    """Input rejected before any computation (too few points, bad coordinates, bad bit width)."""


class InternalInvariantViolation(ClosestPairError, RuntimeError):
    """A search finished without finding any finite minimum distance."""


MIN_POINTS = 2


def require_pair(points) -> None:
    if len(points) == 0:
        raise InvalidInput("Cannot find closest pair with empty input")
    if len(points) < MIN_POINTS:
        raise InvalidInput("Need at least two points to find closest pair")
