"""Exception hierarchy for the Glicko-2 rating library.

Every error carries a human-readable ``message`` and a ``details`` dict with
the values that caused it, so callers can log the context without parsing
the message.
"""

from __future__ import annotations

from typing import Any


class Glicko2Error(Exception):
    """Base exception for all rating errors.

    Attributes:
        message: Human-readable error description
        details: Additional context for logging/debugging
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InputShapeError(Glicko2Error, ValueError):
    """Raised when opponent ratings, deviations and outcomes differ in length."""

    def __init__(self, ratings_count: int, deviations_count: int, outcomes_count: int) -> None:
        super().__init__(
            message=(
                "opponent ratings, deviations and game outcomes must be the same length "
                f"(got {ratings_count}, {deviations_count}, {outcomes_count})"
            ),
            details={
                "ratings_count": ratings_count,
                "deviations_count": deviations_count,
                "outcomes_count": outcomes_count,
            },
        )


class UnknownPlayerKeyError(Glicko2Error, LookupError):
    """Raised when a match references a player key missing from the period."""

    def __init__(self, key: Any, match_index: int) -> None:
        super().__init__(
            message=f"match #{match_index} references unknown player key {key!r}",
            details={"key": key, "match_index": match_index},
        )


class NonConvergenceError(Glicko2Error, RuntimeError):
    """Raised when the volatility solver exceeds its iteration cap."""

    def __init__(self, stage: str, max_iterations: int) -> None:
        super().__init__(
            message=f"Glicko-2 volatility solve failed to {stage} within {max_iterations} iterations.",
            details={"stage": stage, "max_iterations": max_iterations},
        )


__all__ = [
    "Glicko2Error",
    "InputShapeError",
    "NonConvergenceError",
    "UnknownPlayerKeyError",
]
