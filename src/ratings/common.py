"""Shared types for the Glicko-2 rating library."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from ratings.constants import (
    GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE,
    GLICKO2_DEFAULT_MAX_ITERATIONS,
    GLICKO2_DEFAULT_SYSTEM_CONSTANT,
)

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class GlickoState:
    """A player on the original Glicko scale (rating centered at 1500)."""

    rating: float
    deviation: float


@dataclass(frozen=True)
class Glicko2State:
    """A player on the internal Glicko-2 scale (rating centered at 0)."""

    rating: float
    deviation: float
    volatility: float


@dataclass(frozen=True)
class Glicko2Settings:
    """Constants used by one Glicko-2 environment."""

    system_constant: float = GLICKO2_DEFAULT_SYSTEM_CONSTANT
    convergence_tolerance: float = GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE
    max_iterations: int = GLICKO2_DEFAULT_MAX_ITERATIONS

    def __post_init__(self) -> None:
        if self.system_constant <= 0.0:
            raise ValueError("system_constant must be > 0")
        if self.convergence_tolerance <= 0.0:
            raise ValueError("convergence_tolerance must be > 0")
        if self.max_iterations < 1:
            raise ValueError("max_iterations must be >= 1")


@dataclass(frozen=True)
class MatchForPlayer:
    """One-sided view of a game: the opponent faced and the player's result."""

    opponent: Glicko2State
    result: float


@dataclass(frozen=True)
class MatchByKey(Generic[K]):
    """A game between two keyed players, scored from player 1's perspective."""

    player1_key: K
    player2_key: K
    result: float

    def inverted(self) -> MatchByKey[K]:
        """Return the same game seen from player 2's side."""
        return MatchByKey(
            player1_key=self.player2_key,
            player2_key=self.player1_key,
            result=1.0 - self.result,
        )


DEFAULT_SETTINGS = Glicko2Settings()

__all__ = [
    "DEFAULT_SETTINGS",
    "Glicko2Settings",
    "Glicko2State",
    "GlickoState",
    "MatchByKey",
    "MatchForPlayer",
]
