"""Shared protocols for rating-period calculators."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from ratings.common import Glicko2State, MatchByKey

K = TypeVar("K", bound=Hashable)


@runtime_checkable
class PeriodCalculator(Protocol):
    """Contract every period calculator satisfies."""

    def process_period(
        self,
        players: Mapping[K, Glicko2State],
        matches: Sequence[MatchByKey[K]],
    ) -> dict[K, Glicko2State]: ...


__all__ = ["PeriodCalculator"]
