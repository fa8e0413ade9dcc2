"""Rating-period dispatcher: updates every player once from a batch of keyed matches."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Mapping, Sequence
from typing import TypeVar

from ratings.common import DEFAULT_SETTINGS, Glicko2Settings, Glicko2State, MatchByKey, MatchForPlayer
from ratings.exceptions import UnknownPlayerKeyError
from ratings.glicko2.calculator import update_player

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

PeriodCalculatorFn = Callable[
    [Mapping[K, Glicko2State], Sequence[MatchByKey[K]]],
    dict[K, Glicko2State],
]


class Glicko2PeriodCalculator:
    """Stateless Glicko-2 period calculator bound to one set of settings.

    Every player is updated against the pre-period snapshot of their
    opponents, so the order in which players are processed never matters.
    Nothing is written to the instance, so one calculator can be shared
    across threads.
    """

    def __init__(self, settings: Glicko2Settings = DEFAULT_SETTINGS) -> None:
        self.settings = settings

    def _collect_matches(
        self,
        players: Mapping[K, Glicko2State],
        matches: Sequence[MatchByKey[K]],
    ) -> dict[K, list[MatchForPlayer]]:
        matches_by_key: dict[K, list[MatchForPlayer]] = {}
        for index, match in enumerate(matches):
            for key in (match.player1_key, match.player2_key):
                if key not in players:
                    raise UnknownPlayerKeyError(key, index)

            # The same game is the mirror result for player 2.
            matches_by_key.setdefault(match.player1_key, []).append(
                MatchForPlayer(opponent=players[match.player2_key], result=match.result)
            )
            matches_by_key.setdefault(match.player2_key, []).append(
                MatchForPlayer(opponent=players[match.player1_key], result=1.0 - match.result)
            )
        return matches_by_key

    def process_period(
        self,
        players: Mapping[K, Glicko2State],
        matches: Sequence[MatchByKey[K]],
    ) -> dict[K, Glicko2State]:
        """Return post-period states for exactly the keys in ``players``.

        Raises:
            UnknownPlayerKeyError: a match references a key missing from ``players``.
            InputShapeError, NonConvergenceError: propagated from the per-player update.
        """
        matches_by_key = self._collect_matches(players, matches)

        updated_players: dict[K, Glicko2State] = {}
        for key, player in players.items():
            updated_players[key] = update_player(
                player,
                matches_by_key.get(key, []),
                self.settings,
            )

        logger.debug(
            "processed period players=%d matches=%d idle_players=%d",
            len(updated_players),
            len(matches),
            len(updated_players) - len(matches_by_key),
        )
        return updated_players


def period_calculator_with_settings(settings: Glicko2Settings) -> PeriodCalculatorFn:
    """Return a period function ``(players, matches) -> players`` bound to ``settings``."""
    return Glicko2PeriodCalculator(settings).process_period


def default_period_calculator() -> PeriodCalculatorFn:
    return period_calculator_with_settings(DEFAULT_SETTINGS)


__all__ = [
    "Glicko2PeriodCalculator",
    "PeriodCalculatorFn",
    "default_period_calculator",
    "period_calculator_with_settings",
]
