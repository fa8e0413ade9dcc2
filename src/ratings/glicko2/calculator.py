"""Per-player Glicko-2 update for one rating period.

Implements Steps 3-7 of Glickman's paper
(https://www.glicko.net/glicko/glicko2.pdf). All values are on the internal
Glicko-2 scale; use ``ratings.glicko2.conversions`` to move to and from the
Glicko scale.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from math import exp, log, sqrt

from ratings.common import DEFAULT_SETTINGS, Glicko2Settings, Glicko2State, MatchForPlayer
from ratings.constants import PI_SQUARED
from ratings.exceptions import InputShapeError, NonConvergenceError

logger = logging.getLogger(__name__)

RawPlayerUpdater = Callable[
    [float, float, float, Sequence[float], Sequence[float], Sequence[float]],
    Glicko2State,
]
PlayerUpdater = Callable[[Glicko2State, Sequence[Glicko2State], Sequence[float]], Glicko2State]
MatchPlayerUpdater = Callable[[Glicko2State, Sequence[MatchForPlayer]], Glicko2State]


def _g(phi: float) -> float:
    return 1.0 / sqrt(1.0 + ((3.0 * (phi**2)) / PI_SQUARED))


def _expected(mu: float, opp_mu: float, opp_phi: float) -> float:
    exponent = -_g(opp_phi) * (mu - opp_mu)
    if exponent >= 0.0:
        exp_term = exp(-exponent)
        return exp_term / (1.0 + exp_term)
    exp_term = exp(exponent)
    return 1.0 / (1.0 + exp_term)


def calculate_expected_score(
    *,
    rating: float,
    opponent_rating: float,
    opponent_deviation: float,
) -> float:
    """Expected score of a player against one opponent, on the Glicko-2 scale."""
    return _expected(rating, opponent_rating, opponent_deviation)


def _pre_rating_deviation(phi: float, sigma: float) -> float:
    return sqrt((phi**2) + (sigma**2))


def compute_new_volatility(
    *,
    phi: float,
    sigma: float,
    delta: float,
    v: float,
    settings: Glicko2Settings = DEFAULT_SETTINGS,
) -> float:
    """Step 5: find the post-period volatility with the Illinois algorithm.

    ``f`` is not monotonic, so the bracket is chosen first (Step 5.2) and then
    narrowed with regula falsi, halving the stale endpoint's value whenever
    the same side is kept twice.
    """
    tau = settings.system_constant
    epsilon = settings.convergence_tolerance
    max_iterations = settings.max_iterations

    a = log(sigma**2)
    delta_sq = delta**2
    phi_sq = phi**2
    tau_sq = tau**2

    def f(x: float) -> float:
        ex = exp(x)
        numerator = ex * (delta_sq - phi_sq - v - ex)
        denominator = 2.0 * (phi_sq + v + ex) ** 2
        return (numerator / denominator) - ((x - a) / tau_sq)

    a_value = a
    if delta_sq > (phi_sq + v):
        b_value = log(delta_sq - phi_sq - v)
    else:
        k = 1
        while f(a - (k * tau)) < 0.0:
            k += 1
            if k > max_iterations:
                raise NonConvergenceError("bracket root", max_iterations)
        b_value = a - (k * tau)

    f_a = f(a_value)
    f_b = f(b_value)
    iterations = 0
    while abs(b_value - a_value) > epsilon:
        iterations += 1
        if iterations > max_iterations:
            raise NonConvergenceError("converge", max_iterations)
        if f_b == f_a:
            c_value = (a_value + b_value) / 2.0
        else:
            c_value = a_value + (((a_value - b_value) * f_a) / (f_b - f_a))
        f_c = f(c_value)
        if f_c * f_b <= 0.0:
            a_value = b_value
            f_a = f_b
        else:
            f_a /= 2.0
        b_value = c_value
        f_b = f_c

    logger.debug("volatility solve converged after %d iterations", iterations)
    return exp(a_value / 2.0)


def update_player_from_matches(
    rating: float,
    deviation: float,
    volatility: float,
    opponent_ratings: Sequence[float],
    opponent_deviations: Sequence[float],
    outcomes: Sequence[float],
    settings: Glicko2Settings = DEFAULT_SETTINGS,
) -> Glicko2State:
    """Update one player for one Glicko-2 rating period.

    Opponents are matched to outcomes by position, so all three sequences
    must have the same length. A player with no games keeps rating and
    volatility while the deviation grows to ``sqrt(phi**2 + sigma**2)``.

    Raises:
        InputShapeError: the opponent/outcome sequences differ in length.
        NonConvergenceError: the volatility solve exceeded ``settings.max_iterations``.
    """
    if not (len(opponent_ratings) == len(opponent_deviations) == len(outcomes)):
        raise InputShapeError(len(opponent_ratings), len(opponent_deviations), len(outcomes))

    if not outcomes:
        return Glicko2State(
            rating=rating,
            deviation=_pre_rating_deviation(deviation, volatility),
            volatility=volatility,
        )

    mu = rating
    phi = deviation

    g_terms: list[float] = []
    e_terms: list[float] = []
    for opp_mu, opp_phi in zip(opponent_ratings, opponent_deviations):
        g_terms.append(_g(opp_phi))
        e_terms.append(_expected(mu, opp_mu, opp_phi))

    # Step 3
    v_inverse = 0.0
    for g_term, expected in zip(g_terms, e_terms):
        v_inverse += (g_term**2) * expected * (1.0 - expected)

    # Step 4
    improvement_sum = 0.0
    for g_term, expected, score in zip(g_terms, e_terms, outcomes):
        improvement_sum += g_term * (score - expected)

    if v_inverse <= 0.0:
        # Every expected score saturated to 0 or 1, so v is infinite: volatility
        # is kept, phi' reduces to phi* and the rating still moves.
        logger.debug("expected scores saturated (v_inverse=%r); keeping volatility", v_inverse)
        phi_star = _pre_rating_deviation(phi, volatility)
        return Glicko2State(
            rating=mu + (phi_star**2) * improvement_sum,
            deviation=phi_star,
            volatility=volatility,
        )
    v = 1.0 / v_inverse
    delta = v * improvement_sum

    # Step 5
    sigma_prime = compute_new_volatility(
        phi=phi,
        sigma=volatility,
        delta=delta,
        v=v,
        settings=settings,
    )

    # Steps 6 and 7
    phi_star = _pre_rating_deviation(phi, sigma_prime)
    phi_prime = 1.0 / sqrt((1.0 / (phi_star**2)) + (1.0 / v))
    mu_prime = mu + (phi_prime**2) * improvement_sum

    return Glicko2State(rating=mu_prime, deviation=phi_prime, volatility=sigma_prime)


def update_player(
    player: Glicko2State,
    matches: Sequence[MatchForPlayer],
    settings: Glicko2Settings = DEFAULT_SETTINGS,
) -> Glicko2State:
    """Update one player from one-sided match records."""
    return update_player_from_matches(
        player.rating,
        player.deviation,
        player.volatility,
        [match.opponent.rating for match in matches],
        [match.opponent.deviation for match in matches],
        [match.result for match in matches],
        settings,
    )


def raw_player_updater_with_settings(settings: Glicko2Settings) -> RawPlayerUpdater:
    """Return an updater over raw (rating, deviation, volatility) values bound to ``settings``."""

    def updater(
        rating: float,
        deviation: float,
        volatility: float,
        opponent_ratings: Sequence[float],
        opponent_deviations: Sequence[float],
        outcomes: Sequence[float],
    ) -> Glicko2State:
        return update_player_from_matches(
            rating,
            deviation,
            volatility,
            opponent_ratings,
            opponent_deviations,
            outcomes,
            settings,
        )

    return updater


def raw_player_updater_with_default_settings() -> RawPlayerUpdater:
    return raw_player_updater_with_settings(DEFAULT_SETTINGS)


def player_updater_with_settings(settings: Glicko2Settings) -> PlayerUpdater:
    """Return an updater taking opponents as ``Glicko2State`` values and outcomes by position."""
    raw_updater = raw_player_updater_with_settings(settings)

    def updater(
        player: Glicko2State,
        opponents: Sequence[Glicko2State],
        outcomes: Sequence[float],
    ) -> Glicko2State:
        return raw_updater(
            player.rating,
            player.deviation,
            player.volatility,
            [opponent.rating for opponent in opponents],
            [opponent.deviation for opponent in opponents],
            outcomes,
        )

    return updater


def player_updater_with_default_settings() -> PlayerUpdater:
    return player_updater_with_settings(DEFAULT_SETTINGS)


def match_player_updater_with_settings(settings: Glicko2Settings) -> MatchPlayerUpdater:
    """Return an updater taking ``MatchForPlayer`` records."""

    def updater(player: Glicko2State, matches: Sequence[MatchForPlayer]) -> Glicko2State:
        return update_player(player, matches, settings)

    return updater


__all__ = [
    "MatchPlayerUpdater",
    "PlayerUpdater",
    "RawPlayerUpdater",
    "calculate_expected_score",
    "compute_new_volatility",
    "match_player_updater_with_settings",
    "player_updater_with_default_settings",
    "player_updater_with_settings",
    "raw_player_updater_with_default_settings",
    "raw_player_updater_with_settings",
    "update_player",
    "update_player_from_matches",
]
