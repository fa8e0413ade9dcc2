"""Conversions between the Glicko scale and the internal Glicko-2 scale."""

from __future__ import annotations

from ratings.common import Glicko2State, GlickoState
from ratings.constants import (
    GLICKO2_DEFAULT_PLAYER_VOLATILITY,
    GLICKO2_SCALE,
    GLICKO_DEFAULT_PLAYER_DEVIATION,
    GLICKO_DEFAULT_PLAYER_RATING,
)


def to_glicko2_rating(rating: float) -> float:
    return (rating - GLICKO_DEFAULT_PLAYER_RATING) / GLICKO2_SCALE


def to_glicko_rating(mu: float) -> float:
    return (mu * GLICKO2_SCALE) + GLICKO_DEFAULT_PLAYER_RATING


def to_glicko2_deviation(rd: float) -> float:
    return rd / GLICKO2_SCALE


def to_glicko_deviation(phi: float) -> float:
    return phi * GLICKO2_SCALE


def to_glicko2_state(state: GlickoState, volatility: float) -> Glicko2State:
    """Convert a Glicko-scale player, supplying the volatility it lacks."""
    return Glicko2State(
        rating=to_glicko2_rating(state.rating),
        deviation=to_glicko2_deviation(state.deviation),
        volatility=volatility,
    )


def to_default_glicko2_state(state: GlickoState) -> Glicko2State:
    return to_glicko2_state(state, GLICKO2_DEFAULT_PLAYER_VOLATILITY)


def glicko2_state_from_glicko(
    rating: float,
    deviation: float,
    volatility: float = GLICKO2_DEFAULT_PLAYER_VOLATILITY,
) -> Glicko2State:
    return to_glicko2_state(GlickoState(rating=rating, deviation=deviation), volatility)


def to_glicko_state(state: Glicko2State) -> GlickoState:
    """Convert back to the Glicko scale. Volatility has no Glicko equivalent and is dropped."""
    return GlickoState(
        rating=to_glicko_rating(state.rating),
        deviation=to_glicko_deviation(state.deviation),
    )


def new_default_glicko_state() -> GlickoState:
    """Unrated player on the Glicko scale, as described in Step 1."""
    return GlickoState(
        rating=GLICKO_DEFAULT_PLAYER_RATING,
        deviation=GLICKO_DEFAULT_PLAYER_DEVIATION,
    )


def new_default_glicko2_state() -> Glicko2State:
    """Unrated player on the Glicko-2 scale, using the default volatility."""
    return to_default_glicko2_state(new_default_glicko_state())


__all__ = [
    "glicko2_state_from_glicko",
    "new_default_glicko2_state",
    "new_default_glicko_state",
    "to_default_glicko2_state",
    "to_glicko2_deviation",
    "to_glicko2_rating",
    "to_glicko2_state",
    "to_glicko_deviation",
    "to_glicko_rating",
    "to_glicko_state",
]
