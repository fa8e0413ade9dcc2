"""Glicko-2 rating library."""

from ratings.common import (
    DEFAULT_SETTINGS,
    Glicko2Settings,
    Glicko2State,
    GlickoState,
    MatchByKey,
    MatchForPlayer,
)
from ratings.exceptions import (
    Glicko2Error,
    InputShapeError,
    NonConvergenceError,
    UnknownPlayerKeyError,
)
from ratings.protocol import PeriodCalculator

__all__ = [
    "DEFAULT_SETTINGS",
    "Glicko2Error",
    "Glicko2Settings",
    "Glicko2State",
    "GlickoState",
    "InputShapeError",
    "MatchByKey",
    "MatchForPlayer",
    "NonConvergenceError",
    "PeriodCalculator",
    "UnknownPlayerKeyError",
]
