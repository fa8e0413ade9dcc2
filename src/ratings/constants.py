"""Glicko and Glicko-2 constants.

Default player values follow Step 1 of Glickman's paper
(https://www.glicko.net/glicko/glicko2.pdf).
"""

from __future__ import annotations

from math import pi
from typing import Final

# Converts between the Glicko scale and the Glicko-2 scale.
GLICKO2_SCALE: Final[float] = 173.7178
PI_SQUARED: Final[float] = pi**2

# Default rating for a player that has not been previously rated.
GLICKO_DEFAULT_PLAYER_RATING: Final[float] = 1500.0
# Width of the interval the system is 95% confident the player's skill lies within.
GLICKO_DEFAULT_PLAYER_DEVIATION: Final[float] = 350.0
# Degree of expected fluctuation in a player's performance.
GLICKO2_DEFAULT_PLAYER_VOLATILITY: Final[float] = 0.06

# The system constant (tau) constrains the change in volatility over time.
GLICKO2_LOW_SYSTEM_CONSTANT: Final[float] = 0.3
GLICKO2_DEFAULT_SYSTEM_CONSTANT: Final[float] = 0.5
GLICKO2_HIGH_SYSTEM_CONSTANT: Final[float] = 1.2

GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE: Final[float] = 1e-6
GLICKO2_DEFAULT_MAX_ITERATIONS: Final[int] = 1_000

GAME_OUTCOME_LOSS: Final[float] = 0.0
GAME_OUTCOME_DRAW: Final[float] = 0.5
GAME_OUTCOME_WIN: Final[float] = 1.0

__all__ = [
    "GAME_OUTCOME_DRAW",
    "GAME_OUTCOME_LOSS",
    "GAME_OUTCOME_WIN",
    "GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE",
    "GLICKO2_DEFAULT_MAX_ITERATIONS",
    "GLICKO2_DEFAULT_PLAYER_VOLATILITY",
    "GLICKO2_DEFAULT_SYSTEM_CONSTANT",
    "GLICKO2_HIGH_SYSTEM_CONSTANT",
    "GLICKO2_LOW_SYSTEM_CONSTANT",
    "GLICKO2_SCALE",
    "GLICKO_DEFAULT_PLAYER_DEVIATION",
    "GLICKO_DEFAULT_PLAYER_RATING",
    "PI_SQUARED",
]
