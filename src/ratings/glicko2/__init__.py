"""Glicko-2 rating modules."""

from ratings.glicko2.calculator import (
    calculate_expected_score,
    compute_new_volatility,
    match_player_updater_with_settings,
    player_updater_with_default_settings,
    player_updater_with_settings,
    raw_player_updater_with_default_settings,
    raw_player_updater_with_settings,
    update_player,
    update_player_from_matches,
)
from ratings.glicko2.config import Glicko2SystemConfig, load_glicko2_system_configs
from ratings.glicko2.conversions import (
    glicko2_state_from_glicko,
    new_default_glicko2_state,
    new_default_glicko_state,
    to_default_glicko2_state,
    to_glicko2_deviation,
    to_glicko2_rating,
    to_glicko2_state,
    to_glicko_deviation,
    to_glicko_rating,
    to_glicko_state,
)
from ratings.glicko2.period import (
    Glicko2PeriodCalculator,
    default_period_calculator,
    period_calculator_with_settings,
)
from ratings.glicko2.period_file import load_period_file

__all__ = [
    "Glicko2PeriodCalculator",
    "Glicko2SystemConfig",
    "calculate_expected_score",
    "compute_new_volatility",
    "default_period_calculator",
    "glicko2_state_from_glicko",
    "load_glicko2_system_configs",
    "load_period_file",
    "match_player_updater_with_settings",
    "new_default_glicko2_state",
    "new_default_glicko_state",
    "period_calculator_with_settings",
    "player_updater_with_default_settings",
    "player_updater_with_settings",
    "raw_player_updater_with_default_settings",
    "raw_player_updater_with_settings",
    "to_default_glicko2_state",
    "to_glicko2_deviation",
    "to_glicko2_rating",
    "to_glicko2_state",
    "to_glicko_deviation",
    "to_glicko_rating",
    "to_glicko_state",
    "update_player",
    "update_player_from_matches",
]
