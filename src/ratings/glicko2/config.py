"""Load Glicko-2 system definitions from TOML files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ratings.common import Glicko2Settings, Glicko2State, GlickoState
from ratings.config_base import BaseSystemConfig, load_system_configs
from ratings.constants import (
    GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE,
    GLICKO2_DEFAULT_MAX_ITERATIONS,
    GLICKO2_DEFAULT_PLAYER_VOLATILITY,
    GLICKO2_DEFAULT_SYSTEM_CONSTANT,
    GLICKO2_HIGH_SYSTEM_CONSTANT,
    GLICKO2_LOW_SYSTEM_CONSTANT,
    GLICKO_DEFAULT_PLAYER_DEVIATION,
    GLICKO_DEFAULT_PLAYER_RATING,
)
from ratings.glicko2.conversions import to_glicko2_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glicko2SystemConfig(BaseSystemConfig):
    """Configuration for one Glicko-2 environment."""

    initial_rating: float
    initial_rd: float
    initial_volatility: float
    settings: Glicko2Settings

    def default_player(self) -> Glicko2State:
        """Starting state for an unrated player in this system."""
        return to_glicko2_state(
            GlickoState(rating=self.initial_rating, deviation=self.initial_rd),
            self.initial_volatility,
        )

    def as_config_json(self) -> dict[str, Any]:
        return {
            "initial_rating": self.initial_rating,
            "initial_rd": self.initial_rd,
            "initial_volatility": self.initial_volatility,
            "tau": self.settings.system_constant,
            "epsilon": self.settings.convergence_tolerance,
            "max_iterations": self.settings.max_iterations,
        }


def load_glicko2_system_configs(config_dir: Path) -> list[Glicko2SystemConfig]:
    """Load and validate all Glicko-2 TOML config files in a directory."""
    return load_system_configs(config_dir, _parse_config, duplicate_name_label="glicko2")


def _parse_config(raw: dict[str, Any], file_path: Path) -> Glicko2SystemConfig:
    system_raw = raw.get("system", {})
    glicko2_raw = raw.get("glicko2", {})

    name = str(system_raw.get("name", "")).strip()
    if not name:
        raise ValueError(f"{file_path}: [system].name is required")

    description_value = system_raw.get("description")
    description = None if description_value is None else str(description_value)

    initial_rating = float(glicko2_raw.get("initial_rating", GLICKO_DEFAULT_PLAYER_RATING))
    initial_rd = float(glicko2_raw.get("initial_rd", GLICKO_DEFAULT_PLAYER_DEVIATION))
    initial_volatility = float(
        glicko2_raw.get("initial_volatility", GLICKO2_DEFAULT_PLAYER_VOLATILITY)
    )
    tau = float(glicko2_raw.get("tau", GLICKO2_DEFAULT_SYSTEM_CONSTANT))
    epsilon = float(glicko2_raw.get("epsilon", GLICKO2_DEFAULT_CONVERGENCE_TOLERANCE))
    max_iterations = int(glicko2_raw.get("max_iterations", GLICKO2_DEFAULT_MAX_ITERATIONS))

    if initial_rd < 0.0:
        raise ValueError(f"{file_path}: [glicko2].initial_rd must be >= 0")
    if initial_volatility <= 0.0:
        raise ValueError(f"{file_path}: [glicko2].initial_volatility must be > 0")
    if tau <= 0.0:
        raise ValueError(f"{file_path}: [glicko2].tau must be > 0")
    if epsilon <= 0.0:
        raise ValueError(f"{file_path}: [glicko2].epsilon must be > 0")
    if max_iterations < 1:
        raise ValueError(f"{file_path}: [glicko2].max_iterations must be >= 1")
    if not GLICKO2_LOW_SYSTEM_CONSTANT <= tau <= GLICKO2_HIGH_SYSTEM_CONSTANT:
        logger.warning(
            "%s: tau=%s is outside the recommended range %s-%s",
            file_path,
            tau,
            GLICKO2_LOW_SYSTEM_CONSTANT,
            GLICKO2_HIGH_SYSTEM_CONSTANT,
        )

    return Glicko2SystemConfig(
        name=name,
        description=description,
        file_path=file_path,
        initial_rating=initial_rating,
        initial_rd=initial_rd,
        initial_volatility=initial_volatility,
        settings=Glicko2Settings(
            system_constant=tau,
            convergence_tolerance=epsilon,
            max_iterations=max_iterations,
        ),
    )


__all__ = ["Glicko2SystemConfig", "load_glicko2_system_configs"]
