"""Load one rating period (players and matches) from a TOML file.

Example::

    [[players]]
    key = "alice"
    rating = 1500.0
    rd = 200.0
    volatility = 0.06   # optional

    [[matches]]
    player1 = "alice"
    player2 = "bob"
    result = 1.0        # from player1's perspective

Ratings and deviations are on the Glicko scale and are converted to the
Glicko-2 scale on load.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any
import tomllib

from ratings.common import Glicko2State, MatchByKey
from ratings.constants import GLICKO2_DEFAULT_PLAYER_VOLATILITY
from ratings.glicko2.conversions import glicko2_state_from_glicko

PlayerKey = str | int


def load_period_file(
    file_path: Path,
    *,
    default_volatility: float = GLICKO2_DEFAULT_PLAYER_VOLATILITY,
) -> tuple[dict[PlayerKey, Glicko2State], list[MatchByKey[PlayerKey]]]:
    """Parse a period file into Glicko-2 players and keyed matches."""
    if not file_path.exists():
        raise FileNotFoundError(f"Period file not found: {file_path}")

    with file_path.open("rb") as file:
        raw = tomllib.load(file)

    players = _parse_players(raw.get("players", []), file_path, default_volatility)
    matches = [
        _parse_match(match_raw, index, file_path)
        for index, match_raw in enumerate(raw.get("matches", []))
    ]
    return players, matches


def _parse_key(value: Any, *, label: str, file_path: Path) -> PlayerKey:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ValueError(f"{file_path}: {label} must be a string or integer, got {value!r}")
    return value


def _parse_players(
    players_raw: list[dict[str, Any]],
    file_path: Path,
    default_volatility: float,
) -> dict[PlayerKey, Glicko2State]:
    players: dict[PlayerKey, Glicko2State] = {}
    for index, player_raw in enumerate(players_raw):
        for field in ("key", "rating", "rd"):
            if field not in player_raw:
                raise ValueError(f"{file_path}: [[players]] #{index} is missing '{field}'")

        key = _parse_key(player_raw["key"], label=f"[[players]] #{index} key", file_path=file_path)
        if key in players:
            raise ValueError(f"{file_path}: duplicate player key {key!r}")

        rd = float(player_raw["rd"])
        volatility = float(player_raw.get("volatility", default_volatility))
        if rd < 0.0:
            raise ValueError(f"{file_path}: player {key!r} rd must be >= 0")
        if volatility <= 0.0:
            raise ValueError(f"{file_path}: player {key!r} volatility must be > 0")

        players[key] = glicko2_state_from_glicko(float(player_raw["rating"]), rd, volatility)
    return players


def _parse_match(match_raw: dict[str, Any], index: int, file_path: Path) -> MatchByKey[PlayerKey]:
    for field in ("player1", "player2", "result"):
        if field not in match_raw:
            raise ValueError(f"{file_path}: [[matches]] #{index} is missing '{field}'")

    result = float(match_raw["result"])
    if not 0.0 <= result <= 1.0:
        raise ValueError(f"{file_path}: [[matches]] #{index} result must be between 0 and 1")

    return MatchByKey(
        player1_key=_parse_key(match_raw["player1"], label=f"[[matches]] #{index} player1", file_path=file_path),
        player2_key=_parse_key(match_raw["player2"], label=f"[[matches]] #{index} player2", file_path=file_path),
        result=result,
    )


__all__ = ["PlayerKey", "load_period_file"]
