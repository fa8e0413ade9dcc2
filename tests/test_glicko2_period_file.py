"""Tests for TOML period-file loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from ratings.common import MatchByKey
from ratings.glicko2.conversions import glicko2_state_from_glicko
from ratings.glicko2.period_file import load_period_file


def _write(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "period.toml"
    path.write_text(body.strip())
    return path


def test_load_period_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = "alice"
rating = 1500.0
rd = 200.0

[[players]]
key = 7
rating = 1400.0
rd = 30.0
volatility = 0.05

[[matches]]
player1 = "alice"
player2 = 7
result = 1.0
""",
    )

    players, matches = load_period_file(path)

    assert players == {
        "alice": glicko2_state_from_glicko(1500.0, 200.0),
        7: glicko2_state_from_glicko(1400.0, 30.0, 0.05),
    }
    assert matches == [MatchByKey(player1_key="alice", player2_key=7, result=1.0)]


def test_default_volatility_is_configurable(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = "alice"
rating = 1500.0
rd = 350.0
""",
    )

    players, matches = load_period_file(path, default_volatility=0.09)

    assert players["alice"].volatility == 0.09
    assert matches == []


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Period file not found"):
        load_period_file(tmp_path / "missing.toml")


def test_duplicate_player_keys_raise(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = "alice"
rating = 1500.0
rd = 200.0

[[players]]
key = "alice"
rating = 1600.0
rd = 100.0
""",
    )

    with pytest.raises(ValueError, match="duplicate player key 'alice'"):
        load_period_file(path)


def test_missing_player_field_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = "alice"
rating = 1500.0
""",
    )

    with pytest.raises(ValueError, match=r"\[\[players\]\] #0 is missing 'rd'"):
        load_period_file(path)


def test_result_outside_unit_interval_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = "a"
rating = 1500.0
rd = 200.0

[[players]]
key = "b"
rating = 1500.0
rd = 200.0

[[matches]]
player1 = "a"
player2 = "b"
result = 2.0
""",
    )

    with pytest.raises(ValueError, match="result must be between 0 and 1"):
        load_period_file(path)


def test_non_scalar_key_raises(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
[[players]]
key = true
rating = 1500.0
rd = 200.0
""",
    )

    with pytest.raises(ValueError, match="must be a string or integer"):
        load_period_file(path)
