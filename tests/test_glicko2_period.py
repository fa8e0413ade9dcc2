"""Unit tests for the Glicko-2 rating-period dispatcher."""

from __future__ import annotations

from itertools import product
from math import sqrt

import pytest

from ratings.common import Glicko2Settings, Glicko2State, MatchByKey
from ratings.constants import GAME_OUTCOME_DRAW, GAME_OUTCOME_LOSS, GAME_OUTCOME_WIN
from ratings.exceptions import UnknownPlayerKeyError
from ratings.glicko2.calculator import update_player_from_matches
from ratings.glicko2.conversions import (
    glicko2_state_from_glicko,
    new_default_glicko2_state,
    to_glicko2_deviation,
    to_glicko_state,
)
from ratings.glicko2.period import (
    Glicko2PeriodCalculator,
    default_period_calculator,
    period_calculator_with_settings,
)
from ratings.protocol import PeriodCalculator


def _example_players() -> dict[int, Glicko2State]:
    return {
        1: glicko2_state_from_glicko(1500.0, 200.0),
        2: glicko2_state_from_glicko(1400.0, 30.0),
        3: glicko2_state_from_glicko(1550.0, 100.0),
        4: glicko2_state_from_glicko(1700.0, 300.0),
    }


def _example_matches() -> list[MatchByKey[int]]:
    return [
        MatchByKey(player1_key=1, player2_key=2, result=GAME_OUTCOME_WIN),
        MatchByKey(player1_key=1, player2_key=3, result=GAME_OUTCOME_LOSS),
        MatchByKey(player1_key=1, player2_key=4, result=GAME_OUTCOME_LOSS),
    ]


def _unrated_pair() -> dict[str, Glicko2State]:
    return {"a": new_default_glicko2_state(), "b": new_default_glicko2_state()}


def test_reference_example_through_period_calculator() -> None:
    updated = default_period_calculator()(_example_players(), _example_matches())

    assert set(updated) == {1, 2, 3, 4}
    glicko = to_glicko_state(updated[1])
    assert glicko.rating == pytest.approx(1464.06, abs=0.05)
    assert glicko.deviation == pytest.approx(151.52, abs=0.01)
    assert updated[1].volatility == pytest.approx(0.05999, abs=1e-5)


def test_match_inversions_do_not_change_results() -> None:
    players = _example_players()
    calculator = default_period_calculator()
    reference = calculator(players, _example_matches())

    for inversions in product((False, True), repeat=len(_example_matches())):
        matches = [
            match.inverted() if inverted else match
            for match, inverted in zip(_example_matches(), inversions)
        ]
        updated = calculator(players, matches)
        for key, state in reference.items():
            assert updated[key] == state, f"player {key} changed with inversions {inversions}"


def test_opponents_use_pre_period_snapshots() -> None:
    players = _example_players()

    updated = default_period_calculator()(players, _example_matches())

    expected_player2 = update_player_from_matches(
        players[2].rating,
        players[2].deviation,
        players[2].volatility,
        [players[1].rating],
        [players[1].deviation],
        [GAME_OUTCOME_LOSS],
    )
    assert updated[2] == expected_player2


def test_single_win_between_unrated_players() -> None:
    initial = new_default_glicko2_state()

    updated = default_period_calculator()(
        _unrated_pair(),
        [MatchByKey(player1_key="a", player2_key="b", result=GAME_OUTCOME_WIN)],
    )

    assert updated["a"].rating > updated["b"].rating
    assert updated["a"].rating > 0.0 > updated["b"].rating
    for state in updated.values():
        assert state.deviation < initial.deviation
        assert state.volatility < 0.06


def test_single_loss_between_unrated_players() -> None:
    initial = new_default_glicko2_state()

    updated = default_period_calculator()(
        _unrated_pair(),
        [MatchByKey(player1_key="a", player2_key="b", result=GAME_OUTCOME_LOSS)],
    )

    assert updated["a"].rating < updated["b"].rating
    assert updated["a"].rating < 0.0 < updated["b"].rating
    for state in updated.values():
        assert state.deviation < initial.deviation
        assert state.volatility < 0.06


def test_single_draw_between_unrated_players() -> None:
    updated = default_period_calculator()(
        _unrated_pair(),
        [MatchByKey(player1_key="a", player2_key="b", result=GAME_OUTCOME_DRAW)],
    )

    assert updated["a"].rating == 0.0
    assert updated["b"].rating == 0.0
    for state in updated.values():
        assert state.deviation < to_glicko2_deviation(350.0)
        assert state.volatility < 0.06


def test_empty_match_list_applies_no_play_rule() -> None:
    player = glicko2_state_from_glicko(1500.0, 200.0)

    updated = default_period_calculator()({"solo": player}, [])

    assert updated["solo"].rating == player.rating
    assert updated["solo"].volatility == 0.06
    glicko = to_glicko_state(updated["solo"])
    assert glicko.rating == 1500.0
    assert glicko.deviation == pytest.approx(sqrt(200.0**2 + (0.06 * 173.7178) ** 2))


def test_idle_players_are_kept_with_grown_deviation() -> None:
    players = _example_players()
    players[5] = glicko2_state_from_glicko(1600.0, 80.0)

    updated = default_period_calculator()(players, _example_matches())

    assert set(updated) == set(players)
    assert updated[5].rating == players[5].rating
    assert updated[5].deviation > players[5].deviation


def test_unknown_key_raises_before_any_update() -> None:
    calculator = Glicko2PeriodCalculator()
    matches = _example_matches() + [MatchByKey(player1_key=1, player2_key=99, result=GAME_OUTCOME_WIN)]

    with pytest.raises(UnknownPlayerKeyError, match="unknown player key 99") as excinfo:
        calculator.process_period(_example_players(), matches)

    assert excinfo.value.details == {"key": 99, "match_index": 3}


def test_input_mapping_is_not_mutated() -> None:
    players = _example_players()
    snapshot = dict(players)

    default_period_calculator()(players, _example_matches())

    assert players == snapshot


def test_player_order_does_not_matter() -> None:
    players = _example_players()
    reversed_players = dict(reversed(list(players.items())))
    calculator = default_period_calculator()

    assert calculator(players, _example_matches()) == calculator(reversed_players, _example_matches())


def test_settings_are_applied() -> None:
    low = period_calculator_with_settings(Glicko2Settings(system_constant=0.3))
    high = period_calculator_with_settings(Glicko2Settings(system_constant=1.2))

    low_result = low(_example_players(), _example_matches())
    high_result = high(_example_players(), _example_matches())

    assert low_result[1].volatility != high_result[1].volatility


def test_calculator_keeps_no_state_between_periods() -> None:
    calculator = Glicko2PeriodCalculator()
    assert isinstance(calculator, PeriodCalculator)

    first = calculator.process_period(_example_players(), _example_matches())
    calculator.process_period(_unrated_pair(), [])

    assert vars(calculator) == {"settings": calculator.settings}
    assert calculator.process_period(_example_players(), _example_matches()) == first
