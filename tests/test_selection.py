# Copyright (C) 2025 Richard Owen
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""Tests for roster strength and participant selection."""

import random

import pytest

from matchday.engine.config import StrengthConfig
from matchday.engine.selector import WeightedSelector
from matchday.engine.settings import SimulationSettings
from matchday.engine.strength import StrengthModel

from conftest import ScriptedRandom, build_player


class TestStrengthModel:
    """Tests for StrengthModel."""

    def test_empty_roster_has_neutral_strength(self) -> None:
        assert StrengthModel().team_strength([]) == 50

    def test_strength_is_mean_overall(self, eleven) -> None:
        assert StrengthModel().team_strength(eleven) == pytest.approx(75.0)

    def test_strength_is_clamped(self) -> None:
        model = StrengthModel()
        assert model.team_strength([build_player("1", overall=0)]) == 30
        tuned = StrengthModel(StrengthConfig(max_strength=80.0))
        assert tuned.team_strength([build_player("1", overall=95)]) == 80

    def test_factor_lookups(self) -> None:
        model = StrengthModel()
        assert model.weather_factor("rainy") == 0.9
        assert model.weather_factor("snow") == 0.8
        assert model.pitch_factor("poor") == 0.85
        assert model.difficulty_factor("hard") == 0.8

    def test_unknown_labels_are_neutral(self) -> None:
        model = StrengthModel()
        assert model.weather_factor("fog") == 1.0
        assert model.pitch_factor("astroturf") == 1.0
        assert model.difficulty_factor("legendary") == 1.0

    def test_home_advantage_for_lone_goalkeeper(self) -> None:
        """A single strong keeper against weak opposition on easy is heavily favoured."""
        roster = [build_player("1", "GK", 90)]
        settings = SimulationSettings(duration=45, opponent_strength=30, difficulty="easy")
        model = StrengthModel()
        assert model.team_strength(roster) == 90
        assert model.home_advantage(roster, settings) == pytest.approx(0.9)

    def test_home_advantage_can_exceed_one(self) -> None:
        roster = [build_player("1", overall=99)]
        settings = SimulationSettings(opponent_strength=30, difficulty="easy")
        model = StrengthModel(StrengthConfig(difficulty_factors={"easy": 2.0}))
        assert model.home_advantage(roster, settings) > 1.0

    def test_conditions_reduce_advantage(self, eleven) -> None:
        model = StrengthModel()
        sunny = model.home_advantage(eleven, SimulationSettings())
        wet = model.home_advantage(eleven, SimulationSettings(weather="rainy", pitch="poor", difficulty="hard"))
        assert wet == pytest.approx(sunny * 0.9 * 0.85 * 0.8)


class TestWeightedSelector:
    """Tests for WeightedSelector."""

    def test_empty_roster_selects_nobody(self) -> None:
        selector = WeightedSelector([], ScriptedRandom([]))
        assert selector.select() is None
        assert selector.select("attacker") is None

    def test_cumulative_selection(self) -> None:
        low = build_player("a", overall=10)
        high = build_player("b", overall=30)
        selector = WeightedSelector([low, high], ScriptedRandom([0.1, 0.5, 0.25]))
        assert selector.select() is low
        assert selector.select() is high
        # landing exactly on a boundary stays with the earlier candidate
        assert selector.select() is low

    def test_zero_total_weight_picks_first_candidate(self) -> None:
        roster = [build_player("a", overall=0), build_player("b", overall=0)]
        selector = WeightedSelector(roster, ScriptedRandom([]))
        assert selector.select() is roster[0]

    def test_group_filters_candidates(self, eleven) -> None:
        selector = WeightedSelector(eleven, random.Random(3))
        attackers = selector.pool("attacker")
        assert {p.position for p in attackers} == {"CAM", "LW", "RW", "ST"}
        assert [p.position for p in selector.pool("goalkeeper")] == ["GK"]
        for _ in range(50):
            assert selector.select("defender").position in {"CB", "LB", "RB"}

    def test_missing_group_falls_back_to_roster(self) -> None:
        keeper = build_player("1", "GK", 90)
        selector = WeightedSelector([keeper], ScriptedRandom([0.9]))
        assert selector.pool("attacker") == [keeper]
        assert selector.pool("unknown-group") == [keeper]
        assert selector.select("attacker") is keeper

    def test_selection_frequency_follows_rating(self) -> None:
        low = build_player("a", overall=10)
        high = build_player("b", overall=30)
        selector = WeightedSelector([low, high], random.Random(11))
        picks = [selector.select() for _ in range(4000)]
        share = sum(1 for p in picks if p is high) / len(picks)
        assert 0.7 < share < 0.8

    def test_roster_is_not_mutated(self, eleven) -> None:
        snapshot = list(eleven)
        selector = WeightedSelector(eleven, random.Random(5))
        for _ in range(20):
            selector.select("midfielder")
        assert eleven == snapshot
