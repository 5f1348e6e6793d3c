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
"""Tests for player and team models."""

import pytest

from matchday.models.player import Player, PlayerAttributes, calculate_overall_rating
from matchday.models.team import MatchRecord, Team


def _attrs(**overrides: int) -> PlayerAttributes:
    values = dict(mobility=50, finishing=50, passing=50, control=50, marking=50, power=50)
    values.update(overrides)
    return PlayerAttributes(**values)


class TestPlayerAttributes:
    """Tests for PlayerAttributes class."""

    def test_create_player_attributes(self) -> None:
        attrs = _attrs(mobility=80, finishing=75)
        assert attrs.mobility == 80
        assert attrs.finishing == 75
        assert attrs.passing == 50

    def test_player_attributes_validation_range(self) -> None:
        """Attributes must be within 0..99."""
        with pytest.raises(ValueError):
            _attrs(power=100)
        with pytest.raises(ValueError):
            _attrs(marking=-1)

    def test_zero_is_a_valid_attribute(self) -> None:
        assert _attrs(finishing=0).finishing == 0


class TestOverallRating:
    """Tests for the position-weighted overall rating."""

    def test_flat_attributes_give_the_same_overall(self) -> None:
        flat = PlayerAttributes(mobility=70, finishing=70, passing=70, control=70, marking=70, power=70)
        for position in ("GK", "CB", "CM", "ST", "LW"):
            assert calculate_overall_rating(flat, position) == 70

    def test_striker_rewards_finishing(self) -> None:
        attrs = _attrs(finishing=90)
        assert calculate_overall_rating(attrs, "ST") == 62
        assert calculate_overall_rating(attrs, "CB") < calculate_overall_rating(attrs, "ST")

    def test_overall_is_clamped(self) -> None:
        low = PlayerAttributes(mobility=0, finishing=0, passing=0, control=0, marking=0, power=0)
        high = PlayerAttributes(mobility=99, finishing=99, passing=99, control=99, marking=99, power=99)
        assert calculate_overall_rating(low, "CM") == 40
        assert calculate_overall_rating(high, "CM") == 99


class TestPlayer:
    """Tests for Player class."""

    def test_create_player(self) -> None:
        player = Player(player_id="7", name="Test Player", position="RW", attributes=_attrs())
        assert player.player_id == "7"
        assert player.name == "Test Player"
        assert player.position == "RW"
        assert player.overall_rating == 50
        assert player.goals == 0
        assert player.appearances == 0

    def test_explicit_overall_is_kept(self) -> None:
        player = Player(player_id="1", name="Keeper", position="GK", attributes=_attrs(), overall_rating=0)
        assert player.overall_rating == 0

    def test_overall_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            Player(player_id="1", name="X", position="CM", attributes=_attrs(), overall_rating=120)

    def test_unknown_position_rejected(self) -> None:
        with pytest.raises(ValueError):
            Player(player_id="1", name="X", position="CF", attributes=_attrs())

    def test_is_goalkeeper(self) -> None:
        assert Player(player_id="1", name="A", position="GK", attributes=_attrs()).is_goalkeeper
        assert not Player(player_id="2", name="B", position="CB", attributes=_attrs()).is_goalkeeper


class TestTeam:
    """Tests for Team class."""

    def test_create_team(self, eleven) -> None:
        team = Team(name="Test FC", players=eleven)
        assert team.name == "Test FC"
        assert len(team.players) == 11
        assert team.matches == []

    def test_get_player(self, eleven) -> None:
        team = Team(name="Test FC", players=eleven)
        assert team.get_player("3").position == "CB"
        assert team.get_player("99") is None

    def test_match_history_is_independent_per_team(self) -> None:
        first = Team(name="A")
        second = Team(name="B")
        first.matches.append(
            MatchRecord(
                match_id="1",
                date="2025-01-01",
                opponent="B",
                home_team="A",
                away_team="B",
                home_score=1,
                away_score=0,
            )
        )
        assert second.matches == []
