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
"""Tests for two-roster matches."""

import random
from dataclasses import replace

import pytest

from matchday.engine.errors import InvalidRosterError, SimulationInvariantError
from matchday.engine.head_to_head import HeadToHeadGenerator, simulate_team_vs_team, verify_head_to_head
from matchday.engine.settings import SimulationSettings
from matchday.models.team import Team
from matchday.utils.debug import MatchDebugger
from matchday.utils.generator import generate_squad

from conftest import build_player


@pytest.fixture
def squads() -> tuple:
    rng = random.Random(17)
    home = generate_squad("Home FC", "4-3-3", starting_player_id=1, rng=rng)
    away = generate_squad("Away FC", "4-4-2", starting_player_id=100, rng=rng)
    return home, away


class TestHeadToHeadGenerator:
    """Tests for routing events between the two sides."""

    def test_equal_squads_share_evenly(self) -> None:
        home = Team("A", [build_player("1", overall=70)])
        away = Team("B", [build_player("2", overall=70)])
        generator = HeadToHeadGenerator(home, away, SimulationSettings(), random.Random(0))
        assert generator.home_share == pytest.approx(0.5)

    def test_stronger_side_gets_more_share(self) -> None:
        home = Team("A", [build_player("1", overall=90)])
        away = Team("B", [build_player("2", overall=60)])
        generator = HeadToHeadGenerator(home, away, SimulationSettings(), random.Random(0))
        assert generator.home_share == pytest.approx(0.6)


class TestSimulateTeamVsTeam:
    """Tests for complete two-roster matches."""

    def test_empty_squad_rejected(self, squads) -> None:
        home, _ = squads
        with pytest.raises(InvalidRosterError):
            simulate_team_vs_team(home, Team("Nobody"), SimulationSettings(), paced=False)

    def test_duplicate_home_ids_rejected(self, squads) -> None:
        _, away = squads
        home = Team("Clones", [build_player("1", "ST"), build_player("1", "CM")])
        with pytest.raises(InvalidRosterError):
            simulate_team_vs_team(home, away, SimulationSettings(duration=10), rng=random.Random(0), paced=False)

    def test_duplicate_away_ids_rejected(self, squads) -> None:
        home, _ = squads
        away = Team("Clones", [build_player("7", "GK"), build_player("7", "CB")])
        with pytest.raises(InvalidRosterError):
            simulate_team_vs_team(home, away, SimulationSettings(duration=10), rng=random.Random(0), paced=False)

    def test_missing_away_stats_line_detected(self, squads) -> None:
        home, away = squads
        result = simulate_team_vs_team(home, away, SimulationSettings(duration=10), rng=random.Random(1), paced=False)
        verify_head_to_head(result, home, away, 10)

        broken = replace(result, away_player_stats=result.away_player_stats[:-1])
        with pytest.raises(SimulationInvariantError):
            verify_head_to_head(broken, home, away, 10)

    def test_away_score_mismatch_detected(self, squads) -> None:
        home, away = squads
        result = simulate_team_vs_team(home, away, SimulationSettings(duration=10), rng=random.Random(1), paced=False)
        with pytest.raises(SimulationInvariantError):
            verify_head_to_head(replace(result, away_score=result.away_score + 1), home, away, 10)

    @pytest.mark.parametrize("seed", range(5))
    def test_scores_and_stats_line_up(self, squads, seed: int) -> None:
        home, away = squads
        result = simulate_team_vs_team(home, away, SimulationSettings(), rng=random.Random(seed), paced=False)

        goals = [e for e in result.events if e.kind == "goal"]
        assert sum(1 for g in goals if g.home_team) == result.home_score
        assert sum(1 for g in goals if not g.home_team) == result.away_score
        assert sum(s.goals for s in result.player_stats) == result.home_score
        assert sum(s.goals for s in result.away_player_stats) == result.away_score
        assert len(result.player_stats) == len(home.players)
        assert len(result.away_player_stats) == len(away.players)
        assert 1.0 <= result.match_rating <= 10.0

    def test_events_are_credited_to_the_right_roster(self, squads) -> None:
        home, away = squads
        home_ids = {p.player_id for p in home.players}
        away_ids = {p.player_id for p in away.players}
        result = simulate_team_vs_team(home, away, SimulationSettings(), rng=random.Random(3), paced=False)
        for event in result.events:
            if event.player is None:
                continue
            assert event.player.player_id in (home_ids if event.home_team else away_ids)
        minutes = [e.minute for e in result.events]
        assert minutes == sorted(minutes)

    def test_progress_and_logging(self, squads, tmp_path) -> None:
        home, away = squads
        debugger = MatchDebugger(tmp_path)
        minutes = []
        result = simulate_team_vs_team(
            home,
            away,
            SimulationSettings(duration=30),
            on_progress=lambda minute, event: minutes.append(minute),
            rng=random.Random(6),
            paced=False,
            debugger=debugger,
        )
        debugger.close()
        assert minutes == list(range(1, 31))
        text = debugger.log_path.read_text(encoding="utf-8")
        assert f"MATCH_END: Score: {result.home_score}-{result.away_score}" in text
