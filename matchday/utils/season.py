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
"""Season orchestration on top of the single-match engine.

These helpers are the consumers of :class:`~matchday.engine.match_engine.SimulationResult`:
they fold a match's player lines back into career totals and keep a running
league table for a fixed list of opponents. Nothing here touches disk; callers
decide how to persist the returned objects.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from matchday.engine.match_engine import MatchEngine, SimulationResult
from matchday.engine.settings import SimulationSettings
from matchday.models.player import Player
from matchday.models.team import MatchRecord, PlayerSnapshot, Team

SEASON_TEMPLATES: Dict[str, Tuple[str, Tuple[Tuple[str, str], ...]]] = {
    "premier-league": (
        "Premier League Season",
        (
            ("Arsenal", "hard"),
            ("Chelsea", "hard"),
            ("Liverpool", "hard"),
            ("Manchester City", "hard"),
            ("Manchester United", "hard"),
            ("Tottenham", "hard"),
            ("Newcastle", "medium"),
            ("Brighton", "medium"),
            ("West Ham", "medium"),
            ("Aston Villa", "medium"),
            ("Crystal Palace", "easy"),
            ("Brentford", "easy"),
            ("Fulham", "easy"),
            ("Wolves", "easy"),
            ("Everton", "easy"),
        ),
    ),
    "champions-league": (
        "Champions League",
        (
            ("Barcelona", "hard"),
            ("Real Madrid", "hard"),
            ("Bayern Munich", "hard"),
            ("PSG", "hard"),
            ("Juventus", "medium"),
            ("AC Milan", "medium"),
            ("Atletico Madrid", "medium"),
            ("Borussia Dortmund", "medium"),
        ),
    ),
    "world-cup": (
        "World Cup",
        (
            ("Brazil", "hard"),
            ("Argentina", "hard"),
            ("France", "hard"),
            ("Germany", "medium"),
            ("Spain", "medium"),
            ("Netherlands", "medium"),
            ("Portugal", "medium"),
        ),
    ),
}

# opponent strength and weather per fixture difficulty
FIXTURE_CONDITIONS: Dict[str, Tuple[float, str]] = {
    "easy": (65.0, "sunny"),
    "medium": (75.0, "sunny"),
    "hard": (85.0, "rainy"),
}

POINTS = {"win": 3, "draw": 1, "loss": 0}


@dataclass
class SeasonMatch:
    """One fixture in a season.

    Parameters
    ----------
    match_id : str
        Identifier of the fixture within the season.
    opponent : str
        Opponent name.
    difficulty : str
        Fixture difficulty (``"easy"``, ``"medium"`` or ``"hard"``).
    result : SimulationResult | None, optional
        Filled in once the fixture has been played.
    """

    match_id: str
    opponent: str
    difficulty: str
    result: Optional[SimulationResult] = None

    @property
    def completed(self) -> bool:
        """Return ``True`` once the fixture has a result."""
        return self.result is not None


@dataclass
class Season:
    """A fixed run of fixtures with a running points tally.

    Parameters
    ----------
    season_id : str
        Unique identifier of the season.
    name : str
        Display name.
    matches : List[SeasonMatch]
        Fixtures in playing order.
    current_match : int, default=0
        Index of the next fixture to play.
    points : int, default=0
        League points earned so far.
    goals_for : int, default=0
        Goals scored so far.
    goals_against : int, default=0
        Goals conceded so far.
    """

    season_id: str
    name: str
    matches: List[SeasonMatch] = field(default_factory=list)
    current_match: int = 0
    points: int = 0
    goals_for: int = 0
    goals_against: int = 0

    @property
    def completed(self) -> bool:
        """Return ``True`` when every fixture has been played."""
        return self.current_match >= len(self.matches)


def create_season(template_key: str) -> Season:
    """Create an unplayed season from one of ``SEASON_TEMPLATES``.

    Parameters
    ----------
    template_key : str
        Key into ``SEASON_TEMPLATES``.

    Returns
    -------
    Season
        Season with every fixture pending.

    Raises
    ------
    KeyError
        If ``template_key`` is not a known template.
    """
    name, opponents = SEASON_TEMPLATES[template_key]
    matches = [
        SeasonMatch(match_id=f"match-{index}", opponent=opponent, difficulty=difficulty)
        for index, (opponent, difficulty) in enumerate(opponents)
    ]
    return Season(season_id=f"season-{int(time.time() * 1000)}", name=name, matches=matches)


def fixture_settings(base: SimulationSettings, difficulty: str) -> SimulationSettings:
    """Derive the settings for a fixture of the given difficulty.

    Parameters
    ----------
    base : SimulationSettings
        The manager's chosen settings (speed, duration, pitch, ...).
    difficulty : str
        Fixture difficulty; unknown values are treated as ``"medium"``.

    Returns
    -------
    SimulationSettings
        ``base`` with opponent strength and weather set for the fixture.
    """
    opponent_strength, weather = FIXTURE_CONDITIONS.get(difficulty, FIXTURE_CONDITIONS["medium"])
    return replace(base, opponent_strength=opponent_strength, weather=weather)


def apply_result(players: Sequence[Player], result: SimulationResult) -> List[Player]:
    """Fold a match's stats lines into career totals.

    Every player gains an appearance, whether or not they have a stats line.
    Goalkeepers also gain a clean sheet when the opposition did not score.

    Parameters
    ----------
    players : Sequence[Player]
        Roster before the match; left untouched.
    result : SimulationResult
        Finished match.

    Returns
    -------
    List[Player]
        Updated copies in the same order as ``players``.
    """
    lines = {line.player_id: line for line in result.player_stats}
    updated: List[Player] = []
    for player in players:
        line = lines.get(player.player_id)
        goals = player.goals + (line.goals if line else 0)
        assists = player.assists + (line.assists if line else 0)
        clean_sheets = player.clean_sheets
        if player.is_goalkeeper and result.away_score == 0:
            clean_sheets += 1
        updated.append(
            replace(
                player,
                goals=goals,
                assists=assists,
                appearances=player.appearances + 1,
                clean_sheets=clean_sheets,
            )
        )
    return updated


def build_match_record(
    team_name: str,
    opponent: str,
    result: SimulationResult,
    played_on: Optional[date] = None,
) -> MatchRecord:
    """Summarise a finished match for the team's history.

    Parameters
    ----------
    team_name : str
        Name of the simulated (home) side.
    opponent : str
        Name of the opposition.
    result : SimulationResult
        Finished match.
    played_on : datetime.date | None, optional
        Match date; today when omitted.

    Returns
    -------
    MatchRecord
        Record with a per-player snapshot of goals, assists and rating.
    """
    played_on = played_on or date.today()
    snapshots = tuple(
        PlayerSnapshot(player_id=s.player_id, goals=s.goals, assists=s.assists, rating=s.rating)
        for s in result.player_stats
    )
    return MatchRecord(
        match_id=str(int(time.time() * 1000)),
        date=played_on.isoformat(),
        opponent=opponent,
        home_team=team_name,
        away_team=opponent,
        home_score=result.home_score,
        away_score=result.away_score,
        player_stats=snapshots,
    )


def match_points(home_score: int, away_score: int) -> int:
    """League points for the home side.

    Parameters
    ----------
    home_score : int
        Goals scored.
    away_score : int
        Goals conceded.

    Returns
    -------
    int
        3 for a win, 1 for a draw, 0 for a loss.
    """
    if home_score > away_score:
        return POINTS["win"]
    if home_score == away_score:
        return POINTS["draw"]
    return POINTS["loss"]


def play_next_match(
    season: Season,
    team: Team,
    base_settings: SimulationSettings,
    rng: Optional[random.Random] = None,
    paced: bool = False,
) -> Team:
    """Play the next pending fixture and fold the result into season and squad.

    ``season`` is updated in place; the squad is returned as a new ``Team``
    so the caller can persist it.

    Parameters
    ----------
    season : Season
        Season to advance.
    team : Team
        Squad before the match; left untouched.
    base_settings : SimulationSettings
        Manager's settings; opponent strength and weather are overridden per fixture.
    rng : random.Random | None, optional
        Random source for the match.
    paced : bool, default=False
        Play back in real time instead of instantly.

    Returns
    -------
    Team
        Squad with updated career totals and the new match record appended.

    Raises
    ------
    ValueError
        If the season has already been completed.
    """
    if season.completed:
        raise ValueError(f"Season '{season.name}' is already complete")

    fixture = season.matches[season.current_match]
    settings = fixture_settings(base_settings, fixture.difficulty)
    result = MatchEngine(team.players, settings, rng=rng).simulate(paced=paced)

    fixture.result = result
    season.current_match += 1
    season.points += match_points(result.home_score, result.away_score)
    season.goals_for += result.home_score
    season.goals_against += result.away_score

    record = build_match_record(team.name, fixture.opponent, result)
    return Team(
        name=team.name,
        players=apply_result(team.players, result),
        matches=[*team.matches, record],
    )
