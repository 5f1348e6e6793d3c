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
"""Two-roster matches where both sides are modelled player by player.

Each side keeps its own :class:`EventGenerator` and event log written from its
own point of view, so the regular stats aggregation works unchanged for both
rosters. The combined log seen by the caller re-flags away events with
``home_team=False``.
"""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from matchday.engine.clock import MatchClock, ProgressCallback, minute_interval
from matchday.engine.config import ENGINE_CONFIG, EngineConfig
from matchday.engine.errors import SimulationInvariantError
from matchday.engine.event_generator import EventGenerator
from matchday.engine.events import GameEvent
from matchday.engine.match_engine import SimulationResult, check_roster, verify_result, verify_stats_lines
from matchday.engine.settings import SimulationSettings
from matchday.engine.stats import PlayerMatchStats, StatsAggregator
from matchday.engine.strength import StrengthModel
from matchday.models.team import Team
from matchday.utils.debug import MatchDebugger


@dataclass(frozen=True)
class HeadToHeadResult(SimulationResult):
    """Result of a two-roster match.

    Parameters
    ----------
    home_score : int
        Goals scored by the home side.
    away_score : int
        Goals scored by the away side.
    events : Tuple[GameEvent, ...]
        Combined event log; away events have ``home_team=False``.
    player_stats : Tuple[PlayerMatchStats, ...]
        Stats lines for the home roster.
    match_rating : float
        Overall match rating on the 1-10 scale.
    away_player_stats : Tuple[PlayerMatchStats, ...]
        Stats lines for the away roster.
    """

    away_player_stats: Tuple[PlayerMatchStats, ...] = ()


class HeadToHeadGenerator:
    """Route each fired event to one side's generator by relative strength.

    Parameters
    ----------
    home : Team
        Home squad.
    away : Team
        Away squad.
    settings : SimulationSettings
        Shared match settings.
    rng : random.Random
        Random source for both sides.
    config : EngineConfig | None, optional
        Tuning parameters; defaults to ``ENGINE_CONFIG``.
    """

    def __init__(
        self,
        home: Team,
        away: Team,
        settings: SimulationSettings,
        rng: random.Random,
        config: Optional[EngineConfig] = None,
    ) -> None:
        self.config = config or ENGINE_CONFIG
        self.rng = rng
        self.home = EventGenerator(home.players, settings, rng, self.config)
        self.away = EventGenerator(away.players, settings, rng, self.config)
        strength = StrengthModel(self.config.strength)
        home_strength = strength.team_strength(home.players)
        away_strength = strength.team_strength(away.players)
        self.home_share = home_strength / (home_strength + away_strength)
        self.events: List[GameEvent] = []

    @property
    def home_score(self) -> int:
        """Goals scored by the home side so far."""
        return self.home.state.home_score

    @property
    def away_score(self) -> int:
        """Goals scored by the away side so far."""
        return self.away.state.home_score

    def maybe_event(self, minute: int) -> Optional[GameEvent]:
        """Run the shared event gates and let the favoured side act.

        Parameters
        ----------
        minute : int
            Simulated minute, 1-based.

        Returns
        -------
        GameEvent | None
            Headline event for the minute, flagged from the home side's view.
        """
        if self.rng.random() >= self.home.event_probability(minute):
            return None
        home_side = self.rng.random() < self.home_share
        side = self.home if home_side else self.away
        kind = side.roll_kind()
        if kind is None:
            return None

        before = len(side.state.events)
        # The acting side always owns its event, so goals count for it.
        headline = side.create_event(kind, minute, home_side=True)
        if headline is None:
            return None
        for event in side.state.events[before:]:
            self.events.append(event if home_side else replace(event, home_team=False))
        return headline if home_side else replace(headline, home_team=False)


def verify_head_to_head(result: HeadToHeadResult, home: Team, away: Team, duration: int) -> None:
    """Check the guarantees of a finished two-roster match.

    Parameters
    ----------
    result : HeadToHeadResult
        Result to check.
    home : Team
        Home squad the result was produced for.
    away : Team
        Away squad the result was produced for.
    duration : int
        Match length in minutes.

    Raises
    ------
    SimulationInvariantError
        If any guarantee does not hold for either side.
    """
    verify_result(result, home.players, duration)
    verify_stats_lines(result.away_player_stats, away.players)
    if any(not 1.0 <= s.rating <= 10.0 for s in result.away_player_stats):
        raise SimulationInvariantError("Away rating outside 1..10")


def simulate_team_vs_team(
    home: Team,
    away: Team,
    settings: SimulationSettings,
    on_progress: Optional[ProgressCallback] = None,
    rng: Optional[random.Random] = None,
    cancel_event: Optional[threading.Event] = None,
    paced: bool = True,
    debugger: Optional[MatchDebugger] = None,
    config: Optional[EngineConfig] = None,
) -> HeadToHeadResult:
    """Simulate a match between two modelled squads.

    Parameters
    ----------
    home : Team
        Home squad.
    away : Team
        Away squad.
    settings : SimulationSettings
        Shared match settings; ``opponent_strength`` is ignored because the
        away roster supplies its own strength.
    on_progress : Callable[[int, GameEvent | None], None] | None, optional
        Called once per simulated minute.
    rng : random.Random | None, optional
        Random source; a fresh unseeded generator when omitted.
    cancel_event : threading.Event | None, optional
        Cancellation signal checked at every minute boundary.
    paced : bool, default=True
        Pause between minutes according to ``game_speed``.
    debugger : MatchDebugger | None, optional
        Telemetry sink.
    config : EngineConfig | None, optional
        Tuning parameters; defaults to ``ENGINE_CONFIG``.

    Returns
    -------
    HeadToHeadResult
        Combined score and events plus stats for both rosters.

    Raises
    ------
    InvalidRosterError
        If either squad has no players or repeats a player id.
    SimulationInvariantError
        If the finished match breaks one of its guarantees.
    """
    check_roster(home.players)
    check_roster(away.players)
    cfg = config or ENGINE_CONFIG
    rng = rng or random.Random()
    generator = HeadToHeadGenerator(home, away, settings, rng, cfg)
    interval = minute_interval(settings.game_speed, cfg.clock) if paced else 0.0
    clock = MatchClock(
        generator,
        settings.duration,
        interval=interval,
        max_wall_time=cfg.clock.max_wall_time,
        cancel_event=cancel_event,
    )
    if debugger:
        debugger.log_match_start(len(home.players), settings.duration, generator.home_share)

    def notify(minute: int, event: Optional[GameEvent]) -> None:
        if debugger and event is not None:
            side = home.name if event.home_team else away.name
            debugger.log_match_event(minute, event.kind, f"{side}: {event.description}")
        if on_progress is not None:
            on_progress(minute, event)

    clock.run(notify)

    aggregator = StatsAggregator(rng, cfg.ratings)
    home_stats = aggregator.aggregate(home.players, generator.home.state.events, settings.duration)
    away_stats = aggregator.aggregate(away.players, generator.away.state.events, settings.duration)
    result = HeadToHeadResult(
        home_score=generator.home_score,
        away_score=generator.away_score,
        events=tuple(generator.events),
        player_stats=tuple(home_stats),
        match_rating=aggregator.head_to_head_rating(
            generator.home_score, generator.away_score, len(generator.events)
        ),
        away_player_stats=tuple(away_stats),
    )
    try:
        verify_head_to_head(result, home, away, settings.duration)
    except SimulationInvariantError as exc:
        if debugger:
            debugger.log_error("INVARIANT", str(exc))
        raise
    if debugger:
        debugger.log_match_end(result.home_score, result.away_score, result.match_rating)
    return result
