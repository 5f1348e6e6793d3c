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
"""Public entry point that runs one simulated match for a single roster."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from matchday.engine.clock import MatchClock, ProgressCallback, minute_interval
from matchday.engine.config import ENGINE_CONFIG, EngineConfig
from matchday.engine.errors import InvalidRosterError, SimulationCancelled, SimulationInvariantError
from matchday.engine.event_generator import EventGenerator, MatchState
from matchday.engine.events import GameEvent
from matchday.engine.settings import SimulationSettings
from matchday.engine.stats import PlayerMatchStats, StatsAggregator
from matchday.models.player import Player
from matchday.utils.debug import MatchDebugger


@dataclass(frozen=True)
class SimulationResult:
    """Everything a caller needs once the final whistle has gone.

    Parameters
    ----------
    home_score : int
        Goals scored by the simulated side.
    away_score : int
        Goals scored by the opposition.
    events : Tuple[GameEvent, ...]
        Full event log in minute order.
    player_stats : Tuple[PlayerMatchStats, ...]
        One stats line per roster player, in roster order.
    match_rating : float
        Overall match rating on the 1-10 scale.
    """

    home_score: int
    away_score: int
    events: Tuple[GameEvent, ...]
    player_stats: Tuple[PlayerMatchStats, ...]
    match_rating: float


def check_roster(roster: Sequence[Player], allow_empty: bool = False) -> None:
    """Reject rosters the engine cannot produce one stats line per player for.

    Parameters
    ----------
    roster : Sequence[Player]
        Players about to take part.
    allow_empty : bool, default=False
        Accept a roster without players.

    Raises
    ------
    InvalidRosterError
        If the roster is empty (unless allowed) or repeats a player id.
    """
    if not roster and not allow_empty:
        raise InvalidRosterError()
    seen: set[str] = set()
    for player in roster:
        if player.player_id in seen:
            raise InvalidRosterError(f"Duplicate player id '{player.player_id}' in roster")
        seen.add(player.player_id)


def verify_stats_lines(lines: Sequence[PlayerMatchStats], roster: Sequence[Player]) -> None:
    """Check that ``lines`` holds exactly one entry per roster player.

    Parameters
    ----------
    lines : Sequence[PlayerMatchStats]
        Stats lines produced for ``roster``.
    roster : Sequence[Player]
        Players the lines belong to.

    Raises
    ------
    SimulationInvariantError
        If the count or the id set differs from the roster.
    """
    if len(lines) != len(roster):
        raise SimulationInvariantError(f"{len(lines)} stats lines for a roster of {len(roster)}")
    if {s.player_id for s in lines} != {p.player_id for p in roster}:
        raise SimulationInvariantError("Stats lines do not match the roster")


def verify_result(result: SimulationResult, roster: Sequence[Player], duration: int) -> None:
    """Check the guarantees every finished simulation must satisfy.

    Parameters
    ----------
    result : SimulationResult
        Result to check.
    roster : Sequence[Player]
        Roster the result was produced for.
    duration : int
        Match length in minutes.

    Raises
    ------
    SimulationInvariantError
        If any guarantee does not hold.
    """
    previous = 1
    for event in result.events:
        if not previous <= event.minute <= duration:
            raise SimulationInvariantError(f"Event minute {event.minute} out of order or outside 1..{duration}")
        previous = event.minute

    home_goals = sum(1 for e in result.events if e.kind == "goal" and e.home_team)
    if home_goals != result.home_score:
        raise SimulationInvariantError(f"{home_goals} home goal events but home score is {result.home_score}")
    away_goals = sum(1 for e in result.events if e.kind == "goal" and not e.home_team)
    if away_goals != result.away_score:
        raise SimulationInvariantError(f"{away_goals} away goal events but away score is {result.away_score}")

    verify_stats_lines(result.player_stats, roster)

    ratings = [s.rating for s in result.player_stats] + [result.match_rating]
    if any(not 1.0 <= r <= 10.0 for r in ratings):
        raise SimulationInvariantError("Rating outside 1..10")


class MatchEngine:
    """Simulate one match for a roster against an abstract opponent.

    An engine runs exactly once. Build a new one for every match.

    Parameters
    ----------
    roster : Sequence[Player]
        Home players. The sequence and its players are never modified.
    settings : SimulationSettings
        Match settings.
    rng : random.Random | None, optional
        Random source for every draw; pass a seeded instance for replayable
        matches. A fresh unseeded generator is used when omitted.
    debugger : MatchDebugger | None, optional
        Telemetry sink; nothing is logged when omitted.
    config : EngineConfig | None, optional
        Tuning parameters; defaults to ``ENGINE_CONFIG``.
    allow_empty_roster : bool, default=False
        Run with an empty roster instead of raising ``InvalidRosterError``.
    """

    def __init__(
        self,
        roster: Sequence[Player],
        settings: SimulationSettings,
        rng: Optional[random.Random] = None,
        debugger: Optional[MatchDebugger] = None,
        config: Optional[EngineConfig] = None,
        allow_empty_roster: bool = False,
    ) -> None:
        self.roster: Tuple[Player, ...] = tuple(roster)
        self.settings = settings
        self.rng = rng or random.Random()
        self.debugger = debugger
        self.config = config or ENGINE_CONFIG
        self.allow_empty_roster = allow_empty_roster
        self.state = MatchState()
        self.generator = EventGenerator(self.roster, settings, self.rng, self.config, self.state)
        self.aggregator = StatsAggregator(self.rng, self.config.ratings)
        self.clock: Optional[MatchClock] = None
        self._cancel_event = threading.Event()

    @property
    def home_advantage(self) -> float:
        """Probability that a contested goal goes to the home side."""
        return self.generator.home_advantage

    def simulate(
        self,
        on_progress: Optional[ProgressCallback] = None,
        cancel_event: Optional[threading.Event] = None,
        paced: bool = True,
    ) -> SimulationResult:
        """Play the match minute by minute and return the final result.

        Parameters
        ----------
        on_progress : Callable[[int, GameEvent | None], None] | None, optional
            Called once per simulated minute, in minute order, before the
            result is returned.
        cancel_event : threading.Event | None, optional
            External cancellation signal checked at every minute boundary.
        paced : bool, default=True
            Pause between minutes according to ``game_speed``. ``False`` runs
            the whole match immediately.

        Returns
        -------
        SimulationResult
            Final score, events, per-player stats, and match rating.

        Raises
        ------
        InvalidRosterError
            If the roster is empty (unless allowed) or repeats a player id.
        SimulationCancelled
            If cancellation is requested before the final minute.
        SimulationInvariantError
            If the finished match breaks one of its guarantees.
        RuntimeError
            If the engine has already been used.
        """
        if self.clock is not None:
            raise RuntimeError("MatchEngine instances run a single match; create a new engine")
        check_roster(self.roster, self.allow_empty_roster)

        interval = minute_interval(self.settings.game_speed, self.config.clock) if paced else 0.0
        self.clock = MatchClock(
            self.generator,
            self.settings.duration,
            interval=interval,
            max_wall_time=self.config.clock.max_wall_time,
            cancel_event=cancel_event or self._cancel_event,
        )
        if self._cancel_event.is_set():
            self.clock.stop()
        if self.debugger:
            self.debugger.log_match_start(len(self.roster), self.settings.duration, self.home_advantage)

        logged = 0

        def notify(minute: int, event: Optional[GameEvent]) -> None:
            nonlocal logged
            if self.debugger:
                for recorded in self.state.events[logged:]:
                    self.debugger.log_match_event(recorded.minute, recorded.kind, recorded.description)
                self.debugger.log_minute(minute, self.state.home_score, self.state.away_score)
            logged = len(self.state.events)
            if on_progress is not None:
                on_progress(minute, event)

        try:
            self.clock.run(notify)
        except SimulationCancelled as exc:
            if self.debugger:
                self.debugger.log_error("CANCELLED", str(exc))
            raise

        result = self._build_result()
        try:
            verify_result(result, self.roster, self.settings.duration)
        except SimulationInvariantError as exc:
            if self.debugger:
                self.debugger.log_error("INVARIANT", str(exc))
            raise
        if self.debugger:
            self.debugger.log_match_end(result.home_score, result.away_score, result.match_rating)
        return result

    def stop(self) -> None:
        """Ask a running simulation to stop at the next minute boundary."""
        self._cancel_event.set()
        if self.clock is not None:
            self.clock.stop()

    def _build_result(self) -> SimulationResult:
        """Aggregate the finished match.

        Returns
        -------
        SimulationResult
            Result built from the match state.
        """
        stats: List[PlayerMatchStats] = self.aggregator.aggregate(
            self.roster, self.state.events, self.settings.duration
        )
        match_rating = self.aggregator.match_rating(
            self.state.home_score, self.state.away_score, len(self.state.events)
        )
        return SimulationResult(
            home_score=self.state.home_score,
            away_score=self.state.away_score,
            events=tuple(self.state.events),
            player_stats=tuple(stats),
            match_rating=match_rating,
        )
