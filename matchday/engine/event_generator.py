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
"""Per-minute stochastic event generation.

Each simulated minute goes through two independent gates before anything is
recorded. The first gate fires with :meth:`EventGenerator.event_probability`;
when it does, a kind is drawn uniformly and must then pass its own activation
roll from ``EventConfig.kind_activation``. Only then is the event materialised
and, for goals, the score updated.

Away goals are recorded without a scorer because the opposition roster is not
modelled. Anything summing per-player goals will therefore only ever match the
home score, never the total.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from matchday.engine.config import ENGINE_CONFIG, EngineConfig
from matchday.engine.events import (
    AssistEvent,
    CardEvent,
    GameEvent,
    GoalEvent,
    InjuryEvent,
    MissEvent,
    SaveEvent,
)
from matchday.engine.selector import WeightedSelector
from matchday.engine.settings import SimulationSettings
from matchday.engine.strength import StrengthModel
from matchday.models.player import Player


@dataclass
class MatchState:
    """Running score and append-only event log for one simulation.

    Parameters
    ----------
    home_score : int, default=0
        Goals scored by the simulated side.
    away_score : int, default=0
        Goals conceded to the opposition.
    events : List[GameEvent]
        Events in the order they were generated.
    """

    home_score: int = 0
    away_score: int = 0
    events: List[GameEvent] = field(default_factory=list)


class EventGenerator:
    """Decide, minute by minute, whether something happens and what it is.

    Parameters
    ----------
    roster : Sequence[Player]
        Home roster; read only.
    settings : SimulationSettings
        Match settings used for the home advantage.
    rng : random.Random
        Random source shared with the selector.
    config : EngineConfig | None, optional
        Engine tuning; defaults to ``ENGINE_CONFIG``.
    state : MatchState | None, optional
        State to append to; a fresh one is created when omitted.
    """

    def __init__(
        self,
        roster: Sequence[Player],
        settings: SimulationSettings,
        rng: random.Random,
        config: Optional[EngineConfig] = None,
        state: Optional[MatchState] = None,
    ) -> None:
        self.config = config or ENGINE_CONFIG
        self.settings = settings
        self.rng = rng
        self.state = state or MatchState()
        self.selector = WeightedSelector(roster, rng, self.config.positions)
        strength = StrengthModel(self.config.strength)
        # Roster and settings are fixed for the run, so the advantage is too.
        self.home_advantage = strength.home_advantage(self.selector.roster, settings)

    def event_probability(self, minute: int) -> float:
        """Chance that the first gate fires in ``minute``.

        Parameters
        ----------
        minute : int
            Simulated minute, 1-based.

        Returns
        -------
        float
            Base probability with the late and restart surges applied.
        """
        cfg = self.config.events
        probability = cfg.base_probability
        if minute > cfg.late_minute:
            probability *= cfg.late_multiplier
        low, high = cfg.restart_window
        if low < minute < high:
            probability *= cfg.restart_multiplier
        return probability

    def roll_kind(self) -> Optional[str]:
        """Draw an event kind and apply its activation gate.

        Returns
        -------
        str | None
            The kind when its activation roll passes, otherwise ``None``.
        """
        activation = self.config.events.kind_activation
        kind = self.rng.choice(list(activation))
        if self.rng.random() < activation[kind]:
            return kind
        return None

    def maybe_event(self, minute: int) -> Optional[GameEvent]:
        """Run both gates for ``minute`` and materialise the event if they pass.

        Parameters
        ----------
        minute : int
            Simulated minute, 1-based.

        Returns
        -------
        GameEvent | None
            The headline event recorded this minute, or ``None``.
        """
        if self.rng.random() >= self.event_probability(minute):
            return None
        kind = self.roll_kind()
        if kind is None:
            return None
        return self.create_event(kind, minute)

    def create_event(self, kind: str, minute: int, home_side: Optional[bool] = None) -> Optional[GameEvent]:
        """Materialise an event of ``kind`` and record it.

        Parameters
        ----------
        kind : str
            One of ``"goal"``, ``"miss"``, ``"save"``, ``"card"``, ``"injury"``.
        minute : int
            Simulated minute the event belongs to.
        home_side : bool | None, optional
            Force which side a goal goes to. ``None`` draws it from the home
            advantage.

        Returns
        -------
        GameEvent | None
            The recorded event, or ``None`` when no participant was available.

        Raises
        ------
        ValueError
            If ``kind`` is not a known event kind.
        """
        if kind == "goal":
            if home_side is None:
                home_side = self.rng.random() < self.home_advantage
            return self._goal(minute, home_side)
        if kind == "miss":
            return self._attributed(MissEvent, minute, "attacker", "{name} misses a great chance!")
        if kind == "save":
            return self._attributed(SaveEvent, minute, "goalkeeper", "Brilliant save by {name}!")
        if kind == "card":
            return self._card(minute)
        if kind == "injury":
            return self._attributed(InjuryEvent, minute, None, "{name} is down injured")
        raise ValueError(f"Unknown event kind '{kind}'")

    def _goal(self, minute: int, home_side: bool) -> GameEvent:
        """Record a goal and, for home goals, the optional assist.

        Parameters
        ----------
        minute : int
            Simulated minute of the goal.
        home_side : bool
            ``True`` when the home side scores.

        Returns
        -------
        GameEvent
            The goal event.
        """
        if not home_side:
            self.state.away_score += 1
            return self._record(GoalEvent(minute=minute, description="Opposition scores!", home_team=False))

        self.state.home_score += 1
        scorer = self.selector.select("attacker")
        if scorer is None:
            return self._record(GoalEvent(minute=minute, description="GOAL! The home side scores!", home_team=True))

        assister = None
        if self.rng.random() < self.config.events.assist_probability:
            assister = self.selector.select("midfielder")

        description = f"GOAL! {scorer.name} scores"
        if assister is not None:
            description += f" (assisted by {assister.name})"
        goal = self._record(
            GoalEvent(
                minute=minute,
                description=description + "!",
                home_team=True,
                player=scorer,
                assist_player=assister,
            )
        )
        if assister is not None:
            self._record(
                AssistEvent(
                    minute=minute,
                    description=f"{assister.name} with the assist!",
                    home_team=True,
                    player=assister,
                )
            )
        return goal

    def _card(self, minute: int) -> Optional[GameEvent]:
        """Book a player; most cards are yellow.

        Parameters
        ----------
        minute : int
            Simulated minute of the booking.

        Returns
        -------
        GameEvent | None
            The card event, or ``None`` for an empty roster.
        """
        player = self.selector.select()
        if player is None:
            return None
        red = self.rng.random() < self.config.events.red_card_probability
        colour = "red" if red else "yellow"
        return self._record(
            CardEvent(
                minute=minute,
                description=f"{player.name} receives a {colour} card",
                home_team=True,
                player=player,
                importance="high" if red else "low",
                colour=colour,
            )
        )

    def _attributed(
        self,
        event_cls: type,
        minute: int,
        position_group: Optional[str],
        template: str,
    ) -> Optional[GameEvent]:
        """Record a home event credited to one selected player.

        Parameters
        ----------
        event_cls : type
            ``GameEvent`` subclass to instantiate.
        minute : int
            Simulated minute of the event.
        position_group : str | None
            Group the participant is drawn from; ``None`` for anyone.
        template : str
            Description with a ``{name}`` placeholder.

        Returns
        -------
        GameEvent | None
            The recorded event, or ``None`` for an empty roster.
        """
        player = self.selector.select(position_group)
        if player is None:
            return None
        return self._record(
            event_cls(
                minute=minute,
                description=template.format(name=player.name),
                home_team=True,
                player=player,
            )
        )

    def _record(self, event: GameEvent) -> GameEvent:
        """Append ``event`` to the log.

        Parameters
        ----------
        event : GameEvent
            Event to store.

        Returns
        -------
        GameEvent
            The same event, for chaining.
        """
        self.state.events.append(event)
        return event
