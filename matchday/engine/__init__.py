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
from __future__ import annotations

from .clock import MatchClock, Tick, minute_interval
from .config import ENGINE_CONFIG, EngineConfig
from .errors import InvalidRosterError, SimulationCancelled, SimulationInvariantError
from .event_generator import EventGenerator, MatchState
from .events import AssistEvent, CardEvent, GameEvent, GoalEvent, InjuryEvent, MissEvent, SaveEvent
from .head_to_head import HeadToHeadResult, simulate_team_vs_team
from .match_engine import MatchEngine, SimulationResult, verify_result
from .selector import WeightedSelector
from .settings import SimulationSettings
from .stats import PlayerMatchStats, StatsAggregator
from .strength import StrengthModel

__all__ = [
    "ENGINE_CONFIG",
    "EngineConfig",
    "SimulationSettings",
    "StrengthModel",
    "WeightedSelector",
    "EventGenerator",
    "MatchState",
    "MatchClock",
    "Tick",
    "minute_interval",
    "StatsAggregator",
    "PlayerMatchStats",
    "MatchEngine",
    "SimulationResult",
    "verify_result",
    "HeadToHeadResult",
    "simulate_team_vs_team",
    "GameEvent",
    "GoalEvent",
    "AssistEvent",
    "MissEvent",
    "SaveEvent",
    "CardEvent",
    "InjuryEvent",
    "InvalidRosterError",
    "SimulationCancelled",
    "SimulationInvariantError",
]
