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
"""Central configuration for engine tuning parameters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple


@dataclass(slots=True)
class StrengthConfig:
    """Lookup tables and bounds used to derive the home side's advantage.

    Parameters
    ----------
    min_strength : float, default=30.0
        Lower clamp applied to the mean roster rating.
    max_strength : float, default=100.0
        Upper clamp applied to the mean roster rating.
    empty_roster_strength : float, default=50.0
        Strength reported for a roster without players.
    weather_factors : Dict[str, float]
        Multiplier applied to the home advantage for each weather condition.
    pitch_factors : Dict[str, float]
        Multiplier applied to the home advantage for each pitch condition.
    difficulty_factors : Dict[str, float]
        Multiplier applied to the home advantage for each difficulty level.
    """

    min_strength: float = 30.0
    max_strength: float = 100.0
    empty_roster_strength: float = 50.0
    weather_factors: Dict[str, float] = field(
        default_factory=lambda: {"sunny": 1.0, "rainy": 0.9, "windy": 0.85, "snow": 0.8}
    )
    pitch_factors: Dict[str, float] = field(
        default_factory=lambda: {"excellent": 1.0, "good": 0.95, "poor": 0.85}
    )
    difficulty_factors: Dict[str, float] = field(
        default_factory=lambda: {"easy": 1.2, "medium": 1.0, "hard": 0.8}
    )


@dataclass(slots=True)
class PositionConfig:
    """Position groups used when picking event participants.

    Parameters
    ----------
    groups : Dict[str, FrozenSet[str]]
        Mapping from group name (``"attacker"``, ``"midfielder"``,
        ``"defender"``, ``"goalkeeper"``) to the codes it contains.
    """

    groups: Dict[str, FrozenSet[str]] = field(
        default_factory=lambda: {
            "attacker": frozenset({"ST", "LW", "RW", "CAM"}),
            "midfielder": frozenset({"CM", "CDM", "CAM"}),
            "defender": frozenset({"CB", "LB", "RB"}),
            "goalkeeper": frozenset({"GK"}),
        }
    )


@dataclass(slots=True)
class EventConfig:
    """Probabilities that drive the per-minute event roll.

    The outer roll decides whether anything happens in a minute; the chosen
    kind must then pass its own activation roll. The two stages compound, so
    the effective rate of any kind is ``fire * (1 / kinds) * activation``.

    Parameters
    ----------
    base_probability : float, default=0.15
        Chance that an event is considered in an ordinary minute.
    late_minute : int, default=80
        Minutes strictly after this value use the late surge multiplier.
    late_multiplier : float, default=1.5
        Multiplier applied to the base probability late in the match.
    restart_window : Tuple[int, int], default=(45, 50)
        Exclusive minute bounds of the surge that follows the interval.
    restart_multiplier : float, default=1.3
        Multiplier applied inside ``restart_window``.
    kind_activation : Dict[str, float]
        Activation probability for each event kind, in the order kinds are drawn.
    assist_probability : float, default=0.7
        Chance that a home goal is credited with an assist.
    red_card_probability : float, default=0.1
        Chance that a card is shown red rather than yellow.
    """

    base_probability: float = 0.15
    late_minute: int = 80
    late_multiplier: float = 1.5
    restart_window: Tuple[int, int] = (45, 50)
    restart_multiplier: float = 1.3
    kind_activation: Dict[str, float] = field(
        default_factory=lambda: {
            "goal": 0.30,
            "miss": 0.20,
            "save": 0.15,
            "card": 0.10,
            "injury": 0.05,
        }
    )
    assist_probability: float = 0.7
    red_card_probability: float = 0.1


@dataclass(slots=True)
class RatingConfig:
    """Per-player and match rating parameters.

    Parameters
    ----------
    base_rating : float, default=6.0
        Rating every player starts from.
    event_deltas : Dict[str, float]
        Rating change applied per attributed home event, keyed by kind.
    noise_amplitude : float, default=1.0
        Half-width of the uniform performance noise.
    attribute_pivot : float, default=70.0
        Overall rating that earns no attribute bonus.
    attribute_scale : float, default=30.0
        Divisor turning the distance from ``attribute_pivot`` into a bonus.
    min_rating : float, default=1.0
        Lower clamp for every rating.
    max_rating : float, default=10.0
        Upper clamp for every rating.
    match_base : float, default=5.0
        Starting point of the match rating.
    goal_difference_weight : float, default=0.5
        Match rating change per goal of difference.
    event_weight : float, default=0.1
        Match rating change per recorded event.
    head_to_head_margin_weight : float, default=0.3
        Match rating change per goal of absolute margin in head-to-head games.
    """

    base_rating: float = 6.0
    event_deltas: Dict[str, float] = field(
        default_factory=lambda: {
            "goal": 1.0,
            "assist": 0.5,
            "save": 0.3,
            "card": -0.5,
            "miss": -0.3,
        }
    )
    noise_amplitude: float = 1.0
    attribute_pivot: float = 70.0
    attribute_scale: float = 30.0
    min_rating: float = 1.0
    max_rating: float = 10.0
    match_base: float = 5.0
    goal_difference_weight: float = 0.5
    event_weight: float = 0.1
    head_to_head_margin_weight: float = 0.3


@dataclass(slots=True)
class ClockConfig:
    """Wall-clock pacing for the minute loop.

    Parameters
    ----------
    base_interval : float, default=1.0
        Seconds per simulated minute at ``game_speed == 1``.
    min_interval : float, default=0.05
        Shortest pause allowed between minutes.
    max_wall_time : float | None, default=60.0
        Ceiling on the total time spent pausing; once reached the remaining
        minutes run back to back. ``None`` disables the ceiling.
    """

    base_interval: float = 1.0
    min_interval: float = 0.05
    max_wall_time: float | None = 60.0


@dataclass(slots=True)
class EngineConfig:
    """Top-level container for all engine tuning structures.

    Parameters
    ----------
    strength : StrengthConfig, default=StrengthConfig()
        Home advantage lookup tables.
    positions : PositionConfig, default=PositionConfig()
        Position groups used for participant selection.
    events : EventConfig, default=EventConfig()
        Event probability tables.
    ratings : RatingConfig, default=RatingConfig()
        Rating deltas and clamps.
    clock : ClockConfig, default=ClockConfig()
        Minute pacing parameters.
    """

    strength: StrengthConfig = field(default_factory=StrengthConfig)
    positions: PositionConfig = field(default_factory=PositionConfig)
    events: EventConfig = field(default_factory=EventConfig)
    ratings: RatingConfig = field(default_factory=RatingConfig)
    clock: ClockConfig = field(default_factory=ClockConfig)


ENGINE_CONFIG = EngineConfig()
"""Singleton-style access to the engine configuration."""
