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
"""Per-match settings supplied by the caller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Difficulty = Literal["easy", "medium", "hard"]
Weather = Literal["sunny", "rainy", "windy", "snow"]
PitchCondition = Literal["excellent", "good", "poor"]

DIFFICULTIES = ("easy", "medium", "hard")
WEATHER_CONDITIONS = ("sunny", "rainy", "windy", "snow")
PITCH_CONDITIONS = ("excellent", "good", "poor")


@dataclass(frozen=True, slots=True)
class SimulationSettings:
    """Immutable knobs for a single simulated match.

    Parameters
    ----------
    game_speed : int, default=5
        Playback pace from 1 (slowest) to 10 (fastest).
    duration : int, default=90
        Number of simulated minutes.
    difficulty : {"easy", "medium", "hard"}, default="medium"
        Difficulty level scaling the home advantage.
    opponent_strength : float, default=75.0
        Opposition quality on the 30-100 scale.
    weather : {"sunny", "rainy", "windy", "snow"}, default="sunny"
        Weather on match day.
    pitch : {"excellent", "good", "poor"}, default="excellent"
        Condition of the playing surface.
    """

    game_speed: int = 5
    duration: int = 90
    difficulty: Difficulty = "medium"
    opponent_strength: float = 75.0
    weather: Weather = "sunny"
    pitch: PitchCondition = "excellent"

    def __post_init__(self) -> None:
        """Reject values outside the documented ranges."""
        if not 1 <= self.game_speed <= 10:
            raise ValueError("game_speed must be between 1 and 10")
        if self.duration < 1:
            raise ValueError("duration must be at least 1 minute")
        if not 30 <= self.opponent_strength <= 100:
            raise ValueError("opponent_strength must be between 30 and 100")
        if self.difficulty not in DIFFICULTIES:
            raise ValueError(f"Unknown difficulty '{self.difficulty}'")
        if self.weather not in WEATHER_CONDITIONS:
            raise ValueError(f"Unknown weather '{self.weather}'")
        if self.pitch not in PITCH_CONDITIONS:
            raise ValueError(f"Unknown pitch condition '{self.pitch}'")
