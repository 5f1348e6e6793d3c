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
"""Roster strength and environmental modifiers that tilt the match."""

from __future__ import annotations

from typing import Optional, Sequence

from matchday.engine.config import ENGINE_CONFIG, StrengthConfig
from matchday.engine.settings import SimulationSettings
from matchday.models.player import Player


class StrengthModel:
    """Pure lookups that turn a roster and settings into a home advantage.

    Parameters
    ----------
    config : StrengthConfig | None, optional
        Tables to use; defaults to ``ENGINE_CONFIG.strength``.
    """

    def __init__(self, config: Optional[StrengthConfig] = None) -> None:
        self.config = config or ENGINE_CONFIG.strength

    def team_strength(self, roster: Sequence[Player]) -> float:
        """Return the mean overall rating of ``roster`` within the strength bounds.

        Parameters
        ----------
        roster : Sequence[Player]
            Players to average.

        Returns
        -------
        float
            Mean overall rating clamped to ``[min_strength, max_strength]``, or
            ``empty_roster_strength`` when the roster is empty.
        """
        cfg = self.config
        if not roster:
            return cfg.empty_roster_strength
        average = sum(p.overall_rating or 0 for p in roster) / len(roster)
        return min(cfg.max_strength, max(cfg.min_strength, average))

    def weather_factor(self, condition: str) -> float:
        """Look up the advantage multiplier for a weather condition.

        Parameters
        ----------
        condition : str
            Weather label such as ``"rainy"``.

        Returns
        -------
        float
            Multiplier, ``1.0`` for unknown labels.
        """
        return self.config.weather_factors.get(condition, 1.0)

    def pitch_factor(self, condition: str) -> float:
        """Look up the advantage multiplier for a pitch condition.

        Parameters
        ----------
        condition : str
            Pitch label such as ``"poor"``.

        Returns
        -------
        float
            Multiplier, ``1.0`` for unknown labels.
        """
        return self.config.pitch_factors.get(condition, 1.0)

    def difficulty_factor(self, level: str) -> float:
        """Look up the advantage multiplier for a difficulty level.

        Parameters
        ----------
        level : str
            Difficulty label such as ``"hard"``.

        Returns
        -------
        float
            Multiplier, ``1.0`` for unknown labels.
        """
        return self.config.difficulty_factors.get(level, 1.0)

    def home_advantage(self, roster: Sequence[Player], settings: SimulationSettings) -> float:
        """Probability that a contested event goes the home side's way.

        The value is not clipped; with the easy difficulty multiplier it can
        exceed ``1.0``, in which case every contested event favours the home side.

        Parameters
        ----------
        roster : Sequence[Player]
            Home roster.
        settings : SimulationSettings
            Match settings supplying opponent strength and conditions.

        Returns
        -------
        float
            ``strength / (strength + opponent) * weather * pitch * difficulty``.
        """
        strength = self.team_strength(roster)
        share = strength / (strength + settings.opponent_strength)
        return (
            share
            * self.weather_factor(settings.weather)
            * self.pitch_factor(settings.pitch)
            * self.difficulty_factor(settings.difficulty)
        )
