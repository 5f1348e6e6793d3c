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
"""Post-match aggregation of player statistics and ratings."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from matchday.engine.config import ENGINE_CONFIG, RatingConfig
from matchday.engine.events import GameEvent
from matchday.models.player import Player


@dataclass
class PlayerMatchStats:
    """One player's line for a single match.

    Parameters
    ----------
    player_id : str
        Identifier of the roster player.
    goals : int, default=0
        Goals scored.
    assists : int, default=0
        Assists provided.
    rating : float, default=6.0
        Performance rating on the 1-10 scale.
    minutes_played : int, default=0
        Minutes on the pitch.
    """

    player_id: str
    goals: int = 0
    assists: int = 0
    rating: float = 6.0
    minutes_played: int = 0


def clamp(value: float, low: float, high: float) -> float:
    """Restrict ``value`` to ``[low, high]``.

    Parameters
    ----------
    value : float
        Number to restrict.
    low : float
        Lower bound.
    high : float
        Upper bound.

    Returns
    -------
    float
        ``value`` limited to the closed interval.
    """
    return max(low, min(high, value))


class StatsAggregator:
    """Convert an event log into per-player lines and a match rating.

    Parameters
    ----------
    rng : random.Random
        Source of the per-player performance noise.
    config : RatingConfig | None, optional
        Rating parameters; defaults to ``ENGINE_CONFIG.ratings``.
    """

    def __init__(self, rng: random.Random, config: Optional[RatingConfig] = None) -> None:
        self.rng = rng
        self.config = config or ENGINE_CONFIG.ratings

    def aggregate(
        self,
        roster: Sequence[Player],
        events: Sequence[GameEvent],
        duration: int,
    ) -> List[PlayerMatchStats]:
        """Build one stats line per roster player.

        Only events flagged for the home side and credited to a roster player
        move a rating. Each player then receives uniform noise and a bonus for
        their overall rating before the result is clamped.

        Parameters
        ----------
        roster : Sequence[Player]
            Players who took part, in roster order.
        events : Sequence[GameEvent]
            Complete event log of the match.
        duration : int
            Match length in minutes; everyone is credited the full match.

        Returns
        -------
        List[PlayerMatchStats]
            Stats lines in roster order.
        """
        cfg = self.config
        lines: Dict[str, PlayerMatchStats] = {}
        for player in roster:
            lines[player.player_id] = PlayerMatchStats(
                player_id=player.player_id,
                rating=cfg.base_rating,
                minutes_played=duration,
            )

        for event in events:
            if not event.home_team or event.player is None:
                continue
            line = lines.get(event.player.player_id)
            if line is None:
                continue
            if event.kind == "goal":
                line.goals += 1
            elif event.kind == "assist":
                line.assists += 1
            line.rating += cfg.event_deltas.get(event.kind, 0.0)

        for player in roster:
            line = lines[player.player_id]
            noise = self.rng.uniform(-cfg.noise_amplitude, cfg.noise_amplitude)
            bonus = ((player.overall_rating or 0) - cfg.attribute_pivot) / cfg.attribute_scale
            line.rating = clamp(line.rating + noise + bonus, cfg.min_rating, cfg.max_rating)

        return list(lines.values())

    def match_rating(self, home_score: int, away_score: int, event_count: int) -> float:
        """Summarise the match on the 1-10 scale.

        Parameters
        ----------
        home_score : int
            Goals scored by the home side.
        away_score : int
            Goals scored by the opposition.
        event_count : int
            Number of events in the log.

        Returns
        -------
        float
            ``clamp(base + (home - away) * weight + events * event_weight)``.
        """
        cfg = self.config
        raw = cfg.match_base + (home_score - away_score) * cfg.goal_difference_weight + event_count * cfg.event_weight
        return clamp(raw, cfg.min_rating, cfg.max_rating)

    def head_to_head_rating(self, home_score: int, away_score: int, event_count: int) -> float:
        """Summarise a two-roster match, rewarding close and eventful games alike.

        Parameters
        ----------
        home_score : int
            Goals scored by the home side.
        away_score : int
            Goals scored by the away side.
        event_count : int
            Number of events in the combined log.

        Returns
        -------
        float
            ``clamp(base + |home - away| * margin_weight + events * event_weight)``.
        """
        cfg = self.config
        raw = (
            cfg.match_base
            + abs(home_score - away_score) * cfg.head_to_head_margin_weight
            + event_count * cfg.event_weight
        )
        return clamp(raw, cfg.min_rating, cfg.max_rating)
