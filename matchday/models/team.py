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
"""Team and match history domain models."""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from matchday.models.player import Player


@dataclass(frozen=True)
class PlayerSnapshot:
    """Per-player line stored alongside a finished match.

    Parameters
    ----------
    player_id : str
        Identifier of the player the line belongs to.
    goals : int
        Goals scored in the match.
    assists : int
        Assists provided in the match.
    rating : float
        Match rating on the 1-10 scale.
    """

    player_id: str
    goals: int
    assists: int
    rating: float


@dataclass(frozen=True)
class MatchRecord:
    """Summary of a completed match kept in a team's history.

    Parameters
    ----------
    match_id : str
        Unique identifier for the record.
    date : str
        ISO date (``YYYY-MM-DD``) the match was played.
    opponent : str
        Name of the opposing side.
    home_team : str
        Name of the home side.
    away_team : str
        Name of the away side.
    home_score : int
        Goals scored by the home side.
    away_score : int
        Goals scored by the away side.
    player_stats : Tuple[PlayerSnapshot, ...]
        One snapshot per roster player.
    """

    match_id: str
    date: str
    opponent: str
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    player_stats: Tuple[PlayerSnapshot, ...] = ()


@dataclass
class Team:
    """Container representing a squad and the matches it has played.

    Parameters
    ----------
    name : str
        Display name for the squad.
    players : List[Player]
        Complete roster available to the team.
    matches : List[MatchRecord]
        Match history, oldest first.
    """

    name: str
    players: List[Player] = field(default_factory=list)
    matches: List[MatchRecord] = field(default_factory=list)

    def get_player(self, player_id: str) -> Optional[Player]:
        """Look up a roster entry by identifier.

        Parameters
        ----------
        player_id : str
            Identifier to search for.

        Returns
        -------
        Player | None
            The matching player, or ``None`` when the id is not on the roster.
        """
        return next((p for p in self.players if p.player_id == player_id), None)
