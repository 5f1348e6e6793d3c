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
"""Domain models representing football players and their attributes."""
from dataclasses import dataclass
from typing import Dict, Optional

POSITION_CODES = ("GK", "CB", "LB", "RB", "CDM", "CM", "CAM", "LW", "RW", "ST")

# mobility, finishing, passing, control, marking, power
POSITION_WEIGHTS: Dict[str, Dict[str, float]] = {
    "GK": {"mobility": 0.1, "finishing": 0.05, "passing": 0.15, "control": 0.1, "marking": 0.4, "power": 0.2},
    "CB": {"mobility": 0.1, "finishing": 0.05, "passing": 0.15, "control": 0.05, "marking": 0.45, "power": 0.2},
    "LB": {"mobility": 0.2, "finishing": 0.05, "passing": 0.2, "control": 0.15, "marking": 0.25, "power": 0.15},
    "RB": {"mobility": 0.2, "finishing": 0.05, "passing": 0.2, "control": 0.15, "marking": 0.25, "power": 0.15},
    "CDM": {"mobility": 0.15, "finishing": 0.1, "passing": 0.25, "control": 0.15, "marking": 0.25, "power": 0.1},
    "CM": {"mobility": 0.15, "finishing": 0.15, "passing": 0.25, "control": 0.2, "marking": 0.15, "power": 0.1},
    "CAM": {"mobility": 0.15, "finishing": 0.2, "passing": 0.25, "control": 0.25, "marking": 0.05, "power": 0.1},
    "LW": {"mobility": 0.25, "finishing": 0.2, "passing": 0.15, "control": 0.25, "marking": 0.05, "power": 0.1},
    "RW": {"mobility": 0.25, "finishing": 0.2, "passing": 0.15, "control": 0.25, "marking": 0.05, "power": 0.1},
    "ST": {"mobility": 0.2, "finishing": 0.3, "passing": 0.1, "control": 0.2, "marking": 0.05, "power": 0.15},
}
DEFAULT_WEIGHTS = {"mobility": 0.17, "finishing": 0.17, "passing": 0.17, "control": 0.17, "marking": 0.17, "power": 0.15}


@dataclass(frozen=True)
class PlayerAttributes:
    """The six skill ratings tracked for every player.

    Parameters
    ----------
    mobility : int
        Pace and acceleration.
    finishing : int
        Shot accuracy and composure in front of goal.
    passing : int
        Range and accuracy of distribution.
    control : int
        Ball control and dribbling.
    marking : int
        Defensive awareness and tackling.
    power : int
        Strength and physical presence.
    """

    mobility: int
    finishing: int
    passing: int
    control: int
    marking: int
    power: int

    def __post_init__(self) -> None:
        """Validate that all attributes fall within the 0-99 rating scale."""
        for attr, value in self.__dict__.items():
            if not 0 <= value <= 99:
                raise ValueError(f"{attr} must be between 0 and 99")


def calculate_overall_rating(attributes: PlayerAttributes, position: str) -> int:
    """Combine the six attributes into a single position-weighted rating.

    Parameters
    ----------
    attributes : PlayerAttributes
        Skill ratings to combine.
    position : str
        Position code selecting the weight table; unknown codes use an even spread.

    Returns
    -------
    int
        Rounded weighted mean clamped to ``[40, 99]``.
    """
    weights = POSITION_WEIGHTS.get(position, DEFAULT_WEIGHTS)
    overall = sum(getattr(attributes, name) * weight for name, weight in weights.items())
    # round half up, not banker's rounding
    return min(99, max(40, int(overall + 0.5)))


@dataclass
class Player:
    """Roster entry combining identity, skills, and career totals.

    Parameters
    ----------
    player_id : str
        Unique identifier for the player.
    name : str
        Human-readable player name.
    position : str
        Position code, one of ``POSITION_CODES``.
    attributes : PlayerAttributes
        Skill ratings attached to the player.
    overall_rating : int | None, optional
        Summary rating in ``[0, 99]``. Derived from ``attributes`` when omitted.
    goals : int, default=0
        Career goals.
    assists : int, default=0
        Career assists.
    appearances : int, default=0
        Career matches played.
    clean_sheets : int, default=0
        Career clean sheets (goalkeepers only).
    """

    player_id: str
    name: str
    position: str
    attributes: PlayerAttributes
    overall_rating: Optional[int] = None
    goals: int = 0
    assists: int = 0
    appearances: int = 0
    clean_sheets: int = 0

    def __post_init__(self) -> None:
        """Validate the position and fill in the derived overall rating."""
        if self.position not in POSITION_CODES:
            raise ValueError(f"Unknown position '{self.position}'")
        if self.overall_rating is None:
            self.overall_rating = calculate_overall_rating(self.attributes, self.position)
        elif not 0 <= self.overall_rating <= 99:
            raise ValueError("overall_rating must be between 0 and 99")

    @property
    def is_goalkeeper(self) -> bool:
        """Return ``True`` when the player is listed in goal."""
        return self.position == "GK"
