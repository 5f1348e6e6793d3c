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
"""Event domain models for the match engine.

Every event kind is its own frozen dataclass carrying a class-level ``kind``
tag, so consumers can dispatch with ``isinstance`` or on ``event.kind``
without guessing which optional fields are populated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, Optional

from matchday.models.player import Player

EventKind = Literal["goal", "assist", "miss", "save", "card", "injury"]
Importance = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class GameEvent:
    """Snapshot of a noteworthy moment during a simulation.

    Parameters
    ----------
    minute : int
        Simulated minute (1-based) when the event occurred.
    description : str
        Human-readable summary of what happened.
    home_team : bool
        ``True`` when the event belongs to the simulated (home) side.
    player : Player | None, optional
        Roster player involved, ``None`` for opposition events.
    importance : {"low", "medium", "high"}, default="medium"
        How prominently a display should feature the event.
    """

    kind: ClassVar[str] = "event"

    minute: int
    description: str
    home_team: bool
    player: Optional[Player] = None
    importance: Importance = "medium"

    @property
    def is_attributed(self) -> bool:
        """Return ``True`` when a roster player is credited with the event."""
        return self.player is not None


@dataclass(frozen=True)
class GoalEvent(GameEvent):
    """A goal for either side.

    Opposition goals carry no ``player``; only the home roster is tracked.

    Parameters
    ----------
    minute : int
        Simulated minute of the goal.
    description : str
        Commentary line for the goal.
    home_team : bool
        ``True`` for a home goal.
    player : Player | None, optional
        Scorer, when the goal was scored by the home side.
    importance : {"low", "medium", "high"}, default="high"
        Display prominence.
    assist_player : Player | None, optional
        Team-mate credited with the assist, if any.
    """

    kind: ClassVar[str] = "goal"

    importance: Importance = "high"
    assist_player: Optional[Player] = None


@dataclass(frozen=True)
class AssistEvent(GameEvent):
    """The assist that accompanies a home goal.

    Parameters
    ----------
    minute : int
        Simulated minute of the goal being assisted.
    description : str
        Commentary line for the assist.
    home_team : bool
        Always ``True``; only home goals are assisted.
    player : Player | None, optional
        Player credited with the assist.
    importance : {"low", "medium", "high"}, default="medium"
        Display prominence.
    """

    kind: ClassVar[str] = "assist"


@dataclass(frozen=True)
class MissEvent(GameEvent):
    """A clear chance that was not converted.

    Parameters
    ----------
    minute : int
        Simulated minute of the miss.
    description : str
        Commentary line for the miss.
    home_team : bool
        Side the chance belongs to.
    player : Player | None, optional
        Player who missed.
    importance : {"low", "medium", "high"}, default="medium"
        Display prominence.
    """

    kind: ClassVar[str] = "miss"


@dataclass(frozen=True)
class SaveEvent(GameEvent):
    """A goalkeeper save.

    Parameters
    ----------
    minute : int
        Simulated minute of the save.
    description : str
        Commentary line for the save.
    home_team : bool
        Side whose goalkeeper made the save.
    player : Player | None, optional
        Goalkeeper credited with the save.
    importance : {"low", "medium", "high"}, default="medium"
        Display prominence.
    """

    kind: ClassVar[str] = "save"


@dataclass(frozen=True)
class CardEvent(GameEvent):
    """A booking.

    Parameters
    ----------
    minute : int
        Simulated minute of the booking.
    description : str
        Commentary line for the booking.
    home_team : bool
        Side of the booked player.
    player : Player | None, optional
        Booked player.
    importance : {"low", "medium", "high"}, default="low"
        Display prominence; red cards are ``"high"``.
    colour : {"yellow", "red"}, default="yellow"
        Card shown.
    """

    kind: ClassVar[str] = "card"

    importance: Importance = "low"
    colour: Literal["yellow", "red"] = "yellow"


@dataclass(frozen=True)
class InjuryEvent(GameEvent):
    """A player going down injured.

    Parameters
    ----------
    minute : int
        Simulated minute of the injury.
    description : str
        Commentary line for the injury.
    home_team : bool
        Side of the injured player.
    player : Player | None, optional
        Injured player.
    importance : {"low", "medium", "high"}, default="medium"
        Display prominence.
    """

    kind: ClassVar[str] = "injury"
