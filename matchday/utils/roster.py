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
"""Utilities for constructing rosters from serialized data sources.

Roster files exported by the team manager use camelCase keys and the older
attribute names (``pace``, ``shooting``, ``dribbling``, ``defending``,
``physical``). Both spellings are accepted here so an export can be fed to the
engine directly. Missing attributes default to 50.
"""
import json
from pathlib import Path
from typing import Optional

from matchday.models.player import Player, PlayerAttributes
from matchday.models.team import Team

ATTRIBUTE_ALIASES = {
    "mobility": ("mobility", "pace"),
    "finishing": ("finishing", "shooting"),
    "passing": ("passing",),
    "control": ("control", "dribbling"),
    "marking": ("marking", "defending"),
    "power": ("power", "physical"),
}


def _attribute_value(source: dict, name: str) -> int:
    """Read one attribute from ``source`` under any of its accepted keys.

    Parameters
    ----------
    source : dict
        Mapping holding the attribute values.
    name : str
        Canonical attribute name.

    Returns
    -------
    int
        The stored value, or 50 when no alias is present.
    """
    for key in ATTRIBUTE_ALIASES[name]:
        if key in source:
            return int(source[key])
    return 50


def player_from_dict(d: dict) -> Player:
    """Build a ``Player`` from a plain dictionary payload.

    Parameters
    ----------
    d : dict
        A mapping containing the serialized player information. Supported keys
        include ``id``, ``name``, ``position``, ``overallRating`` (or
        ``overall_rating``), career counters, and either a nested
        ``attributes`` mapping or flat attribute keys.

    Returns
    -------
    Player
        A fully initialised player instance with sane defaults for any missing
        attribute values.
    """
    attrs = d.get("attributes") or d
    attributes = PlayerAttributes(**{name: _attribute_value(attrs, name) for name in ATTRIBUTE_ALIASES})

    overall: Optional[int] = d.get("overallRating", d.get("overall_rating"))
    player_id = str(d.get("id", d.get("player_id", "0")))
    return Player(
        player_id=player_id,
        name=d.get("name", f"player_{player_id}"),
        position=d.get("position", "CM"),
        attributes=attributes,
        overall_rating=int(overall) if overall is not None else None,
        goals=d.get("goals", 0),
        assists=d.get("assists", 0),
        appearances=d.get("appearances", 0),
        clean_sheets=d.get("cleanSheets", d.get("clean_sheets", 0)),
    )


def player_to_dict(player: Player) -> dict:
    """Serialise ``player`` using the same keys :func:`player_from_dict` reads.

    Parameters
    ----------
    player : Player
        Player to serialise.

    Returns
    -------
    dict
        JSON-compatible mapping.
    """
    return {
        "id": player.player_id,
        "name": player.name,
        "position": player.position,
        "overallRating": player.overall_rating,
        "attributes": {name: getattr(player.attributes, name) for name in ATTRIBUTE_ALIASES},
        "goals": player.goals,
        "assists": player.assists,
        "appearances": player.appearances,
        "cleanSheets": player.clean_sheets,
    }


def load_roster_from_json(path: str) -> Team:
    """Load a squad from a team export.

    Parameters
    ----------
    path : str
        The filesystem path to a JSON document with ``name`` and ``players``
        keys.

    Returns
    -------
    Team
        Squad ready for simulation; match history is not imported.

    Raises
    ------
    FileNotFoundError
        Raised when ``path`` does not exist.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Roster JSON not found: {path}")

    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)

    players = [player_from_dict(pl) for pl in data.get("players", [])]
    return Team(name=data.get("name", "Home"), players=players)


def save_roster_to_json(team: Team, path: str) -> None:
    """Write ``team``'s roster in the format :func:`load_roster_from_json` reads.

    Parameters
    ----------
    team : Team
        Squad to export.
    path : str
        Destination file; parent directories must exist.
    """
    payload = {"name": team.name, "players": [player_to_dict(p) for p in team.players]}
    with Path(path).open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2)
