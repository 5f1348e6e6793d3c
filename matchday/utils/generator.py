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
"""Utilities that synthesise test players and squads for quick simulations."""
import random
from typing import Dict, List, Optional

from matchday.models.player import POSITION_CODES, Player, PlayerAttributes
from matchday.models.team import Team

POSITION_IMPORTANT_ATTRIBUTES = {
    "GK": ["marking", "power", "mobility"],
    "CB": ["marking", "power"],
    "LB": ["mobility", "marking", "passing"],
    "RB": ["mobility", "marking", "passing"],
    "CDM": ["marking", "passing", "power"],
    "CM": ["passing", "control"],
    "CAM": ["passing", "control", "finishing"],
    "LW": ["mobility", "control", "finishing"],
    "RW": ["mobility", "control", "finishing"],
    "ST": ["finishing", "mobility", "power"],
}

FORMATIONS: Dict[str, Dict[str, int]] = {
    "4-4-2": {"GK": 1, "RB": 1, "CB": 2, "LB": 1, "CM": 2, "LW": 1, "RW": 1, "ST": 2},
    "4-3-3": {"GK": 1, "RB": 1, "CB": 2, "LB": 1, "CDM": 1, "CM": 2, "LW": 1, "RW": 1, "ST": 1},
    "3-5-2": {"GK": 1, "CB": 3, "LB": 1, "RB": 1, "CDM": 1, "CM": 1, "CAM": 1, "ST": 2},
}

FIRST_NAMES = ["John", "James", "David", "Michael", "Robert", "Carlos", "Juan", "Luis"]
LAST_NAMES = ["Smith", "Johnson", "Williams", "Brown", "Jones", "Garcia", "Rodriguez"]


def generate_random_player(
    id: int,
    name: Optional[str] = None,
    position: Optional[str] = None,
    rng: Optional[random.Random] = None,
) -> Player:
    """Generate a player with random attributes.

    Parameters
    ----------
    id : int
        Identifier assigned to the created player; stored as a string.
    name : Optional[str]
        Human-readable name to apply; a pseudo-random name is chosen when omitted.
    position : Optional[str]
        Position influencing attribute weighting; random when ``None``.
    rng : random.Random | None, optional
        Random source; a fresh generator is used when omitted.

    Returns
    -------
    Player
        A newly constructed player with stochastic attribute scores and a
        derived overall rating.
    """
    rng = rng or random.Random()
    if name is None:
        name = f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}"

    if position is None:
        position = rng.choice(POSITION_CODES)

    important = POSITION_IMPORTANT_ATTRIBUTES.get(position, ["passing", "control"])

    def get_attribute(attribute: str) -> int:
        if attribute in important:
            return rng.randint(60, 90)
        return rng.randint(40, 80)

    attributes = PlayerAttributes(
        mobility=get_attribute("mobility"),
        finishing=get_attribute("finishing"),
        passing=get_attribute("passing"),
        control=get_attribute("control"),
        marking=get_attribute("marking"),
        power=get_attribute("power"),
    )
    return Player(player_id=str(id), name=name, position=position, attributes=attributes)


def generate_squad(
    name: Optional[str] = None,
    formation_name: str = "4-4-2",
    starting_player_id: int = 1,
    substitutes: int = 0,
    rng: Optional[random.Random] = None,
) -> Team:
    """Generate a squad with random players using the specified formation.

    Parameters
    ----------
    name : Optional[str]
        Squad name to apply; synthesised when ``None``.
    formation_name : str
        Formation blueprint to instantiate (for example ``"4-3-3"``).
    starting_player_id : int
        Identifier to use for the first generated player; increments for each additional player.
    substitutes : int, default=0
        Number of extra players in random positions added after the starting eleven.
    rng : random.Random | None, optional
        Random source; a fresh generator is used when omitted.

    Returns
    -------
    Team
        Team holding the starting eleven followed by any substitutes.

    Raises
    ------
    ValueError
        If ``formation_name`` is not a known formation.
    """
    rng = rng or random.Random()
    if formation_name not in FORMATIONS:
        raise ValueError(f"Unsupported formation: {formation_name}")

    if name is None:
        prefixes = ["FC", "United", "City", "Athletic", "Sporting"]
        cities = ["London", "Madrid", "Paris", "Milan", "Munich"]
        name = f"{rng.choice(cities)} {rng.choice(prefixes)}"

    players: List[Player] = []
    player_id = starting_player_id
    for position, count in FORMATIONS[formation_name].items():
        for _ in range(count):
            players.append(generate_random_player(player_id, position=position, rng=rng))
            player_id += 1

    for _ in range(substitutes):
        players.append(generate_random_player(player_id, rng=rng))
        player_id += 1

    return Team(name=name, players=players)
