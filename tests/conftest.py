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
"""Shared fixtures for the engine test-suite."""

import random
from collections import deque
from typing import Callable, Iterable, Optional, Sequence

import pytest

from matchday.models.player import Player, PlayerAttributes


class ScriptedRandom(random.Random):
    """Random source that replays fixed draws so outcomes can be asserted exactly.

    Parameters
    ----------
    values : Iterable[float]
        Values returned by successive :meth:`random` calls.
    choices : Iterable[str], optional
        Items returned by successive :meth:`choice` calls.
    noise : float, default=0.0
        Value returned by every :meth:`uniform` call.
    """

    def __init__(self, values: Iterable[float], choices: Iterable[str] = (), noise: float = 0.0) -> None:
        super().__init__(0)
        self.values = deque(values)
        self.choices = deque(choices)
        self.noise = noise

    def random(self) -> float:
        """Return the next scripted value.

        Returns
        -------
        float
            Next value from the script.
        """
        return self.values.popleft()

    def choice(self, seq: Sequence) -> object:
        """Return the next scripted item, which must be in ``seq``.

        Parameters
        ----------
        seq : Sequence
            Candidates offered by the caller.

        Returns
        -------
        object
            The scripted item.
        """
        item = self.choices.popleft()
        assert item in seq
        return item

    def uniform(self, a: float, b: float) -> float:
        """Return the fixed noise value.

        Parameters
        ----------
        a : float
            Lower bound, ignored.
        b : float
            Upper bound, ignored.

        Returns
        -------
        float
            ``noise``.
        """
        return self.noise


def build_player(
    player_id: str,
    position: str = "CM",
    overall: Optional[int] = 70,
    name: Optional[str] = None,
) -> Player:
    """Create a player with flat attributes.

    Parameters
    ----------
    player_id : str
        Identifier for the player.
    position : str
        Position code.
    overall : int | None
        Explicit overall rating, or ``None`` to derive it.
    name : str | None
        Display name; ``"Player <id>"`` when omitted.

    Returns
    -------
    Player
        The new player.
    """
    attrs = PlayerAttributes(mobility=70, finishing=70, passing=70, control=70, marking=70, power=70)
    return Player(
        player_id=player_id,
        name=name or f"Player {player_id}",
        position=position,
        attributes=attrs,
        overall_rating=overall,
    )


@pytest.fixture
def make_player() -> Callable[..., Player]:
    return build_player


@pytest.fixture
def eleven() -> list:
    positions = ["GK", "RB", "CB", "CB", "LB", "CDM", "CM", "CAM", "LW", "RW", "ST"]
    return [build_player(str(i + 1), pos, 70 + i) for i, pos in enumerate(positions)]
