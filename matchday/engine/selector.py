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
"""Rating-weighted selection of event participants."""

from __future__ import annotations

import random
from typing import List, Optional, Sequence

from matchday.engine.config import ENGINE_CONFIG, PositionConfig
from matchday.models.player import Player


class WeightedSelector:
    """Pick roster players with probability proportional to their overall rating.

    Parameters
    ----------
    roster : Sequence[Player]
        Players eligible for selection. The sequence is copied, never mutated.
    rng : random.Random
        Random source used for every draw.
    config : PositionConfig | None, optional
        Position groups; defaults to ``ENGINE_CONFIG.positions``.
    """

    def __init__(
        self,
        roster: Sequence[Player],
        rng: random.Random,
        config: Optional[PositionConfig] = None,
    ) -> None:
        self.roster: List[Player] = list(roster)
        self.rng = rng
        self.config = config or ENGINE_CONFIG.positions

    def pool(self, position_group: Optional[str] = None) -> List[Player]:
        """Return the candidates for ``position_group``.

        Parameters
        ----------
        position_group : str | None, optional
            Group name (``"attacker"``, ``"midfielder"``, ``"defender"`` or
            ``"goalkeeper"``). ``None`` selects the whole roster.

        Returns
        -------
        List[Player]
            Roster players in the group, or the full roster when the group is
            unknown or has no members.
        """
        if position_group is None:
            return self.roster
        codes = self.config.groups.get(position_group)
        if codes is None:
            return self.roster
        members = [p for p in self.roster if p.position in codes]
        return members or self.roster

    def select(self, position_group: Optional[str] = None) -> Optional[Player]:
        """Draw one player from the pool for ``position_group``.

        Parameters
        ----------
        position_group : str | None, optional
            Group to draw from; see :meth:`pool`.

        Returns
        -------
        Player | None
            Selected player, or ``None`` only when the roster is empty.
        """
        candidates = self.pool(position_group)
        if not candidates:
            return None
        weights = [p.overall_rating or 0 for p in candidates]
        total = sum(weights)
        if total <= 0:
            return candidates[0]

        remaining = self.rng.random() * total
        for candidate, weight in zip(candidates, weights):
            remaining -= weight
            if remaining <= 0:
                return candidate
        # float drift can leave a sliver above zero after the last candidate
        return candidates[0]
