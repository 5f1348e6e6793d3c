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
"""Run a batch of instant matches and print scoring averages."""
import random
from pathlib import Path
from statistics import mean

from matchday.engine.match_engine import MatchEngine
from matchday.engine.settings import SimulationSettings
from matchday.utils.generator import generate_squad
from matchday.utils.roster import load_roster_from_json


def run_batch(matches: int = 200, seed: int = 7) -> None:
    """Simulate ``matches`` games back to back without pacing.

    Parameters
    ----------
    matches : int
        Number of matches to play (default 200).
    seed : int
        Seed for the shared random source, so a batch can be replayed.
    """
    rng = random.Random(seed)
    # Load the squad from players.json when present
    data_path = Path(__file__).parent.parent / "data" / "players.json"
    team = load_roster_from_json(str(data_path)) if data_path.exists() else generate_squad(rng=rng)

    settings = SimulationSettings()
    home_goals = []
    away_goals = []
    ratings = []
    for _ in range(matches):
        result = MatchEngine(team.players, settings, rng=rng).simulate(paced=False)
        home_goals.append(result.home_score)
        away_goals.append(result.away_score)
        ratings.append(result.match_rating)

    print(f"{team.name}: {matches} matches")
    print(f"  avg goals for     {mean(home_goals):.2f}")
    print(f"  avg goals against {mean(away_goals):.2f}")
    print(f"  avg match rating  {mean(ratings):.2f}")


if __name__ == "__main__":
    run_batch()
