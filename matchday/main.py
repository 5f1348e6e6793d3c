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
"""Command line entry point for watching a simulated match."""
import argparse
import random
import threading
from pathlib import Path
from typing import Iterable, List, Optional

from matchday.engine.errors import InvalidRosterError, SimulationCancelled
from matchday.engine.events import GameEvent
from matchday.engine.match_engine import MatchEngine, SimulationResult, check_roster
from matchday.engine.settings import DIFFICULTIES, PITCH_CONDITIONS, WEATHER_CONDITIONS, SimulationSettings
from matchday.models.team import Team
from matchday.utils.debug import MatchDebugger
from matchday.utils.generator import generate_squad  # Fallback if no roster file
from matchday.utils.roster import load_roster_from_json


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    """Parse command line options.

    Parameters
    ----------
    argv : Iterable[str] | None, optional
        Arguments to parse; ``sys.argv[1:]`` when omitted.

    Returns
    -------
    argparse.Namespace
        Parsed options.
    """
    parser = argparse.ArgumentParser(description="Simulate a football match for one squad")
    parser.add_argument("--roster", type=Path, help="Team export JSON (default: a generated squad)")
    parser.add_argument("--duration", type=int, default=90, help="Match length in minutes (default: 90)")
    parser.add_argument("--speed", type=int, default=5, help="Playback speed from 1 to 10 (default: 5)")
    parser.add_argument("--difficulty", choices=DIFFICULTIES, default="medium")
    parser.add_argument("--opponent-strength", type=float, default=75.0)
    parser.add_argument("--weather", choices=WEATHER_CONDITIONS, default="sunny")
    parser.add_argument("--pitch", choices=PITCH_CONDITIONS, default="excellent")
    parser.add_argument("--seed", type=int, help="Random seed for a reproducible match")
    parser.add_argument("--instant", action="store_true", help="Skip real-time pacing")
    parser.add_argument("--log-dir", type=Path, help="Write a match log into this directory")
    return parser.parse_args(argv)


def load_team(roster: Optional[Path], rng: random.Random) -> Team:
    """Load the squad to simulate, generating one when no usable file is given.

    Parameters
    ----------
    roster : Path | None
        Team export to load.
    rng : random.Random
        Random source for a generated squad.

    Returns
    -------
    Team
        Squad to simulate.
    """
    if roster is not None:
        try:
            return load_roster_from_json(str(roster))
        except (OSError, ValueError, KeyError) as e:
            print(f"Error loading roster from {roster}: {e}")
            print("Falling back to a generated squad...")
    return generate_squad("Matchday XI", "4-3-3", rng=rng)


def print_event(minute: int, event: Optional[GameEvent]) -> None:
    """Progress callback that echoes notable events.

    Parameters
    ----------
    minute : int
        Simulated minute.
    event : GameEvent | None
        Headline event for the minute.
    """
    if event is not None:
        print(f"{minute:>3}': {event.description}")


def print_summary(team: Team, result: SimulationResult) -> None:
    """Print the final score and the per-player lines.

    Parameters
    ----------
    team : Team
        Simulated squad.
    result : SimulationResult
        Finished match.
    """
    print(f"\nFinal Score: {team.name} {result.home_score} - {result.away_score} Opponent")
    print(f"Match rating: {result.match_rating:.1f}")
    for line in result.player_stats:
        print(f"  {team.get_player(line.player_id).name:<24} G {line.goals}  A {line.assists}  {line.rating:.1f}")


def main(argv: Optional[Iterable[str]] = None) -> int:
    """Run one match and print it as it unfolds.

    Parameters
    ----------
    argv : Iterable[str] | None, optional
        Command line arguments.

    Returns
    -------
    int
        Process exit status.
    """
    args = parse_args(argv)
    rng = random.Random(args.seed)
    team = load_team(args.roster, rng)
    try:
        settings = SimulationSettings(
            game_speed=args.speed,
            duration=args.duration,
            difficulty=args.difficulty,
            opponent_strength=args.opponent_strength,
            weather=args.weather,
            pitch=args.pitch,
        )
    except ValueError as e:
        print(f"Invalid settings: {e}")
        return 2
    try:
        check_roster(team.players)
    except InvalidRosterError as e:
        print(f"Invalid roster: {e}")
        return 2

    debugger = MatchDebugger(args.log_dir) if args.log_dir else None
    engine = MatchEngine(team.players, settings, rng=rng, debugger=debugger)
    outcome: List[SimulationResult] = []
    errors: List[Exception] = []

    def run() -> None:
        try:
            outcome.append(engine.simulate(on_progress=print_event, paced=not args.instant))
        except Exception as e:  # re-raised on the main thread below
            errors.append(e)

    print(f"{team.name} ({len(team.players)} players) kick off...")
    # Non-daemon so the main thread can join it for a clean shutdown
    engine_thread = threading.Thread(target=run)
    engine_thread.start()
    try:
        while engine_thread.is_alive():
            engine_thread.join(timeout=0.1)
    except KeyboardInterrupt:
        print("\nMatch simulation interrupted.")
        engine.stop()
        engine_thread.join()
    finally:
        if debugger:
            debugger.close()

    if errors:
        if isinstance(errors[0], SimulationCancelled):
            return 130
        raise errors[0]
    print_summary(team, outcome[0])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
