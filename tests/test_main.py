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
"""Tests for the command line entry point."""

from matchday.main import main, parse_args
from matchday.models.team import Team
from matchday.utils.roster import save_roster_to_json

from conftest import build_player


class TestCommandLine:
    """Tests for argument handling and instant runs."""

    def test_defaults(self) -> None:
        args = parse_args([])
        assert args.duration == 90
        assert args.speed == 5
        assert args.difficulty == "medium"
        assert args.roster is None
        assert not args.instant

    def test_instant_generated_match(self, capsys) -> None:
        assert main(["--instant", "--duration", "10", "--seed", "3"]) == 0
        out = capsys.readouterr().out
        assert "Final Score: Matchday XI" in out
        assert "Match rating:" in out

    def test_roster_file(self, tmp_path, eleven, capsys) -> None:
        path = tmp_path / "team.json"
        save_roster_to_json(Team(name="File FC", players=eleven), str(path))
        assert main(["--instant", "--duration", "5", "--roster", str(path), "--log-dir", str(tmp_path / "logs")]) == 0
        assert "Final Score: File FC" in capsys.readouterr().out
        assert list((tmp_path / "logs").glob("match_debug_*.txt"))

    def test_missing_roster_falls_back(self, tmp_path, capsys) -> None:
        assert main(["--instant", "--duration", "5", "--roster", str(tmp_path / "none.json")]) == 0
        out = capsys.readouterr().out
        assert "Falling back to a generated squad" in out

    def test_invalid_settings(self, capsys) -> None:
        assert main(["--instant", "--speed", "12"]) == 2
        assert "Invalid settings" in capsys.readouterr().out

    def test_summary_lists_player_names(self, tmp_path, eleven, capsys) -> None:
        path = tmp_path / "team.json"
        save_roster_to_json(Team(name="File FC", players=eleven), str(path))
        assert main(["--instant", "--duration", "5", "--seed", "1", "--roster", str(path)]) == 0
        out = capsys.readouterr().out
        for player in eleven:
            assert f"  {player.name}" in out

    def test_empty_roster_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "empty.json"
        save_roster_to_json(Team(name="Empty FC"), str(path))
        assert main(["--instant", "--roster", str(path)]) == 2
        out = capsys.readouterr().out
        assert "Invalid roster" in out
        assert "kick off" not in out

    def test_duplicate_ids_in_roster_file(self, tmp_path, capsys) -> None:
        path = tmp_path / "clones.json"
        save_roster_to_json(Team(name="Clones", players=[build_player("1", "GK"), build_player("1", "ST")]), str(path))
        assert main(["--instant", "--roster", str(path)]) == 2
        assert "Duplicate player id '1'" in capsys.readouterr().out
