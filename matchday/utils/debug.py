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
"""Structured logging utilities used to trace match simulations."""
import time
from collections import deque
from pathlib import Path
from threading import Lock
from typing import Deque, List, Optional, TextIO, Tuple


class MatchDebugger:
    """Helper object that streams structured match telemetry to disk.

    Parameters
    ----------
    output_dir : str | Path, default="debug_logs"
        Directory where new session logs are created; created automatically when missing.
    """

    def __init__(self, output_dir: str | Path = "debug_logs") -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.log_file: Optional[TextIO] = None
        self.log_path: Optional[Path] = None
        self.session_start = time.strftime("%Y%m%d_%H%M%S")
        self._lock = Lock()
        self._line_number = 1
        self._recent_events: Deque[Tuple[int, str]] = deque(maxlen=200)
        self.start_new_session()

    def start_new_session(self) -> None:
        """Start a new debug logging session."""
        if self.log_file:
            self.log_file.close()

        self.log_path = self.output_dir / f"match_debug_{self.session_start}.txt"
        self.log_file = open(self.log_path, "w", encoding="utf-8")
        self.log_file.write(f"=== Match Debug Session: {time.strftime('%Y-%m-%d %H:%M:%S')} ===\n\n")

    def log_match_start(self, roster_size: int, duration: int, home_advantage: float) -> None:
        """Log the parameters a simulation starts with.

        Parameters
        ----------
        roster_size : int
            Number of players on the home roster.
        duration : int
            Match length in simulated minutes.
        home_advantage : float
            Probability that a contested goal goes to the home side.
        """
        self._write_log(
            "MATCH_START",
            f"Players: {roster_size} | Duration: {duration} min | Home advantage: {home_advantage:.3f}",
        )

    def log_minute(self, minute: int, home_score: int, away_score: int) -> None:
        """Log the score at the end of a simulated minute.

        Parameters
        ----------
        minute : int
            Minute that just finished.
        home_score : int
            Current home goals.
        away_score : int
            Current away goals.
        """
        self._write_log("MINUTE", f"Minute: {minute} | Score: {home_score}-{away_score}")

    def log_match_event(self, minute: int, event_type: str, description: str) -> None:
        """Log a match event (goal, save, etc.).

        Parameters
        ----------
        minute : int
            Simulated minute of the event.
        event_type : str
            Short label identifying the event category.
        description : str
            Human-readable summary of the event.
        """
        self._write_log("MATCH_EVENT", f"Minute: {minute} | Event: {event_type} | Details: {description}")

    def log_match_end(self, home_score: int, away_score: int, match_rating: float) -> None:
        """Log the final score and match rating.

        Parameters
        ----------
        home_score : int
            Final home goals.
        away_score : int
            Final away goals.
        match_rating : float
            Overall match rating on the 1-10 scale.
        """
        self._write_log("MATCH_END", f"Score: {home_score}-{away_score} | Rating: {match_rating:.1f}")

    def log_error(self, error_type: str, description: str) -> None:
        """Log an error or warning.

        Parameters
        ----------
        error_type : str
            Label describing the error classification.
        description : str
            Human-readable explanation of the issue.
        """
        self._write_log("ERROR", f"Type: {error_type} | Details: {description}")

    def _write_log(self, event_type: str, details: str) -> None:
        """Write a log entry to the file.

        Parameters
        ----------
        event_type : str
            Category label for the log entry.
        details : str
            Formatted message body to persist.
        """
        timestamp = time.strftime("%H:%M:%S")
        log_entry = f"[{timestamp}] {event_type}: {details}"

        with self._lock:
            line_no = self._line_number
            self._line_number += 1
            self._recent_events.append((line_no, log_entry))

            if self.log_file:
                self.log_file.write(f"{log_entry}\n")
                self.log_file.flush()

    def get_recent_events(self, limit: int = 20) -> List[str]:
        """Return the latest debug entries with line numbers for live displays.

        Parameters
        ----------
        limit : int
            Maximum number of entries to return.

        Returns
        -------
        List[str]
            Up to ``limit`` most recent log lines with prefixed line numbers.
        """
        with self._lock:
            selected = list(self._recent_events)[-limit:]
        return [f"{line_no:05d} {entry}" for line_no, entry in selected]

    def close(self) -> None:
        """Close the log file."""
        if self.log_file:
            self.log_file.close()
            self.log_file = None
