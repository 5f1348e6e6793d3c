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
"""Minute-stepped match clock.

The clock separates simulated time from wall-clock pacing. :meth:`MatchClock.step`
advances exactly one minute and never sleeps, so tests and batch callers can
drive a whole match instantly through :meth:`MatchClock.ticks`. :meth:`MatchClock.run`
wraps the same loop with a pause between minutes for live playback, and checks a
``threading.Event`` at every pause so another thread can stop the match.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterator, Literal, Optional, Protocol

from matchday.engine.config import ENGINE_CONFIG, ClockConfig
from matchday.engine.errors import SimulationCancelled
from matchday.engine.events import GameEvent

ClockState = Literal["idle", "running", "completed", "cancelled"]
ProgressCallback = Callable[[int, Optional[GameEvent]], None]


class MinuteSource(Protocol):
    """Anything that can produce the optional event for a simulated minute."""

    def maybe_event(self, minute: int) -> Optional[GameEvent]:
        """Return the event for ``minute``, if one happens.

        Parameters
        ----------
        minute : int
            Simulated minute, 1-based.

        Returns
        -------
        GameEvent | None
            Event recorded during the minute.
        """
        ...


def minute_interval(game_speed: int, config: Optional[ClockConfig] = None) -> float:
    """Wall-clock pause between simulated minutes for ``game_speed``.

    Parameters
    ----------
    game_speed : int
        Playback pace from 1 to 10.
    config : ClockConfig | None, optional
        Pacing parameters; defaults to ``ENGINE_CONFIG.clock``.

    Returns
    -------
    float
        ``max(min_interval, base_interval / game_speed)`` in seconds.
    """
    cfg = config or ENGINE_CONFIG.clock
    return max(cfg.min_interval, cfg.base_interval / game_speed)


@dataclass(frozen=True)
class Tick:
    """Outcome of advancing the clock by one minute.

    Parameters
    ----------
    minute : int
        Minute that was just simulated.
    event : GameEvent | None
        Event produced during the minute, if any.
    """

    minute: int
    event: Optional[GameEvent]


class MatchClock:
    """Advance a match one simulated minute at a time.

    Parameters
    ----------
    generator : MinuteSource
        Source of per-minute events, usually an ``EventGenerator``.
    duration : int
        Number of minutes to simulate.
    interval : float, default=0.0
        Seconds to pause between minutes in :meth:`run`.
    max_wall_time : float | None, optional
        Total pause budget in seconds; once spent, remaining minutes run
        without pausing. ``None`` means no budget.
    cancel_event : threading.Event | None, optional
        Signal checked at every minute boundary. A private event is created
        when omitted so :meth:`stop` always works.
    """

    def __init__(
        self,
        generator: MinuteSource,
        duration: int,
        interval: float = 0.0,
        max_wall_time: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self.generator = generator
        self.duration = duration
        self.interval = interval
        self.max_wall_time = max_wall_time
        self.cancel_event = cancel_event or threading.Event()
        self.minute = 0
        self.state: ClockState = "idle"
        self.time_paused = 0.0

    @property
    def is_running(self) -> bool:
        """Return ``True`` while minutes remain to be simulated."""
        return self.state == "running"

    def step(self) -> Optional[Tick]:
        """Simulate the next minute.

        Returns
        -------
        Tick | None
            The minute and its optional event, or ``None`` once the configured
            duration has been reached.

        Raises
        ------
        SimulationCancelled
            If cancellation was requested before this minute started. A
            request arriving after the final minute is ignored.
        """
        if self.state in ("completed", "cancelled"):
            return None
        # a stop after the final minute leaves a finished match
        if self.minute >= self.duration:
            self.state = "completed"
            return None
        if self.cancel_event.is_set():
            self.state = "cancelled"
            raise SimulationCancelled(self.minute)

        self.state = "running"
        self.minute += 1
        event = self.generator.maybe_event(self.minute)
        return Tick(self.minute, event)

    def ticks(self) -> Iterator[Tick]:
        """Iterate over every remaining minute without pausing.

        Returns
        -------
        Iterator[Tick]
            One tick per simulated minute, in increasing minute order.
        """
        while True:
            tick = self.step()
            if tick is None:
                return
            yield tick

    def run(self, on_progress: Optional[ProgressCallback] = None) -> None:
        """Drive the match to completion, pausing between minutes.

        Parameters
        ----------
        on_progress : Callable[[int, GameEvent | None], None] | None, optional
            Called exactly once per minute with the minute and its event.

        Raises
        ------
        SimulationCancelled
            If :meth:`stop` is called or the cancel event is set mid-match.
        """
        for tick in self.ticks():
            if on_progress is not None:
                on_progress(tick.minute, tick.event)
            if tick.minute < self.duration:
                self._pause()

    def stop(self) -> None:
        """Request cancellation at the next minute boundary."""
        self.cancel_event.set()

    def _pause(self) -> None:
        """Wait out the inter-minute interval unless cancelled or over budget.

        Raises
        ------
        SimulationCancelled
            If cancellation is requested while waiting.
        """
        delay = self.interval
        if self.max_wall_time is not None:
            delay = min(delay, max(0.0, self.max_wall_time - self.time_paused))
        if delay <= 0:
            return
        started = time.monotonic()
        cancelled = self.cancel_event.wait(delay)
        self.time_paused += time.monotonic() - started
        if cancelled:
            self.state = "cancelled"
            raise SimulationCancelled(self.minute)
