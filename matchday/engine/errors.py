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
"""Exceptions raised by the match engine."""


class InvalidRosterError(ValueError):
    """Raised when a simulation is requested for an unusable roster.

    Parameters
    ----------
    message : str, optional
        Explanation of what is wrong with the roster.
    """

    def __init__(self, message: str = "Roster must contain at least one player") -> None:
        super().__init__(message)


class SimulationInvariantError(RuntimeError):
    """Raised when a finished simulation breaks one of its guarantees.

    Parameters
    ----------
    message : str
        Description of the violated guarantee.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class SimulationCancelled(RuntimeError):
    """Raised when a running simulation is cancelled at a minute boundary.

    Parameters
    ----------
    minute : int
        Last simulated minute that completed before cancellation.
    """

    def __init__(self, minute: int) -> None:
        super().__init__(f"Simulation cancelled after minute {minute}")
        self.minute = minute
