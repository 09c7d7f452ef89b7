"""
Advancing cursor over a trajectory.

A follower running at a fixed control period calls :meth:`advance` once per
tick and reads the returned state. The cursor never wraps around: once it
reaches the end it keeps returning the final state and reports
:attr:`is_done`.
"""

from typing import TYPE_CHECKING

from waypath.timing.state import TimedState

if TYPE_CHECKING:
    from waypath.trajectory.trajectory import Trajectory


class TrajectoryIterator:
    """
    Time cursor over a :class:`Trajectory`.

    Example:
        >>> cursor = trajectory.iterator()
        >>> while not cursor.is_done:
        ...     reference = cursor.advance(0.02)
    """

    def __init__(self, trajectory: "Trajectory"):
        self._trajectory = trajectory
        self._progress = 0.0

    @property
    def trajectory(self) -> "Trajectory":
        return self._trajectory

    @property
    def progress(self) -> float:
        """Current time offset from the start (s)."""
        return self._progress

    @property
    def remaining(self) -> float:
        return self._trajectory.duration - self._progress

    @property
    def is_done(self) -> bool:
        return self._progress >= self._trajectory.duration

    @property
    def current(self) -> TimedState:
        return self._trajectory.sample_at_time(self._progress)

    def _clamp(self, t: float) -> float:
        return min(max(t, 0.0), self._trajectory.duration)

    def advance(self, dt: float) -> TimedState:
        """Move the cursor by ``dt`` seconds and return the state there."""
        self._progress = self._clamp(self._progress + dt)
        return self.current

    def preview(self, dt: float) -> TimedState:
        """State ``dt`` seconds ahead of the cursor, without moving it."""
        return self._trajectory.sample_at_time(self._clamp(self._progress + dt))

    def reset(self) -> None:
        self._progress = 0.0
