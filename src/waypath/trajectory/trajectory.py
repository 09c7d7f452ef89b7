"""
Immutable, time-indexed trajectory.

A :class:`Trajectory` is built once by the timing integrator and then only
read. It is safe to share between threads without synchronization because
nothing mutates it after construction.
"""

from typing import Iterator, Sequence

import numpy as np

from waypath.core.exceptions import TrajectoryError
from waypath.timing.state import TimedState
from waypath.trajectory.iterator import TrajectoryIterator

# Slack allowed when checking monotonicity and the zero origin.
_TOLERANCE = 1e-9


def _bracket(keys: np.ndarray, value: float) -> int:
    """Index ``i`` of the interval ``keys[i] <= value < keys[i + 1]``."""
    index = int(np.searchsorted(keys, value, side="right")) - 1
    return min(max(index, 0), len(keys) - 2)


class Trajectory:
    """
    Time-ordered sequence of :class:`TimedState`.

    Args:
        states: Non-empty sequence starting at ``t = 0`` and ``s = 0`` with
            non-decreasing time and arc length

    Raises:
        TrajectoryError: If ``states`` violates the ordering invariants
    """

    def __init__(self, states: Sequence[TimedState]):
        if not states:
            raise TrajectoryError("A trajectory needs at least one state")

        self._states = tuple(states)
        self._times = np.array([s.t for s in self._states], dtype=float)
        self._distances = np.array([s.distance for s in self._states], dtype=float)

        if abs(self._times[0]) > _TOLERANCE or abs(self._distances[0]) > _TOLERANCE:
            raise TrajectoryError(
                "Trajectory must start at t = 0 and s = 0",
                details={"t0": float(self._times[0]), "s0": float(self._distances[0])},
            )
        for name, values in (("time", self._times), ("distance", self._distances)):
            steps = np.diff(values)
            if steps.size and steps.min() < -_TOLERANCE:
                raise TrajectoryError(
                    f"Trajectory {name} must be non-decreasing",
                    details={"index": int(np.argmin(steps)) + 1},
                )

        self._times.flags.writeable = False
        self._distances.flags.writeable = False

    # ─── Accessors ──────────────────────────────────────────────────────────

    @property
    def states(self) -> tuple[TimedState, ...]:
        return self._states

    @property
    def duration(self) -> float:
        """Total time from the first to the last state (s)."""
        return float(self._times[-1])

    @property
    def length(self) -> float:
        """Total arc length."""
        return float(self._distances[-1])

    @property
    def first_state(self) -> TimedState:
        return self._states[0]

    @property
    def last_state(self) -> TimedState:
        return self._states[-1]

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[TimedState]:
        return iter(self._states)

    def __getitem__(self, index: int) -> TimedState:
        return self._states[index]

    def __repr__(self) -> str:
        return (
            f"Trajectory(states={len(self)}, duration={self.duration:.3f}, "
            f"length={self.length:.3f})"
        )

    # ─── Queries ────────────────────────────────────────────────────────────

    def _interpolate(self, keys: np.ndarray, value: float) -> TimedState:
        if len(self._states) == 1:
            return self._states[0]
        index = _bracket(keys, value)
        start = float(keys[index])
        span = float(keys[index + 1]) - start
        if span <= 0.0:
            return self._states[index]
        return self._states[index].interpolate(
            self._states[index + 1], (value - start) / span
        )

    def sample_at_time(self, t: float) -> TimedState:
        """
        State at time ``t``.

        Times before the start return the first state; times at or past
        :attr:`duration` return the last state.
        """
        if t <= 0.0:
            return self.first_state
        if t >= self.duration:
            return self.last_state
        return self._interpolate(self._times, t)

    def sample_at_distance(self, distance: float) -> TimedState:
        """State at arc length ``distance``, clamped to ``[0, length]``."""
        if distance <= 0.0:
            return self.first_state
        if distance >= self.length:
            return self.last_state
        return self._interpolate(self._distances, distance)

    def iterator(self) -> TrajectoryIterator:
        """A fresh cursor positioned at the start of this trajectory."""
        return TrajectoryIterator(self)

    def resample(self, dt: float) -> list[TimedState]:
        """
        States at a fixed period, as a control loop would read them.

        The last element is always the final state.

        Raises:
            TrajectoryError: If ``dt`` is not positive
        """
        if dt <= 0.0:
            raise TrajectoryError("Resampling period must be positive", details={"dt": dt})
        cursor = self.iterator()
        samples = [cursor.current]
        while not cursor.is_done:
            samples.append(cursor.advance(dt))
        return samples

    def to_dict(self, dt: float | None = None) -> dict:
        """
        Plain-data export.

        Args:
            dt: When given, states are resampled at this period instead of
                listing every generated sample
        """
        states = self._states if dt is None else self.resample(dt)
        return {
            "duration": self.duration,
            "length": self.length,
            "states": [state.to_dict() for state in states],
        }
