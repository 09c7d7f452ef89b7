"""
Arc-length indexed view over a dense sample sequence.
"""

from typing import Sequence

import numpy as np

from waypath.core.exceptions import DegenerateSplineError
from waypath.geometry.pose import CurvedPose


class DistanceView:
    """
    Samples indexed by cumulative arc length.

    ``distances[i]`` is the sum of Euclidean translation deltas from the
    first sample to sample ``i``; ``distances[0]`` is always zero.

    Example:
        >>> view = DistanceView(fit(waypoints))
        >>> midpoint = view.query(view.length / 2)
    """

    def __init__(self, samples: Sequence[CurvedPose]):
        if not samples:
            raise DegenerateSplineError("Cannot index an empty sample sequence")

        self._states = tuple(samples)
        xy = np.array([(state.x, state.y) for state in self._states], dtype=float)
        steps = np.hypot(*np.diff(xy, axis=0).T)
        self._distances = np.concatenate(([0.0], np.cumsum(steps)))

    @property
    def states(self) -> tuple[CurvedPose, ...]:
        return self._states

    @property
    def distances(self) -> np.ndarray:
        """Cumulative arc length per sample (read-only copy)."""
        return self._distances.copy()

    @property
    def length(self) -> float:
        return float(self._distances[-1])

    def __len__(self) -> int:
        return len(self._states)

    def distance_at(self, index: int) -> float:
        return float(self._distances[index])

    def query(self, distance: float) -> CurvedPose:
        """
        Interpolated sample at arc length ``distance``.

        Distances outside ``[0, length]`` are clamped to the nearest endpoint.
        """
        if distance <= 0.0:
            return self._states[0]
        if distance >= self.length:
            return self._states[-1]

        index = int(np.searchsorted(self._distances, distance, side="right")) - 1
        index = min(index, len(self._states) - 2)
        start = float(self._distances[index])
        span = float(self._distances[index + 1]) - start
        if span <= 0.0:
            return self._states[index]
        return self._states[index].interpolate(
            self._states[index + 1], (distance - start) / span
        )
