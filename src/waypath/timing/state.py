"""
Time-annotated path samples.
"""

from dataclasses import dataclass

from waypath.geometry.pose import CurvedPose, Pose2d, lerp


@dataclass(frozen=True)
class TimedState:
    """
    A path sample annotated with timing.

    Attributes:
        state: Curvature-annotated pose
        distance: Arc length from the start of the trajectory
        t: Elapsed time from the start of the trajectory (s)
        velocity: Signed velocity; negative while driving in reverse
        acceleration: Signed acceleration over the following interval
    """

    state: CurvedPose
    distance: float = 0.0
    t: float = 0.0
    velocity: float = 0.0
    acceleration: float = 0.0

    @property
    def pose(self) -> Pose2d:
        return self.state.pose

    @property
    def curvature(self) -> float:
        return self.state.curvature

    @property
    def dcurvature_ds(self) -> float:
        return self.state.dcurvature_ds

    def interpolate(self, other: "TimedState", fraction: float) -> "TimedState":
        """
        Linear blend towards ``other``; heading follows the shortest arc.

        Acceleration is piecewise constant, so the interval's value (this
        state's) is kept.
        """
        if fraction <= 0.0:
            return self
        if fraction >= 1.0:
            return other
        return TimedState(
            state=self.state.interpolate(other.state, fraction),
            distance=lerp(self.distance, other.distance, fraction),
            t=lerp(self.t, other.t, fraction),
            velocity=lerp(self.velocity, other.velocity, fraction),
            acceleration=self.acceleration,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "t": self.t,
            "s": self.distance,
            "x": self.state.x,
            "y": self.state.y,
            "heading": self.state.heading,
            "curvature": self.state.curvature,
            "dcurvature_ds": self.state.dcurvature_ds,
            "velocity": self.velocity,
            "acceleration": self.acceleration,
        }
