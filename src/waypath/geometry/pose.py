"""
Planar pose primitives.

Poses live in the field frame: ``x`` and ``y`` are positions, ``heading`` is
in radians and kept normalized to ``(-pi, pi]``. All types are immutable.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

_EPSILON = 1e-9


def normalize_angle(angle: float) -> float:
    """Wrap an angle in radians to ``(-pi, pi]``."""
    wrapped = math.fmod(angle, 2.0 * math.pi)
    if wrapped <= -math.pi:
        wrapped += 2.0 * math.pi
    elif wrapped > math.pi:
        wrapped -= 2.0 * math.pi
    return wrapped


def shortest_arc(start: float, end: float) -> float:
    """Signed angle to turn from ``start`` to ``end`` along the shorter way."""
    return normalize_angle(end - start)


def lerp(a: float, b: float, fraction: float) -> float:
    return a + (b - a) * fraction


@dataclass(frozen=True)
class Twist2d:
    """
    Planar velocity, or a pose delta over unit time.

    Attributes:
        dx: Forward component
        dy: Lateral component
        dtheta: Rotation (radians)
    """

    dx: float = 0.0
    dy: float = 0.0
    dtheta: float = 0.0

    def scaled(self, factor: float) -> Twist2d:
        return Twist2d(self.dx * factor, self.dy * factor, self.dtheta * factor)

    @property
    def norm(self) -> float:
        """Translational magnitude (ignores rotation)."""
        return math.hypot(self.dx, self.dy)


@dataclass(frozen=True)
class Pose2d:
    """
    Position and heading in the plane.

    Example:
        >>> a = Pose2d(1.0, 0.0, math.pi / 2)
        >>> a.transform_by(Pose2d(1.0, 0.0, 0.0))
        Pose2d(x=1.0, y=1.0, heading=1.5707963267948966)
    """

    x: float = 0.0
    y: float = 0.0
    heading: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "heading", normalize_angle(self.heading))

    @classmethod
    def from_degrees(cls, x: float, y: float, heading_deg: float) -> Pose2d:
        return cls(x, y, math.radians(heading_deg))

    @property
    def heading_degrees(self) -> float:
        return math.degrees(self.heading)

    def transform_by(self, other: Pose2d) -> Pose2d:
        """Compose ``other`` onto this pose (``other`` is expressed in this pose's frame)."""
        cos_h = math.cos(self.heading)
        sin_h = math.sin(self.heading)
        return Pose2d(
            self.x + cos_h * other.x - sin_h * other.y,
            self.y + sin_h * other.x + cos_h * other.y,
            self.heading + other.heading,
        )

    def inverse(self) -> Pose2d:
        cos_h = math.cos(self.heading)
        sin_h = math.sin(self.heading)
        return Pose2d(
            -cos_h * self.x - sin_h * self.y,
            sin_h * self.x - cos_h * self.y,
            -self.heading,
        )

    def relative_to(self, origin: Pose2d) -> Pose2d:
        """Express this pose in the frame of ``origin``."""
        return origin.inverse().transform_by(self)

    def distance(self, other: Pose2d) -> float:
        """Euclidean distance between the two positions."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def is_coincident(self, other: Pose2d, tolerance: float = _EPSILON) -> bool:
        return self.distance(other) <= tolerance

    def interpolate(self, other: Pose2d, fraction: float) -> Pose2d:
        """Linear position, shortest-arc heading."""
        if fraction <= 0.0:
            return self
        if fraction >= 1.0:
            return other
        return Pose2d(
            lerp(self.x, other.x, fraction),
            lerp(self.y, other.y, fraction),
            self.heading + shortest_arc(self.heading, other.heading) * fraction,
        )

    @staticmethod
    def exp(twist: Twist2d) -> Pose2d:
        """Pose reached by following ``twist`` for unit time along a constant-curvature arc."""
        sin_t = math.sin(twist.dtheta)
        cos_t = math.cos(twist.dtheta)
        if abs(twist.dtheta) < _EPSILON:
            s = 1.0 - twist.dtheta**2 / 6.0
            c = 0.5 * twist.dtheta
        else:
            s = sin_t / twist.dtheta
            c = (1.0 - cos_t) / twist.dtheta
        return Pose2d(
            twist.dx * s - twist.dy * c,
            twist.dx * c + twist.dy * s,
            twist.dtheta,
        )

    def log(self) -> Twist2d:
        """Inverse of :meth:`exp`."""
        dtheta = self.heading
        half = 0.5 * dtheta
        cos_minus_one = math.cos(dtheta) - 1.0
        if abs(cos_minus_one) < _EPSILON:
            half_tan = 1.0 - dtheta**2 / 12.0
        else:
            half_tan = -(half * math.sin(dtheta)) / cos_minus_one
        return Twist2d(
            half_tan * self.x + half * self.y,
            -half * self.x + half_tan * self.y,
            dtheta,
        )


FLIP = Pose2d(0.0, 0.0, math.pi)
"""Half-turn in place; composing a pose with it reverses its facing."""


@dataclass(frozen=True)
class CurvedPose:
    """
    A pose annotated with path curvature.

    Attributes:
        pose: Position and heading
        curvature: Signed inverse turning radius (positive turns left)
        dcurvature_ds: Rate of change of curvature per unit arc length
    """

    pose: Pose2d
    curvature: float = 0.0
    dcurvature_ds: float = 0.0

    @property
    def x(self) -> float:
        return self.pose.x

    @property
    def y(self) -> float:
        return self.pose.y

    @property
    def heading(self) -> float:
        return self.pose.heading

    def distance(self, other: CurvedPose) -> float:
        return self.pose.distance(other.pose)

    def transform_by(self, transform: Pose2d) -> CurvedPose:
        return CurvedPose(self.pose.transform_by(transform), self.curvature, self.dcurvature_ds)

    def flipped_curvature(self) -> CurvedPose:
        return CurvedPose(self.pose, -self.curvature, -self.dcurvature_ds)

    def interpolate(self, other: CurvedPose, fraction: float) -> CurvedPose:
        if fraction <= 0.0:
            return self
        if fraction >= 1.0:
            return other
        return CurvedPose(
            self.pose.interpolate(other.pose, fraction),
            lerp(self.curvature, other.curvature, fraction),
            lerp(self.dcurvature_ds, other.dcurvature_ds, fraction),
        )
