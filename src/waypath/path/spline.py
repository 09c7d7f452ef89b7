"""
Quintic Hermite spline segments between two planar poses.

Each segment is parameterized over ``t`` in ``[0, 1]``. The end tangents point
along the waypoint headings with magnitude proportional to the chord length,
and the end second derivatives are zero, so heading is continuous across
waypoints and curvature is zero (hence continuous) at every junction.

Reference:
    Sprunk, "Planning Motion Trajectories for Mobile Robots Using Splines" (2008)
"""

import math

from numpy.polynomial import Polynomial

from waypath.core.exceptions import DegenerateSplineError
from waypath.geometry.pose import CurvedPose, Pose2d

# Tangent magnitude relative to the chord length.
TANGENT_SCALE = 1.2


def _quintic(p0: float, v0: float, a0: float, p1: float, v1: float, a1: float) -> Polynomial:
    """Quintic matching position, velocity and acceleration at both ends."""
    return Polynomial(
        [
            p0,
            v0,
            0.5 * a0,
            -10.0 * p0 - 6.0 * v0 - 1.5 * a0 + 0.5 * a1 - 4.0 * v1 + 10.0 * p1,
            15.0 * p0 + 8.0 * v0 + 1.5 * a0 - a1 + 7.0 * v1 - 15.0 * p1,
            -6.0 * p0 - 3.0 * v0 - 0.5 * a0 + 0.5 * a1 - 3.0 * v1 + 6.0 * p1,
        ]
    )


class QuinticHermiteSpline:
    """
    A single spline segment from ``start`` to ``end``.

    Args:
        start: Pose at ``t = 0``
        end: Pose at ``t = 1``

    Raises:
        DegenerateSplineError: If the two positions coincide (no defined tangent)
    """

    def __init__(self, start: Pose2d, end: Pose2d):
        chord = start.distance(end)
        if chord <= 1e-9:
            raise DegenerateSplineError(
                "Cannot fit a spline between coincident waypoints",
                details={"start": (start.x, start.y), "end": (end.x, end.y)},
            )

        self.start = start
        self.end = end

        scale = TANGENT_SCALE * chord
        self._x = _quintic(
            start.x, scale * math.cos(start.heading), 0.0,
            end.x, scale * math.cos(end.heading), 0.0,
        )
        self._y = _quintic(
            start.y, scale * math.sin(start.heading), 0.0,
            end.y, scale * math.sin(end.heading), 0.0,
        )
        self._dx = self._x.deriv(1)
        self._dy = self._y.deriv(1)
        self._ddx = self._x.deriv(2)
        self._ddy = self._y.deriv(2)
        self._dddx = self._x.deriv(3)
        self._dddy = self._y.deriv(3)

    def point(self, t: float) -> tuple[float, float]:
        return float(self._x(t)), float(self._y(t))

    def heading(self, t: float) -> float:
        return math.atan2(self._dy(t), self._dx(t))

    def curvature(self, t: float) -> float:
        dx, dy = self._dx(t), self._dy(t)
        ddx, ddy = self._ddx(t), self._ddy(t)
        speed_sq = dx * dx + dy * dy
        if speed_sq <= 0.0:
            raise DegenerateSplineError("Spline tangent vanishes", details={"t": t})
        return float((dx * ddy - ddx * dy) / speed_sq**1.5)

    def dcurvature_ds(self, t: float) -> float:
        """Derivative of curvature with respect to arc length."""
        dx, dy = self._dx(t), self._dy(t)
        ddx, ddy = self._ddx(t), self._ddy(t)
        dddx, dddy = self._dddx(t), self._dddy(t)
        speed_sq = dx * dx + dy * dy
        if speed_sq <= 0.0:
            raise DegenerateSplineError("Spline tangent vanishes", details={"t": t})
        cross = dx * ddy - ddx * dy
        dcross = dx * dddy - dddx * dy
        return float((dcross * speed_sq - 3.0 * cross * (dx * ddx + dy * ddy)) / speed_sq**3)

    def pose(self, t: float) -> Pose2d:
        x, y = self.point(t)
        return Pose2d(x, y, self.heading(t))

    def curved_pose(self, t: float) -> CurvedPose:
        return CurvedPose(self.pose(t), self.curvature(t), self.dcurvature_ds(t))
