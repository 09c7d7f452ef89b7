"""
Tests for quintic Hermite spline segments.
"""

import math

import pytest

from waypath.core.exceptions import DegenerateSplineError
from waypath.geometry.pose import Pose2d
from waypath.path.spline import QuinticHermiteSpline


class TestQuinticHermiteSpline:
    """Tests for QuinticHermiteSpline."""

    def test_straight_segment(self):
        """Test collinear waypoints yield a straight, curvature-free segment."""
        spline = QuinticHermiteSpline(Pose2d(0.0, 0.0, 0.0), Pose2d(10.0, 0.0, 0.0))

        for t in (0.0, 0.2, 0.5, 0.9, 1.0):
            x, y = spline.point(t)
            assert y == pytest.approx(0.0, abs=1e-12)
            assert spline.heading(t) == pytest.approx(0.0, abs=1e-12)
            assert spline.curvature(t) == pytest.approx(0.0, abs=1e-12)

        assert spline.point(0.0) == pytest.approx((0.0, 0.0))
        assert spline.point(1.0) == pytest.approx((10.0, 0.0))

    def test_straight_segment_is_monotonic(self):
        spline = QuinticHermiteSpline(Pose2d(0.0, 0.0, 0.0), Pose2d(10.0, 0.0, 0.0))
        xs = [spline.point(i / 50)[0] for i in range(51)]
        assert all(b > a for a, b in zip(xs, xs[1:]))

    def test_endpoints_match_waypoints(self):
        start = Pose2d(1.0, -2.0, 0.3)
        end = Pose2d(6.0, 4.0, 1.4)
        spline = QuinticHermiteSpline(start, end)

        assert spline.point(0.0) == pytest.approx((1.0, -2.0))
        assert spline.point(1.0) == pytest.approx((6.0, 4.0))
        assert spline.heading(0.0) == pytest.approx(0.3)
        assert spline.heading(1.0) == pytest.approx(1.4)

    def test_zero_curvature_at_endpoints(self):
        """Test curvature vanishes at both ends so junctions stay continuous."""
        spline = QuinticHermiteSpline(Pose2d(0.0, 0.0, 0.0), Pose2d(5.0, 5.0, math.pi / 2))
        assert spline.curvature(0.0) == pytest.approx(0.0, abs=1e-9)
        assert spline.curvature(1.0) == pytest.approx(0.0, abs=1e-9)

    def test_left_turn_has_positive_curvature(self, quarter_turn_waypoints):
        spline = QuinticHermiteSpline(*quarter_turn_waypoints)
        assert spline.curvature(0.5) > 0.0

    def test_right_turn_has_negative_curvature(self):
        spline = QuinticHermiteSpline(Pose2d(0.0, 0.0, 0.0), Pose2d(5.0, -5.0, -math.pi / 2))
        assert spline.curvature(0.5) < 0.0

    @pytest.mark.parametrize("t", [0.2, 0.5, 0.8])
    def test_dcurvature_ds_matches_finite_difference(self, quarter_turn_waypoints, t):
        spline = QuinticHermiteSpline(*quarter_turn_waypoints)
        h = 1e-5
        ax, ay = spline.point(t - h)
        bx, by = spline.point(t + h)
        ds = math.hypot(bx - ax, by - ay)
        numeric = (spline.curvature(t + h) - spline.curvature(t - h)) / ds

        assert spline.dcurvature_ds(t) == pytest.approx(numeric, rel=1e-3, abs=1e-6)

    def test_curved_pose(self, quarter_turn_waypoints):
        spline = QuinticHermiteSpline(*quarter_turn_waypoints)
        state = spline.curved_pose(0.5)

        assert (state.x, state.y) == pytest.approx(spline.point(0.5))
        assert state.heading == pytest.approx(spline.heading(0.5))
        assert state.curvature == pytest.approx(spline.curvature(0.5))

    def test_coincident_waypoints_raise(self):
        with pytest.raises(DegenerateSplineError):
            QuinticHermiteSpline(Pose2d(1.0, 1.0, 0.0), Pose2d(1.0, 1.0, 1.0))
