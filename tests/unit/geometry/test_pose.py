"""
Tests for planar pose primitives.
"""

import math

import pytest

from waypath.geometry.pose import (
    FLIP,
    CurvedPose,
    Pose2d,
    Twist2d,
    normalize_angle,
    shortest_arc,
)


def assert_pose_close(actual: Pose2d, expected: Pose2d, tol: float = 1e-9) -> None:
    assert actual.x == pytest.approx(expected.x, abs=tol)
    assert actual.y == pytest.approx(expected.y, abs=tol)
    assert abs(normalize_angle(actual.heading - expected.heading)) < tol


class TestAngles:
    """Tests for angle helpers."""

    def test_normalize_wraps_into_half_open_range(self):
        assert normalize_angle(2.5 * math.pi) == pytest.approx(0.5 * math.pi)
        assert normalize_angle(-math.pi) == pytest.approx(math.pi)
        assert normalize_angle(2 * math.pi) == pytest.approx(0.0)
        assert normalize_angle(-0.5) == pytest.approx(-0.5)

    def test_shortest_arc_crosses_pi(self):
        """Test turning from 170 deg to -170 deg goes through 180 deg."""
        delta = shortest_arc(math.radians(170), math.radians(-170))
        assert delta == pytest.approx(math.radians(20))


class TestPose2d:
    """Tests for Pose2d."""

    def test_heading_is_normalized(self):
        pose = Pose2d(0.0, 0.0, 5 * math.pi / 2)
        assert pose.heading == pytest.approx(math.pi / 2)

    def test_from_degrees(self):
        pose = Pose2d.from_degrees(1.0, 2.0, 90.0)
        assert pose.heading == pytest.approx(math.pi / 2)
        assert pose.heading_degrees == pytest.approx(90.0)

    def test_transform_by(self):
        """Test composition applies the child offset in the parent frame."""
        parent = Pose2d(1.0, 0.0, math.pi / 2)
        result = parent.transform_by(Pose2d(1.0, 0.0, 0.0))
        assert_pose_close(result, Pose2d(1.0, 1.0, math.pi / 2))

    def test_inverse_composes_to_identity(self):
        pose = Pose2d(3.0, -2.0, 0.7)
        assert_pose_close(pose.transform_by(pose.inverse()), Pose2d())
        assert_pose_close(pose.inverse().transform_by(pose), Pose2d())

    def test_relative_to(self):
        origin = Pose2d(1.0, 1.0, math.pi / 2)
        delta = Pose2d(2.0, 1.0, 0.0).relative_to(origin)
        assert_pose_close(delta, Pose2d(0.0, -1.0, -math.pi / 2))

    def test_relative_to_round_trip(self):
        origin = Pose2d(-4.0, 2.5, 2.0)
        target = Pose2d(1.0, 7.0, -1.0)
        assert_pose_close(origin.transform_by(target.relative_to(origin)), target)

    def test_flip_reverses_facing_only(self):
        flipped = Pose2d(1.0, 2.0, 0.25).transform_by(FLIP)
        assert flipped.x == pytest.approx(1.0)
        assert flipped.y == pytest.approx(2.0)
        assert flipped.heading == pytest.approx(0.25 - math.pi)

    def test_distance(self):
        assert Pose2d(0.0, 0.0).distance(Pose2d(3.0, 4.0)) == pytest.approx(5.0)
        assert Pose2d(1.0, 1.0).is_coincident(Pose2d(1.0, 1.0, 2.0))

    def test_interpolate_shortest_arc(self):
        start = Pose2d(0.0, 0.0, math.radians(170))
        end = Pose2d(2.0, 0.0, math.radians(-170))
        mid = start.interpolate(end, 0.5)
        assert mid.x == pytest.approx(1.0)
        assert abs(abs(mid.heading) - math.pi) < 1e-9

    def test_interpolate_clamps_fraction(self):
        start = Pose2d(0.0, 0.0, 0.0)
        end = Pose2d(2.0, 2.0, 1.0)
        assert start.interpolate(end, -0.5) == start
        assert start.interpolate(end, 1.5) == end


class TestTwistAlgebra:
    """Tests for exp/log between poses and twists."""

    def test_exp_straight(self):
        assert_pose_close(Pose2d.exp(Twist2d(2.0, 0.0, 0.0)), Pose2d(2.0, 0.0, 0.0))

    def test_exp_quarter_circle(self):
        """Test unit arc length with a quarter turn lands on a radius 2/pi circle."""
        pose = Pose2d.exp(Twist2d(1.0, 0.0, math.pi / 2))
        assert_pose_close(pose, Pose2d(2 / math.pi, 2 / math.pi, math.pi / 2))

    @pytest.mark.parametrize(
        "twist",
        [Twist2d(1.0, 0.2, 0.5), Twist2d(-0.3, 0.0, -1.2), Twist2d(0.5, 0.1, 1e-12)],
    )
    def test_log_inverts_exp(self, twist):
        result = Pose2d.exp(twist).log()
        assert result.dx == pytest.approx(twist.dx, abs=1e-9)
        assert result.dy == pytest.approx(twist.dy, abs=1e-9)
        assert result.dtheta == pytest.approx(twist.dtheta, abs=1e-9)

    def test_twist_scaled(self):
        twist = Twist2d(1.0, 2.0, 3.0).scaled(0.5)
        assert twist == Twist2d(0.5, 1.0, 1.5)
        assert Twist2d(3.0, 4.0, 1.0).norm == pytest.approx(5.0)


class TestCurvedPose:
    """Tests for CurvedPose."""

    def test_accessors(self):
        state = CurvedPose(Pose2d(1.0, 2.0, 0.5), curvature=0.25, dcurvature_ds=-0.1)
        assert (state.x, state.y, state.heading) == (1.0, 2.0, 0.5)

    def test_flipped_curvature_keeps_pose(self):
        state = CurvedPose(Pose2d(1.0, 2.0, 0.5), curvature=0.25, dcurvature_ds=-0.1)
        flipped = state.flipped_curvature()
        assert flipped.pose == state.pose
        assert flipped.curvature == -0.25
        assert flipped.dcurvature_ds == 0.1

    def test_transform_by_keeps_curvature(self):
        state = CurvedPose(Pose2d(1.0, 0.0, 0.0), curvature=0.4)
        moved = state.transform_by(FLIP)
        assert moved.curvature == 0.4
        assert moved.heading == pytest.approx(math.pi)

    def test_interpolate(self):
        a = CurvedPose(Pose2d(0.0, 0.0, 0.0), curvature=0.0, dcurvature_ds=1.0)
        b = CurvedPose(Pose2d(2.0, 0.0, 0.0), curvature=1.0, dcurvature_ds=3.0)
        mid = a.interpolate(b, 0.25)
        assert mid.x == pytest.approx(0.5)
        assert mid.curvature == pytest.approx(0.25)
        assert mid.dcurvature_ds == pytest.approx(1.5)
