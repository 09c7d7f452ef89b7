"""
Tests for the arc-length indexed view.
"""

import math

import pytest

from waypath.core.exceptions import DegenerateSplineError
from waypath.geometry.pose import CurvedPose, Pose2d
from waypath.path.distance_view import DistanceView
from waypath.path.sampler import fit


@pytest.fixture
def simple_view():
    """Three samples at x = 0, 1 and 3."""
    return DistanceView(
        [
            CurvedPose(Pose2d(0.0, 0.0, 0.0), curvature=0.0),
            CurvedPose(Pose2d(1.0, 0.0, 0.0), curvature=0.2),
            CurvedPose(Pose2d(3.0, 0.0, 0.0), curvature=0.4),
        ]
    )


class TestDistanceView:
    """Tests for DistanceView."""

    def test_distances(self, simple_view):
        assert list(simple_view.distances) == [0.0, 1.0, 3.0]
        assert simple_view.length == 3.0
        assert len(simple_view) == 3

    def test_distances_are_running_sum(self, s_curve_waypoints):
        samples = fit(s_curve_waypoints)
        view = DistanceView(samples)

        total = 0.0
        for i in range(1, len(samples)):
            total += math.hypot(samples[i].x - samples[i - 1].x, samples[i].y - samples[i - 1].y)
            assert view.distance_at(i) == pytest.approx(total, rel=1e-12)

    def test_query_interpolates(self, simple_view):
        state = simple_view.query(2.0)
        assert state.x == pytest.approx(2.0)
        assert state.curvature == pytest.approx(0.3)

    def test_query_at_sample(self, simple_view):
        assert simple_view.query(1.0).x == pytest.approx(1.0)
        assert simple_view.query(1.0).curvature == pytest.approx(0.2)

    def test_query_clamps(self, simple_view):
        """Test out-of-range distances return the endpoints instead of raising."""
        assert simple_view.query(-0.5) is simple_view.states[0]
        assert simple_view.query(0.0) is simple_view.states[0]
        assert simple_view.query(3.0 + 1e-12) is simple_view.states[-1]
        assert simple_view.query(100.0) is simple_view.states[-1]

    def test_query_heading_shortest_arc(self):
        view = DistanceView(
            [
                CurvedPose(Pose2d(0.0, 0.0, math.radians(170))),
                CurvedPose(Pose2d(1.0, 0.0, math.radians(-170))),
            ]
        )
        assert abs(abs(view.query(0.5).heading) - math.pi) < 1e-9

    def test_distances_copy_is_detached(self, simple_view):
        distances = simple_view.distances
        distances[1] = 42.0
        assert simple_view.distance_at(1) == 1.0

    def test_single_sample(self):
        only = CurvedPose(Pose2d(2.0, 2.0, 0.0))
        view = DistanceView([only])
        assert view.length == 0.0
        assert view.query(1.0) is only

    def test_empty_raises(self):
        with pytest.raises(DegenerateSplineError):
            DistanceView([])
