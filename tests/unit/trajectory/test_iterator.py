"""
Tests for the advancing trajectory cursor.
"""

import pytest

from waypath.geometry.pose import CurvedPose, Pose2d
from waypath.timing.state import TimedState
from waypath.trajectory.trajectory import Trajectory


@pytest.fixture
def cursor():
    """Cursor over a constant-velocity trajectory: 4 units in 2 seconds."""
    trajectory = Trajectory(
        [
            TimedState(CurvedPose(Pose2d(0.0, 0.0, 0.0)), distance=0.0, t=0.0, velocity=2.0),
            TimedState(CurvedPose(Pose2d(4.0, 0.0, 0.0)), distance=4.0, t=2.0, velocity=2.0),
        ]
    )
    return trajectory.iterator()


class TestTrajectoryIterator:
    """Tests for TrajectoryIterator."""

    def test_starts_at_beginning(self, cursor):
        assert cursor.progress == 0.0
        assert cursor.remaining == 2.0
        assert not cursor.is_done
        assert cursor.current is cursor.trajectory.first_state

    def test_advance(self, cursor):
        state = cursor.advance(0.5)
        assert cursor.progress == pytest.approx(0.5)
        assert state.pose.x == pytest.approx(1.0)
        assert not cursor.is_done

    def test_fixed_period_loop(self, cursor):
        """Test a 20 ms control loop reaches the end and stops."""
        ticks = 0
        while not cursor.is_done:
            cursor.advance(0.02)
            ticks += 1
        assert ticks == pytest.approx(100, abs=1)
        assert cursor.current is cursor.trajectory.last_state

    def test_reaching_duration_sets_done(self, cursor):
        state = cursor.advance(2.0)
        assert cursor.is_done
        assert state is cursor.trajectory.last_state

    def test_never_wraps(self, cursor):
        cursor.advance(5.0)
        assert cursor.progress == 2.0
        state = cursor.advance(1.0)
        assert cursor.is_done
        assert state is cursor.trajectory.last_state

    def test_negative_advance_clamps_to_start(self, cursor):
        cursor.advance(0.5)
        state = cursor.advance(-3.0)
        assert cursor.progress == 0.0
        assert state is cursor.trajectory.first_state

    def test_preview_does_not_move(self, cursor):
        cursor.advance(0.5)
        preview = cursor.preview(0.5)
        assert preview.pose.x == pytest.approx(2.0)
        assert cursor.progress == pytest.approx(0.5)
        assert cursor.preview(10.0) is cursor.trajectory.last_state

    def test_reset(self, cursor):
        cursor.advance(5.0)
        cursor.reset()
        assert cursor.progress == 0.0
        assert not cursor.is_done

    def test_independent_cursors(self, cursor):
        other = cursor.trajectory.iterator()
        cursor.advance(1.0)
        assert other.progress == 0.0
