"""
Pytest configuration and shared fixtures.
"""

import math
import tempfile
from pathlib import Path

import pytest

from waypath.geometry.pose import Pose2d


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def straight_waypoints():
    """Ten units along +X."""
    return [Pose2d(0.0, 0.0, 0.0), Pose2d(10.0, 0.0, 0.0)]


@pytest.fixture
def quarter_turn_waypoints():
    """A left-hand quarter turn of roughly five units radius."""
    return [Pose2d(0.0, 0.0, 0.0), Pose2d(5.0, 5.0, math.pi / 2)]


@pytest.fixture
def s_curve_waypoints():
    """Three waypoints forming an S-shaped lane change."""
    return [
        Pose2d(0.0, 0.0, 0.0),
        Pose2d(6.0, 3.0, 0.0),
        Pose2d(12.0, 6.0, 0.0),
    ]


@pytest.fixture
def sample_config_dir(temp_dir):
    """Create a sample configuration directory structure."""
    config_dir = temp_dir / "config"
    (config_dir / "profiles").mkdir(parents=True)
    (config_dir / "paths").mkdir(parents=True)

    default_profile = """
limits:
  max_velocity: 10.0
  max_acceleration: 4.0
  max_centripetal_acceleration: 4.0
"""
    (config_dir / "profiles" / "default.yaml").write_text(default_profile)

    gentle_profile = """
limits:
  name: "Gentle"
  max_velocity: 3.0
  max_acceleration: 1.5
  max_deceleration: 3.0
  start_velocity: 0.0
  end_velocity: 0.0

regions:
  - min_corner: [4.0, -1.0]
    max_corner: [6.0, 1.0]
    velocity_limit: 1.0
"""
    (config_dir / "profiles" / "gentle.yaml").write_text(gentle_profile)

    straight_path = """
path:
  name: "Straight"

waypoints:
  - {x: 0.0, y: 0.0, heading_deg: 0.0}
  - {x: 10.0, y: 0.0, heading_deg: 0.0}
"""
    (config_dir / "paths" / "straight.yaml").write_text(straight_path)

    s_curve_path = """
path:
  name: "S Curve"
  profile: gentle

waypoints:
  - {x: 0.0, y: 0.0}
  - {x: 6.0, y: 3.0}
  - {x: 12.0, y: 6.0}
"""
    (config_dir / "paths" / "s_curve.yaml").write_text(s_curve_path)

    backup_path = """
path:
  name: "Back Up"
  reversed: true

waypoints:
  - {x: 0.0, y: 0.0, heading_deg: 0.0}
  - {x: -4.0, y: -2.0, heading_deg: 0.0}
"""
    (config_dir / "paths" / "back_up.yaml").write_text(backup_path)

    return config_dir
