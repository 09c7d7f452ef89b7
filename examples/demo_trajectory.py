"""
Demonstration of Waypath trajectory generation.

This script shows how to:
1. Fit a path through waypoints
2. Limit speed with timing constraints
3. Follow the trajectory at a fixed control period
4. Drive a path in reverse
"""

import math

from waypath import Pose2d, TrajectoryGenerator
from waypath.core.logging import configure_logging
from waypath.timing.constraints import (
    CentripetalAccelerationConstraint,
    VelocityLimitRegionConstraint,
)


def main():
    """Run trajectory demonstration."""
    configure_logging(level="INFO")

    print("=" * 60)
    print("Waypath Trajectory Demo")
    print("=" * 60)

    generator = TrajectoryGenerator()

    # 1. Fit a path through waypoints
    print("\n1. Generating a lane change")
    waypoints = [
        Pose2d(0.0, 0.0, 0.0),
        Pose2d(8.0, 4.0, 0.0),
        Pose2d(16.0, 8.0, 0.0),
    ]
    trajectory = generator.generate(
        waypoints,
        constraints=[],
        start_velocity=0.0,
        end_velocity=0.0,
        max_velocity=10.0,
        max_acceleration=8.0,
    )
    print(f"   [OK] {len(trajectory)} samples")
    print(f"   [OK] Length: {trajectory.length:.2f} ft")
    print(f"   [OK] Duration: {trajectory.duration:.2f} s")

    # 2. Add constraints
    print("\n2. Adding a centripetal limit and a slow zone")
    constraints = [
        CentripetalAccelerationConstraint(4.0),
        VelocityLimitRegionConstraint((6.0, 1.0), (10.0, 7.0), 3.0),
    ]
    constrained = generator.generate(
        waypoints,
        constraints=constraints,
        start_velocity=0.0,
        end_velocity=0.0,
        max_velocity=10.0,
        max_acceleration=8.0,
    )
    peak = max(state.velocity for state in constrained)
    print(f"   [OK] Duration: {constrained.duration:.2f} s (was {trajectory.duration:.2f} s)")
    print(f"   [OK] Peak velocity: {peak:.2f} ft/s")

    # 3. Follow at 50 Hz
    print("\n3. Following at 50 Hz (every 25th tick shown)")
    cursor = constrained.iterator()
    tick = 0
    while not cursor.is_done:
        state = cursor.advance(0.02)
        tick += 1
        if tick % 25 == 0 or cursor.is_done:
            print(
                f"   t={state.t:5.2f}  x={state.pose.x:6.2f}  y={state.pose.y:5.2f}  "
                f"heading={math.degrees(state.pose.heading):6.1f}  v={state.velocity:5.2f}"
            )

    # 4. Reverse
    print("\n4. Backing out")
    reverse = generator.generate(
        [Pose2d(0.0, 0.0, 0.0), Pose2d(-6.0, -3.0, 0.0)],
        constraints=[],
        start_velocity=0.0,
        end_velocity=0.0,
        max_velocity=5.0,
        max_acceleration=4.0,
        reversed=True,
    )
    slowest = min(state.velocity for state in reverse)
    print(f"   [OK] Duration: {reverse.duration:.2f} s")
    print(f"   [OK] Most negative velocity: {slowest:.2f} ft/s")
    print(f"   [OK] Final heading: {reverse.last_state.pose.heading_degrees:.1f} deg")

    print("\n" + "=" * 60)
    print("[SUCCESS] Trajectory demo completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
