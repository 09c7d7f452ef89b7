"""
Adaptive spline sampling.

Fits a :class:`QuinticHermiteSpline` through each pair of consecutive
waypoints and bisects its parameter range until every accepted interval moves
no more than the configured forward, lateral and heading steps when viewed
from the interval's start pose. Tight turns therefore receive denser samples
automatically.
"""

import math
from typing import Sequence

from waypath.core.exceptions import DegenerateSplineError
from waypath.core.logging import get_logger
from waypath.geometry.pose import CurvedPose, Pose2d
from waypath.path.spline import QuinticHermiteSpline

logger = get_logger(__name__)

DEFAULT_MAX_DX = 2.0 / 12.0
DEFAULT_MAX_DY = 0.25 / 12.0
DEFAULT_MAX_DTHETA = math.radians(5.0)

# Narrowest parameter interval the bisection may produce (2**-30).
MIN_PARAMETER_STEP = 1.0 / (1 << 30)


def _within_bounds(
    start: Pose2d, end: Pose2d, max_dx: float, max_dy: float, max_dtheta: float
) -> bool:
    delta = end.relative_to(start)
    return (
        abs(delta.x) <= max_dx
        and abs(delta.y) <= max_dy
        and abs(delta.heading) <= max_dtheta
    )


def sample_spline(
    spline: QuinticHermiteSpline,
    max_dx: float,
    max_dy: float,
    max_dtheta: float,
    segment: int = 0,
) -> list[CurvedPose]:
    """
    Sample one spline segment, excluding its start point.

    Args:
        spline: Segment to sample
        max_dx: Maximum forward step between samples
        max_dy: Maximum lateral step between samples
        max_dtheta: Maximum heading step between samples (radians)
        segment: Index of the segment, used for error reporting

    Returns:
        Samples at the end of each accepted interval, in parameter order

    Raises:
        DegenerateSplineError: If an interval cannot be bounded by bisection
    """
    samples: list[CurvedPose] = []
    # LIFO stack; the left half is pushed last so it is processed first.
    stack: list[tuple[float, float]] = [(0.0, 1.0)]

    while stack:
        t0, t1 = stack.pop()
        if _within_bounds(spline.pose(t0), spline.pose(t1), max_dx, max_dy, max_dtheta):
            samples.append(spline.curved_pose(t1))
            continue

        if t1 - t0 <= MIN_PARAMETER_STEP:
            raise DegenerateSplineError(
                "Adaptive sampling did not converge",
                segment=segment,
                details={"t0": t0, "t1": t1},
            )
        mid = 0.5 * (t0 + t1)
        stack.append((mid, t1))
        stack.append((t0, mid))

    return samples


def fit(
    waypoints: Sequence[Pose2d],
    max_dx: float = DEFAULT_MAX_DX,
    max_dy: float = DEFAULT_MAX_DY,
    max_dtheta: float = DEFAULT_MAX_DTHETA,
) -> list[CurvedPose]:
    """
    Fit splines through ``waypoints`` and sample them adaptively.

    Args:
        waypoints: Ordered poses the path passes through (at least two)
        max_dx: Maximum forward step between samples
        max_dy: Maximum lateral step between samples
        max_dtheta: Maximum heading step between samples (radians)

    Returns:
        Dense, ordered curvature-annotated samples. The first sample is the
        first waypoint and junctions between segments appear once.

    Raises:
        DegenerateSplineError: On fewer than two waypoints, coincident
            consecutive waypoints, or non-positive thresholds
    """
    if len(waypoints) < 2:
        raise DegenerateSplineError(
            "At least two waypoints are required",
            details={"count": len(waypoints)},
        )
    if min(max_dx, max_dy, max_dtheta) <= 0.0:
        raise DegenerateSplineError(
            "Sampling thresholds must be positive",
            details={"max_dx": max_dx, "max_dy": max_dy, "max_dtheta": max_dtheta},
        )

    splines = []
    for index, (start, end) in enumerate(zip(waypoints[:-1], waypoints[1:])):
        try:
            splines.append(QuinticHermiteSpline(start, end))
        except DegenerateSplineError as e:
            raise DegenerateSplineError(e.message, segment=index, details=e.details) from e

    samples = [splines[0].curved_pose(0.0)]
    for index, spline in enumerate(splines):
        samples.extend(sample_spline(spline, max_dx, max_dy, max_dtheta, segment=index))

    logger.debug(
        "spline_sampled",
        waypoints=len(waypoints),
        segments=len(splines),
        samples=len(samples),
    )
    return samples
