"""Closed-form balancing geometry: circle intersection and vector sums."""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

from ..logging_utils import apply_debug_logging
from ..model import IntersectionSolution, PolarVector, TestRun, VectorSumResult

logger = logging.getLogger(__name__)

DEGENERACY_EPS = 1e-9


def normalize_angle(deg: float) -> float:
    """Map ``deg`` into ``[0, 360)``; negative angles wrap forward."""

    d = math.fmod(deg, 360.0)
    if d < 0:
        d += 360.0
    # fmod(-1e-17, 360) + 360 rounds up to 360.0
    if d >= 360.0:
        d = 0.0
    return d


def polar_to_cartesian(r: float, theta_deg: float) -> Tuple[float, float]:
    rad = math.radians(theta_deg)
    return r * math.cos(rad), r * math.sin(rad)


def cartesian_to_polar(x: float, y: float) -> PolarVector:
    return PolarVector(r=math.hypot(x, y), theta_deg=normalize_angle(math.degrees(math.atan2(y, x))))


def run_circles(v0: float, runs: Sequence[TestRun]) -> Tuple[Tuple[float, float, float], ...]:
    """Return ``(cx, cy, radius)`` per run: center at ``(v0, phase)``, radius = amplitude."""

    circles = []
    for run in runs:
        cx, cy = polar_to_cartesian(v0, run.phase_deg)
        circles.append((cx, cy, run.amplitude))
    return tuple(circles)


def solve_intersection(v0: float, runs: Sequence[TestRun]) -> IntersectionSolution:
    """Intersect the radical lines of circle pairs (1, 2) and (1, 3).

    A degenerate system (collinear or concentric centers) or one whose
    arithmetic leaves the float range returns
    :meth:`IntersectionSolution.sentinel` instead of raising.
    """

    (cx1, cy1, r1), (cx2, cy2, r2), (cx3, cy3, r3) = run_circles(v0, runs)

    # products overflow to inf instead of raising like ``**``
    a1 = 2 * (cx1 - cx2)
    b1 = 2 * (cy1 - cy2)
    val1 = (r2 * r2 - r1 * r1) + (cx1 * cx1 - cx2 * cx2) + (cy1 * cy1 - cy2 * cy2)

    a2 = 2 * (cx1 - cx3)
    b2 = 2 * (cy1 - cy3)
    val2 = (r3 * r3 - r1 * r1) + (cx1 * cx1 - cx3 * cx3) + (cy1 * cy1 - cy3 * cy3)

    det = a1 * b2 - a2 * b1
    if abs(det) < DEGENERACY_EPS:
        logger.warning("Degenerate system (|D|=%.3e): circle centers are collinear or concentric", abs(det))
        return IntersectionSolution.sentinel()

    px = (val1 * b2 - val2 * b1) / det
    py = (a1 * val2 - a2 * val1) / det

    sum_sq = 0.0
    for cx, cy, radius in ((cx1, cy1, r1), (cx2, cy2, r2), (cx3, cy3, r3)):
        err = math.hypot(px - cx, py - cy) - radius
        sum_sq += err * err
    rms_error = math.sqrt(sum_sq / 3)

    if not all(math.isfinite(value) for value in (det, px, py, rms_error)):
        logger.warning("Degenerate system (D=%s, P=(%s, %s)): result outside float range", det, px, py)
        return IntersectionSolution.sentinel()

    polar = cartesian_to_polar(px, py)
    return IntersectionSolution(
        x=px,
        y=py,
        r=polar.r,
        theta_deg=polar.theta_deg,
        rms_error=rms_error,
    )


def calculate_vectors(runs: Sequence[TestRun]) -> VectorSumResult:
    sum_x = 0.0
    sum_y = 0.0
    for run in runs:
        x, y = polar_to_cartesian(run.amplitude, run.phase_deg)
        sum_x += x
        sum_y += y

    resultant = cartesian_to_polar(sum_x, sum_y)
    opposite = PolarVector(r=resultant.r, theta_deg=normalize_angle(resultant.theta_deg + 180))
    return VectorSumResult(resultant=resultant, opposite=opposite)


apply_debug_logging(globals(), logger=logger, skip={"normalize_angle", "polar_to_cartesian"})


__all__ = [
    "DEGENERACY_EPS",
    "calculate_vectors",
    "cartesian_to_polar",
    "normalize_angle",
    "polar_to_cartesian",
    "run_circles",
    "solve_intersection",
]
