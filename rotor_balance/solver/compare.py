"""Iterative least-squares solves used to cross-check the closed-form result.

Nothing in the production path calls this module; it exists so the two
circle parameterizations can be compared side by side:

* method ``"A"``: centers at ``(v0, phase_i)``, radius ``amplitude_i`` (the
  production formulation solved in :mod:`.geometry`);
* method ``"B"``: centers at ``(amplitude_i, phase_i)``, radius ``v0``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Literal, Sequence

import numpy as np
from scipy.optimize import least_squares

from ..model import TestRun
from .geometry import cartesian_to_polar, polar_to_cartesian

logger = logging.getLogger(__name__)

Method = Literal["A", "B"]


@dataclass(frozen=True)
class IterativeSolution:
    x: float
    y: float
    r: float
    theta_deg: float
    rms_error: float
    success: bool
    nfev: int
    method: str


def _circles(v0: float, runs: Sequence[TestRun], method: Method) -> np.ndarray:
    rows = []
    for run in runs:
        if method == "A":
            cx, cy = polar_to_cartesian(v0, run.phase_deg)
            rows.append((cx, cy, run.amplitude))
        elif method == "B":
            cx, cy = polar_to_cartesian(run.amplitude, run.phase_deg)
            rows.append((cx, cy, v0))
        else:
            raise ValueError(f"unknown comparison method {method!r}")
    return np.asarray(rows, dtype=float)


def solve_iterative(
    v0: float,
    runs: Sequence[TestRun],
    method: Method = "A",
    *,
    tol: float = 1e-12,
) -> IterativeSolution:
    """Minimize ``sum((|P - c_i| - R_i)^2)`` starting from the origin."""

    circles = _circles(v0, runs, method)
    centers = circles[:, :2]
    radii = circles[:, 2]

    def residuals(point: np.ndarray) -> np.ndarray:
        return np.linalg.norm(centers - point, axis=1) - radii

    result = least_squares(residuals, np.zeros(2), xtol=tol, ftol=tol, gtol=tol)
    px, py = (float(v) for v in result.x)
    polar = cartesian_to_polar(px, py)
    rms = math.sqrt(float(np.mean(residuals(result.x) ** 2)))

    logger.info(
        "Method %s iterative solve: success=%s nfev=%d r=%.6g theta=%.3f rms=%.3e",
        method,
        result.success,
        result.nfev,
        polar.r,
        polar.theta_deg,
        rms,
    )
    return IterativeSolution(
        x=px,
        y=py,
        r=polar.r,
        theta_deg=polar.theta_deg,
        rms_error=rms,
        success=bool(result.success),
        nfev=int(result.nfev),
        method=method,
    )


__all__ = ["IterativeSolution", "Method", "solve_iterative"]
