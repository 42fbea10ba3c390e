"""Solver façade shared by the controller, the CLI and the HTTP endpoint."""

from __future__ import annotations

import logging

from ..model import BalanceResult, SolverInput
from .geometry import (
    DEGENERACY_EPS,
    calculate_vectors,
    cartesian_to_polar,
    normalize_angle,
    polar_to_cartesian,
    run_circles,
    solve_intersection,
)

logger = logging.getLogger(__name__)


def solve_balance(solver_input: SolverInput) -> BalanceResult:
    """Run the circle-intersection and vector-sum methods on one input."""

    solution = solve_intersection(solver_input.base_amplitude, solver_input.runs)
    vectors = calculate_vectors(solver_input.runs)
    if solution.degenerate:
        logger.info("Intersection degenerate for v0=%s; vector sum only", solver_input.base_amplitude)
    else:
        logger.info(
            "Intersection r=%.3f theta=%.1f rms=%.2e; resultant r=%.3f theta=%.1f",
            solution.r,
            solution.theta_deg,
            solution.rms_error,
            vectors.resultant.r,
            vectors.resultant.theta_deg,
        )
    return BalanceResult(solution=solution, vectors=vectors)


__all__ = [
    "DEGENERACY_EPS",
    "calculate_vectors",
    "cartesian_to_polar",
    "normalize_angle",
    "polar_to_cartesian",
    "run_circles",
    "solve_balance",
    "solve_intersection",
]
