"""Core data structures shared by the solver, viewport and renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

ColorId = int

RUN_COLORS: Dict[ColorId, str] = {
    1: "#22c55e",
    2: "#a855f7",
    3: "#eab308",
}


@dataclass(frozen=True)
class TestRun:
    """One calibration run: measured vibration amplitude and phase."""

    __test__ = False  # keep pytest from collecting this as a test class

    amplitude: float
    phase_deg: float
    color_id: ColorId = 1

    @property
    def color(self) -> str:
        return RUN_COLORS.get(self.color_id, "#64748b")


@dataclass(frozen=True)
class SolverInput:
    base_amplitude: float
    runs: Tuple[TestRun, TestRun, TestRun]


@dataclass(frozen=True)
class PolarVector:
    r: float
    theta_deg: float

    def to_dict(self) -> Dict[str, float]:
        return {"r": self.r, "thetaDeg": self.theta_deg}


@dataclass(frozen=True)
class IntersectionSolution:
    """Estimated correction point from the three-circle intersection.

    ``degenerate`` is set when the radical-line system has no unique
    solution; all numeric fields are zero in that case.
    """

    x: float
    y: float
    r: float
    theta_deg: float
    rms_error: float
    degenerate: bool = False

    @classmethod
    def sentinel(cls) -> "IntersectionSolution":
        return cls(x=0.0, y=0.0, r=0.0, theta_deg=0.0, rms_error=0.0, degenerate=True)

    def to_dict(self) -> Dict[str, object]:
        return {
            "x": self.x,
            "y": self.y,
            "r": self.r,
            "thetaDeg": self.theta_deg,
            "rmsError": self.rms_error,
            "degenerate": self.degenerate,
        }


@dataclass(frozen=True)
class VectorSumResult:
    resultant: PolarVector
    opposite: PolarVector

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        return {"resultant": self.resultant.to_dict(), "opposite": self.opposite.to_dict()}


@dataclass(frozen=True)
class BalanceResult:
    """Combined response of both balancing methods for one input."""

    solution: IntersectionSolution
    vectors: VectorSumResult

    def to_dict(self) -> Dict[str, object]:
        return {"solution": self.solution.to_dict(), "vectors": self.vectors.to_dict()}


@dataclass
class ViewportState:
    scale: float
    pan_x: float = 0.0
    pan_y: float = 0.0


@dataclass(frozen=True)
class GridSpec:
    step: float
    magnitude: float


@dataclass(frozen=True)
class GridLayout:
    """Rings and spokes of the polar grid for the current view."""

    spec: GridSpec
    max_radius_px: float
    rings: Tuple[float, ...] = field(default_factory=tuple)
    spokes: Tuple[float, ...] = field(default_factory=tuple)


__all__ = [
    "BalanceResult",
    "ColorId",
    "GridLayout",
    "GridSpec",
    "IntersectionSolution",
    "PolarVector",
    "RUN_COLORS",
    "SolverInput",
    "TestRun",
    "VectorSumResult",
    "ViewportState",
]
