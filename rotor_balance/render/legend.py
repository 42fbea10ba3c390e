"""Data-only legend entries for the two balancing diagrams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence

from ..grid import format_tick
from ..model import IntersectionSolution, TestRun, VectorSumResult

Marker = Literal["dot", "square", "outline"]


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str
    marker: Marker = "dot"
    emphasis: bool = False


def trilateration_legend(
    v0: float, runs: Sequence[TestRun], solution: Optional[IntersectionSolution]
) -> List[LegendEntry]:
    entries = [LegendEntry(f"Base: {v0:.2f}", "#3b82f6")]
    for index, run in enumerate(runs, start=1):
        entries.append(
            LegendEntry(f"C{index} ({format_tick(run.phase_deg)}°): r={run.amplitude:.2f}", run.color)
        )
    if solution is not None and not solution.degenerate:
        entries.append(
            LegendEntry(
                f"P*: r={solution.r:.3f}, θ={solution.theta_deg:.1f}°",
                "#1e293b",
                marker="outline",
                emphasis=True,
            )
        )
    return entries


def vector_legend(runs: Sequence[TestRun], vectors: Optional[VectorSumResult]) -> List[LegendEntry]:
    entries = [
        LegendEntry(f"V{index} ({format_tick(run.phase_deg)}°): r={run.amplitude:.2f}", run.color, "square")
        for index, run in enumerate(runs, start=1)
    ]
    if vectors is not None:
        res, opp = vectors.resultant, vectors.opposite
        entries.append(LegendEntry(f"Res: r={res.r:.2f}, θ={res.theta_deg:.1f}°", "#ef4444", "square", True))
        entries.append(LegendEntry(f"Opposite: r={opp.r:.2f}, θ={opp.theta_deg:.1f}°", "#94a3b8", "outline", True))
    return entries


__all__ = ["LegendEntry", "Marker", "trilateration_legend", "vector_legend"]
