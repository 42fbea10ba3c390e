"""Wire form input, the solver and both diagram views together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Mapping, Optional

from .events import InputEvent
from .model import BalanceResult, SolverInput
from .parsing import parse_form
from .render.legend import LegendEntry, trilateration_legend, vector_legend
from .render.scene import SceneRenderer
from .render.target import RecordingTarget, RenderTarget
from .solver import solve_balance
from .viewport import Viewport

logger = logging.getLogger(__name__)

ViewName = Literal["trilateration", "vectors"]


@dataclass
class CalculationReport:
    solver_input: SolverInput
    result: BalanceResult
    trilateration_legend: List[LegendEntry]
    vector_legend: List[LegendEntry]


class BalancingController:
    """Owns one viewport/renderer pair per diagram.

    Targets default to :class:`RecordingTarget` so the controller can run
    headless.
    """

    def __init__(
        self,
        width: float,
        height: float,
        trilateration_target: Optional[RenderTarget] = None,
        vector_target: Optional[RenderTarget] = None,
    ) -> None:
        self.views: Dict[str, SceneRenderer] = {
            "trilateration": SceneRenderer(Viewport(width, height), trilateration_target or RecordingTarget()),
            "vectors": SceneRenderer(Viewport(width, height), vector_target or RecordingTarget()),
        }
        self.last_report: Optional[CalculationReport] = None
        for renderer in self.views.values():
            renderer.redraw()

    def renderer(self, view: ViewName) -> SceneRenderer:
        try:
            return self.views[view]
        except KeyError as exc:
            raise KeyError(f"Unknown view '{view}'") from exc

    def calculate(self, solver_input: SolverInput) -> CalculationReport:
        result = solve_balance(solver_input)
        runs = solver_input.runs
        self.renderer("trilateration").draw_trilateration(
            solver_input.base_amplitude, runs, result.solution, auto_fit=True
        )
        self.renderer("vectors").draw_vectors(runs, result.vectors, auto_fit=True)
        report = CalculationReport(
            solver_input=solver_input,
            result=result,
            trilateration_legend=trilateration_legend(solver_input.base_amplitude, runs, result.solution),
            vector_legend=vector_legend(runs, result.vectors),
        )
        self.last_report = report
        return report

    def calculate_and_draw(self, form: Mapping[str, object]) -> CalculationReport:
        """Parse flat form fields, solve, and redraw both views with auto-fit."""

        return self.calculate(parse_form(form))

    def fit_content(self) -> None:
        for renderer in self.views.values():
            renderer.fit_content()

    def dispatch(self, view: ViewName, event: InputEvent) -> bool:
        renderer = self.renderer(view)
        changed = renderer.viewport.handle(event)
        if changed:
            renderer.redraw()
        logger.debug("Event %s on %s view (redraw=%s)", type(event).__name__, view, changed)
        return changed


__all__ = ["BalancingController", "CalculationReport", "ViewName"]
