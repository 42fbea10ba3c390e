"""Emit grid, trilateration and vector primitives for one viewport."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

from ..grid import build_grid, format_tick
from ..model import IntersectionSolution, PolarVector, TestRun, VectorSumResult
from ..solver.geometry import polar_to_cartesian
from ..viewport import Viewport
from .target import DATA_LAYER, GRID_LAYER, RenderTarget, Style

logger = logging.getLogger(__name__)

RING_STYLE = Style(stroke="#e2e8f0")
RING_LABEL_STYLE = Style(stroke=None, fill="#94a3b8", font_size=10)
SPOKE_STYLE = Style(stroke="#f1f5f9")
BASE_STYLE = Style(stroke="#3b82f6", width=2, dash=(10, 5), opacity=0.5)
BASE_LABEL_STYLE = Style(stroke=None, fill="#3b82f6")
CENTER_LABEL_STYLE = Style(stroke=None, fill="#64748b")
SOLUTION_LINE_STYLE = Style(stroke="#1e293b", dash=(4, 4))
SOLUTION_MARKER_STYLE = Style(stroke="#1e293b", fill="#ffffff", width=2)
SOLUTION_LABEL_STYLE = Style(stroke="#cbd5e1", fill="#000000", font_size=11, bold=True)
RESULTANT_STYLE = Style(stroke="#ef4444", fill="#ef4444", width=3)
OPPOSITE_STYLE = Style(stroke="#475569", fill="#94a3b8", width=2, dash=(5, 2))
OPPOSITE_LABEL_STYLE = Style(stroke="#475569", fill="#334155")

CENTER_MARKER_PX = 4.0
SOLUTION_MARKER_PX = 5.0
LABEL_OFFSET_PX = 8.0


@dataclass(frozen=True)
class TrilaterationScene:
    v0: float
    runs: Tuple[TestRun, ...]
    solution: Optional[IntersectionSolution]

    def extent(self) -> float:
        max_r = max((self.v0 + run.amplitude for run in self.runs), default=0.0)
        if self.solution is not None and not self.solution.degenerate:
            max_r = max(max_r, self.solution.r)
        return max(max_r, self.v0)


@dataclass(frozen=True)
class VectorScene:
    runs: Tuple[TestRun, ...]
    vectors: Optional[VectorSumResult]

    def extent(self) -> float:
        max_r = max((run.amplitude for run in self.runs), default=0.0)
        if self.vectors is not None:
            max_r = max(max_r, self.vectors.resultant.r, self.vectors.opposite.r)
        return max_r


Scene = Union[TrilaterationScene, VectorScene]


class SceneRenderer:
    """Draws into ``target`` through ``viewport`` and caches the last scene.

    The cached scene lets pan, zoom and resize redraw without solving again.
    """

    def __init__(self, viewport: Viewport, target: RenderTarget) -> None:
        self.viewport = viewport
        self.target = target
        self.last_scene: Optional[Scene] = None

    # --- grid -------------------------------------------------------------

    def draw_grid(self) -> None:
        vp = self.viewport
        layout = build_grid(vp)
        origin = vp.plane_to_screen(0.0, 0.0)
        self.target.clear_layer(GRID_LAYER)

        for radius in layout.rings:
            self.target.draw_circle(origin, radius * vp.scale, RING_STYLE)
            self.target.draw_label(
                (origin[0] + radius * vp.scale + 2, origin[1] + 2), format_tick(radius), RING_LABEL_STYLE
            )

        for angle in layout.spokes:
            dx, dy = polar_to_cartesian(layout.max_radius_px, angle)
            end = (origin[0] + dx, origin[1] - dy)
            self.target.draw_line([origin, end], SPOKE_STYLE)
            self.target.draw_label(
                (origin[0] + dx * 0.9 + 5, origin[1] - dy * 0.9 - 5), f"{int(angle)}°", RING_LABEL_STYLE
            )

    # --- data -------------------------------------------------------------

    def draw_trilateration(
        self,
        v0: float,
        runs: Sequence[TestRun],
        solution: Optional[IntersectionSolution],
        auto_fit: bool = False,
    ) -> None:
        scene = TrilaterationScene(v0=v0, runs=tuple(runs), solution=solution)
        self._show(scene, auto_fit)

    def draw_vectors(
        self,
        runs: Sequence[TestRun],
        vectors: Optional[VectorSumResult],
        auto_fit: bool = False,
    ) -> None:
        self._show(VectorScene(runs=tuple(runs), vectors=vectors), auto_fit)

    def redraw(self) -> None:
        """Redraw grid and the cached scene at the current viewport state."""

        self.draw_grid()
        self.target.clear_layer(DATA_LAYER)
        if self.last_scene is not None:
            self._paint(self.last_scene)
        self.target.present()

    def fit_content(self) -> bool:
        if self.last_scene is None:
            return False
        self._show(self.last_scene, auto_fit=True)
        return True

    def _show(self, scene: Scene, auto_fit: bool) -> None:
        self.last_scene = scene
        if auto_fit:
            extent = scene.extent()
            if not self.viewport.fit_to_radius(extent):
                logger.debug("Auto-fit skipped for %s with extent %.6g", type(scene).__name__, extent)
        self.redraw()

    def _paint(self, scene: Scene) -> None:
        if isinstance(scene, TrilaterationScene):
            self._paint_trilateration(scene)
        else:
            self._paint_vectors(scene)

    def _paint_trilateration(self, scene: TrilaterationScene) -> None:
        vp = self.viewport
        target = self.target
        origin = vp.plane_to_screen(0.0, 0.0)

        base_px = scene.v0 * vp.scale
        target.draw_circle(origin, base_px, BASE_STYLE)
        target.draw_label((origin[0] + base_px + 5, origin[1] + 5), f"Base r={format_tick(scene.v0)}", BASE_LABEL_STYLE)

        for index, run in enumerate(scene.runs, start=1):
            center = vp.polar_to_screen(scene.v0, run.phase_deg)
            target.draw_circle(center, run.amplitude * vp.scale, Style(stroke=run.color, width=2, opacity=0.8))
            target.draw_circle(center, CENTER_MARKER_PX, Style(stroke=None, fill=run.color))
            target.draw_label(
                (center[0] + LABEL_OFFSET_PX, center[1] - LABEL_OFFSET_PX),
                f"C{index} ({format_tick(scene.v0)}, {format_tick(run.phase_deg)}°)",
                CENTER_LABEL_STYLE,
            )

        solution = scene.solution
        if solution is None or solution.degenerate:
            return
        point = vp.plane_to_screen(solution.x, solution.y)
        target.draw_line([origin, point], SOLUTION_LINE_STYLE)
        target.draw_circle(point, SOLUTION_MARKER_PX, SOLUTION_MARKER_STYLE)
        target.draw_label(
            (point[0] + LABEL_OFFSET_PX, point[1] - LABEL_OFFSET_PX),
            f"P* r={solution.r:.3f}",
            SOLUTION_LABEL_STYLE,
        )

    def _arrow(self, vector: PolarVector, style: Style, label: str, label_style: Style) -> None:
        origin = self.viewport.plane_to_screen(0.0, 0.0)
        tip = self.viewport.polar_to_screen(vector.r, vector.theta_deg)
        self.target.draw_arrow(origin, tip, style)
        self.target.draw_label(tip, f"{label}({vector.r:.2f}, {vector.theta_deg:.1f}°)", label_style)

    def _paint_vectors(self, scene: VectorScene) -> None:
        for index, run in enumerate(scene.runs, start=1):
            style = Style(stroke=run.color, fill=run.color, width=2)
            self._arrow(PolarVector(run.amplitude, run.phase_deg), style, f"V{index}", style)

        if scene.vectors is None:
            return
        self._arrow(scene.vectors.resultant, RESULTANT_STYLE, "Res", RESULTANT_STYLE)
        self._arrow(scene.vectors.opposite, OPPOSITE_STYLE, "Opposite ", OPPOSITE_LABEL_STYLE)


__all__ = ["Scene", "SceneRenderer", "TrilaterationScene", "VectorScene"]
