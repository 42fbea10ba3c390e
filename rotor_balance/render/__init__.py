"""Backend-independent drawing of the balancing diagrams."""

from .legend import LegendEntry, trilateration_legend, vector_legend
from .scene import SceneRenderer, TrilaterationScene, VectorScene
from .target import DATA_LAYER, GRID_LAYER, Primitive, RecordingTarget, RenderTarget, Style
from .tikz import TikzRenderTarget, latex_escape

__all__ = [
    "DATA_LAYER",
    "GRID_LAYER",
    "LegendEntry",
    "Primitive",
    "RecordingTarget",
    "RenderTarget",
    "SceneRenderer",
    "Style",
    "TikzRenderTarget",
    "TrilaterationScene",
    "VectorScene",
    "latex_escape",
    "trilateration_legend",
    "vector_legend",
]
