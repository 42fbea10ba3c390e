"""Render-target protocol and an in-memory implementation.

A target receives screen-space primitives from
:class:`~rotor_balance.render.scene.SceneRenderer`. Calling
``clear_layer(name)`` empties that layer and makes it the destination of
subsequent draw calls; ``present()`` marks the end of a frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Protocol, Sequence, Tuple

Point = Tuple[float, float]

GRID_LAYER = "grid"
DATA_LAYER = "data"


@dataclass(frozen=True)
class Style:
    stroke: Optional[str] = "#000000"
    fill: Optional[str] = None
    width: float = 1.0
    dash: Tuple[float, ...] = ()
    opacity: float = 1.0
    font_size: float = 10.0
    bold: bool = False


@dataclass(frozen=True)
class Primitive:
    """A recorded draw call."""

    kind: str  # "circle", "line", "arrow" or "label"
    points: Tuple[Point, ...]
    style: Style
    radius: Optional[float] = None
    text: Optional[str] = None


class RenderTarget(Protocol):
    def draw_circle(self, center: Point, radius: float, style: Style) -> None: ...

    def draw_line(self, points: Sequence[Point], style: Style) -> None: ...

    def draw_arrow(self, start: Point, end: Point, style: Style) -> None: ...

    def draw_label(self, position: Point, text: str, style: Style) -> None: ...

    def clear_layer(self, layer: str) -> None: ...

    def present(self) -> None: ...


@dataclass
class RecordingTarget:
    """Keeps primitives per layer; used headless and in tests."""

    layers: Dict[str, List[Primitive]] = field(
        default_factory=lambda: {GRID_LAYER: [], DATA_LAYER: []}
    )
    active_layer: str = DATA_LAYER
    frames: int = 0

    def _add(self, primitive: Primitive) -> None:
        self.layers.setdefault(self.active_layer, []).append(primitive)

    def draw_circle(self, center: Point, radius: float, style: Style) -> None:
        self._add(Primitive("circle", (center,), style, radius=radius))

    def draw_line(self, points: Sequence[Point], style: Style) -> None:
        self._add(Primitive("line", tuple(points), style))

    def draw_arrow(self, start: Point, end: Point, style: Style) -> None:
        self._add(Primitive("arrow", (start, end), style))

    def draw_label(self, position: Point, text: str, style: Style) -> None:
        self._add(Primitive("label", (position,), style, text=text))

    def clear_layer(self, layer: str) -> None:
        self.layers[layer] = []
        self.active_layer = layer

    def present(self) -> None:
        self.frames += 1

    def primitives(self, layer: Optional[str] = None, kind: Optional[str] = None) -> List[Primitive]:
        names = [layer] if layer is not None else list(self.layers)
        return [
            prim
            for name in names
            for prim in self.layers.get(name, [])
            if kind is None or prim.kind == kind
        ]

    def labels(self, layer: Optional[str] = None) -> List[str]:
        return [prim.text or "" for prim in self.primitives(layer, "label")]


__all__ = [
    "DATA_LAYER",
    "GRID_LAYER",
    "Point",
    "Primitive",
    "RecordingTarget",
    "RenderTarget",
    "Style",
]
