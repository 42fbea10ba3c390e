"""TikZ render target: turns screen-space primitives into a standalone document."""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence

from .target import DATA_LAYER, GRID_LAYER, Point, Style

PT_PER_PX = 0.75

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{tikz}
\usetikzlibrary{arrows.meta}
%% optional layers
\pgfdeclarelayer{bg}\pgfsetlayers{bg,main}
%s
\begin{document}
\begin{minipage}[t]{%spt}
%s%s
\end{minipage}
\end{document}
"""

_LAYER_NAMES = {GRID_LAYER: "bg", DATA_LAYER: "main"}

_HEX_DIGITS = frozenset("0123456789ABCDEF")

_TEXT_ESCAPES = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
    "$": r"\$",
    "°": r"$^\circ$",
    "θ": r"$\theta$",
}


def latex_escape(text: str) -> str:
    return "".join(_TEXT_ESCAPES.get(ch, ch) for ch in text)


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if formatted in ("", "-0") else formatted


def _coord(point: Point) -> str:
    x, y = point
    return f"({_format_float(x * PT_PER_PX)}pt,{_format_float(-y * PT_PER_PX)}pt)"


class TikzRenderTarget:
    """Collects TikZ commands per layer; ``present()`` freezes the frame."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._layers: Dict[str, List[str]] = {GRID_LAYER: [], DATA_LAYER: []}
        self._active = DATA_LAYER
        self._colors: Dict[str, str] = {}
        self._frame: Optional[Dict[str, List[str]]] = None

    def _color(self, value: str) -> str:
        if not value.startswith("#"):
            # named TikZ colors pass through untouched
            return value
        key = value[1:].upper()
        if len(key) == 3:
            key = "".join(ch * 2 for ch in key)
        if len(key) != 6 or any(ch not in _HEX_DIGITS for ch in key):
            raise ValueError(f"Unsupported color {value!r}; expected #RGB or #RRGGBB")
        if key not in self._colors:
            self._colors[key] = f"rb{len(self._colors) + 1}"
        return self._colors[key]

    def _options(self, style: Style, *, fill: bool = True) -> str:
        opts: List[str] = []
        if style.stroke:
            opts.append(f"draw={self._color(style.stroke)}")
        if fill and style.fill:
            opts.append(f"fill={self._color(style.fill)}")
        if style.width != 1.0:
            opts.append(f"line width={_format_float(style.width * PT_PER_PX)}pt")
        if style.dash:
            pattern = " ".join(
                f"{'on' if idx % 2 == 0 else 'off'} {_format_float(length * PT_PER_PX)}pt"
                for idx, length in enumerate(style.dash)
            )
            opts.append(f"dash pattern={pattern}")
        if style.opacity < 1.0:
            opts.append(f"opacity={_format_float(style.opacity)}")
        return ",".join(opts)

    def _emit(self, command: str) -> None:
        self._layers.setdefault(self._active, []).append(command)

    def draw_circle(self, center: Point, radius: float, style: Style) -> None:
        self._emit(
            f"\\path[{self._options(style)}] {_coord(center)} circle ({_format_float(radius * PT_PER_PX)}pt);"
        )

    def draw_line(self, points: Sequence[Point], style: Style) -> None:
        if len(points) < 2:
            return
        path = " -- ".join(_coord(p) for p in points)
        self._emit(f"\\path[{self._options(style, fill=False)}] {path};")

    def draw_arrow(self, start: Point, end: Point, style: Style) -> None:
        opts = self._options(style, fill=False)
        tip = "-{Stealth[length=7.5pt]}"
        self._emit(f"\\path[{tip},{opts}] {_coord(start)} -- {_coord(end)};")

    def draw_label(self, position: Point, text: str, style: Style) -> None:
        color = style.fill or style.stroke or "black"
        size = _format_float(style.font_size * PT_PER_PX)
        font = f"\\fontsize{{{size}}}{{{size}}}\\selectfont" + ("\\bfseries" if style.bold else "")
        self._emit(
            f"\\node[anchor=south west,inner sep=1pt,text={self._color(color)},font={font}] "
            f"at {_coord(position)} {{{latex_escape(text)}}};"
        )

    def clear_layer(self, layer: str) -> None:
        self._layers[layer] = []
        self._active = layer

    def present(self) -> None:
        self._frame = {name: list(cmds) for name, cmds in self._layers.items()}

    def tikz_code(self) -> str:
        layers = self._frame if self._frame is not None else self._layers
        lines = [
            "\\begin{tikzpicture}",
            f"\\clip (0,0) rectangle {_coord((self.width, self.height))};",
        ]
        for name in (GRID_LAYER, DATA_LAYER):
            commands = layers.get(name, [])
            if not commands:
                continue
            layer = _LAYER_NAMES[name]
            lines.append(f"\\begin{{pgfonlayer}}{{{layer}}}")
            lines.extend(commands)
            lines.append("\\end{pgfonlayer}")
        lines.append("\\end{tikzpicture}")
        return "\n".join(lines)

    def document(self, title: Optional[str] = None) -> str:
        code = self.tikz_code()
        colors = "\n".join(f"\\definecolor{{{name}}}{{HTML}}{{{key}}}" for key, name in self._colors.items())
        header = ""
        if title:
            header = "\\noindent\\textbf{" + latex_escape(title.strip()) + "}\\par\\vspace{4pt}\n"
        width = _format_float(self.width * PT_PER_PX)
        return standalone_tpl % (colors, width, header, code)


__all__ = ["PT_PER_PX", "TikzRenderTarget", "latex_escape", "standalone_tpl"]
