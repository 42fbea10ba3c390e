"""Scale/pan state mapping the polar plane onto screen pixels."""

from __future__ import annotations

import logging
import math
from typing import Literal, Optional, Tuple

from .config import ViewportConfig, get_viewport_config, validate_viewport_config
from .events import InputEvent, PointerDown, PointerMove, PointerUp, Resize, Wheel
from .model import PolarVector, ViewportState
from .solver.geometry import cartesian_to_polar, polar_to_cartesian

logger = logging.getLogger(__name__)

ZoomDirection = Literal["in", "out"]


class Viewport:
    """Owns :class:`ViewportState` for one canvas.

    Screen Y grows downward while plane Y grows upward, so the forward map is
    ``(px * scale + pan_x, -py * scale + pan_y)``. Zoom only touches the
    scale, which keeps the plane origin fixed on screen.
    """

    def __init__(self, width: float, height: float, config: Optional[ViewportConfig] = None) -> None:
        if config is not None:
            validate_viewport_config(config)
        self.config = config or get_viewport_config()
        self.width = float(width)
        self.height = float(height)
        self.state = ViewportState(scale=self._clamp(self.config.initial_scale))
        self._recenter()
        self.is_dragging = False
        self.last_pointer: Optional[Tuple[float, float]] = None
        self.hover: Optional[Tuple[float, float]] = None

    @property
    def scale(self) -> float:
        return self.state.scale

    @property
    def center(self) -> Tuple[float, float]:
        return self.width / 2, self.height / 2

    def _clamp(self, scale: float) -> float:
        return min(max(scale, self.config.min_scale), self.config.max_scale)

    def _recenter(self) -> None:
        self.state.pan_x, self.state.pan_y = self.center

    # --- transforms -------------------------------------------------------

    def plane_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return x * self.state.scale + self.state.pan_x, -y * self.state.scale + self.state.pan_y

    def polar_to_screen(self, r: float, theta_deg: float) -> Tuple[float, float]:
        return self.plane_to_screen(*polar_to_cartesian(r, theta_deg))

    def screen_to_plane(self, sx: float, sy: float) -> Tuple[float, float]:
        return (sx - self.state.pan_x) / self.state.scale, -(sy - self.state.pan_y) / self.state.scale

    def screen_to_polar(self, sx: float, sy: float) -> PolarVector:
        return cartesian_to_polar(*self.screen_to_plane(sx, sy))

    # --- state updates ----------------------------------------------------

    def set_scale(self, scale: float) -> None:
        clamped = self._clamp(scale)
        if clamped != scale:
            logger.debug("Scale %.6g outside [%s, %s]; clamped to %.6g",
                         scale, self.config.min_scale, self.config.max_scale, clamped)
        self.state.scale = clamped

    def pan(self, dx: float, dy: float) -> None:
        """Shift by raw screen pixels, independent of the zoom level."""

        self.state.pan_x += dx
        self.state.pan_y += dy

    def zoom(self, direction: ZoomDirection) -> None:
        if direction == "in":
            self.set_scale(self.state.scale * self.config.zoom_factor)
        elif direction == "out":
            self.set_scale(self.state.scale / self.config.zoom_factor)
        else:
            raise ValueError(f"zoom direction must be 'in' or 'out', got {direction!r}")

    def fit_to_radius(self, max_radius: float) -> bool:
        """Scale so ``max_radius`` fills ``fit_fraction`` of the shorter side.

        Returns ``False`` without touching state when ``max_radius`` is not
        positive.
        """

        if not max_radius > 0:
            return False
        self.set_scale(min(self.width, self.height) * self.config.fit_fraction / max_radius)
        self._recenter()
        logger.debug("Fitted radius %.6g at scale %.6g", max_radius, self.state.scale)
        return True

    def on_resize(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)
        self._recenter()

    # --- pointer handling -------------------------------------------------

    def pointer_down(self, x: float, y: float) -> None:
        self.is_dragging = True
        self.last_pointer = (x, y)

    def pointer_move(self, x: float, y: float) -> bool:
        """Track the hover position and pan while dragging; ``True`` if panned."""

        self.hover = (x, y)
        if not self.is_dragging or self.last_pointer is None:
            return False
        last_x, last_y = self.last_pointer
        self.pan(x - last_x, y - last_y)
        self.last_pointer = (x, y)
        return True

    def pointer_up(self) -> None:
        self.is_dragging = False
        self.last_pointer = None

    def wheel(self, delta_sign: float) -> None:
        self.zoom("in" if delta_sign < 0 else "out")

    @property
    def pointer_polar(self) -> Optional[PolarVector]:
        """Polar coordinates under the last hover position, if any."""

        if self.hover is None:
            return None
        return self.screen_to_polar(*self.hover)

    def handle(self, event: InputEvent) -> bool:
        """Apply ``event``; return ``True`` when the view needs a redraw."""

        if isinstance(event, PointerDown):
            self.pointer_down(event.x, event.y)
            return False
        if isinstance(event, PointerMove):
            return self.pointer_move(event.x, event.y)
        if isinstance(event, PointerUp):
            self.pointer_up()
            return False
        if isinstance(event, Wheel):
            self.wheel(event.delta_sign)
            return True
        if isinstance(event, Resize):
            self.on_resize(event.width, event.height)
            return True
        raise TypeError(f"unsupported input event {event!r}")


def format_polar(point: PolarVector) -> str:
    """Coordinate readout text, e.g. ``r: 1.250, θ: 45.00°``."""

    if not math.isfinite(point.r):
        return "r: -, θ: -"
    return f"r: {point.r:.3f}, θ: {point.theta_deg:.2f}°"


__all__ = ["Viewport", "ZoomDirection", "format_polar"]
