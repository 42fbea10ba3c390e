"""Nice-number ring spacing and polar grid layout."""

from __future__ import annotations

import logging
import math
from typing import List, Optional

from .config import ViewportConfig
from .model import GridLayout, GridSpec
from .viewport import Viewport

logger = logging.getLogger(__name__)


def snap_nice(normalized: float) -> int:
    """Snap a mantissa in ``[1, 10)`` up to the nearest of 1, 2, 5, 10."""

    if normalized <= 1:
        return 1
    if normalized <= 2:
        return 2
    if normalized <= 5:
        return 5
    return 10


def compute_nice_step(scale: float, min_pixel_spacing: float = 60.0) -> GridSpec:
    """Smallest ``{1,2,5} x 10^k`` step whose rings sit ``min_pixel_spacing`` px apart."""

    if not scale > 0 or not min_pixel_spacing > 0:
        raise ValueError(
            f"scale and min_pixel_spacing must be positive (got {scale!r}, {min_pixel_spacing!r})"
        )
    raw_step = min_pixel_spacing / scale
    magnitude = 10.0 ** math.floor(math.log10(raw_step))
    step = snap_nice(raw_step / magnitude) * magnitude
    return GridSpec(step=step, magnitude=magnitude)


def format_tick(value: float) -> str:
    """Format a ring radius at 10 significant digits, dropping float noise."""

    return f"{value:.10g}"


def build_grid(viewport: Viewport, config: Optional[ViewportConfig] = None) -> GridLayout:
    config = config or viewport.config
    spec = compute_nice_step(viewport.scale, config.min_pixel_spacing)
    max_radius_px = math.hypot(viewport.width, viewport.height) * config.grid_extent_factor

    rings: List[float] = []
    index = 1
    while index * spec.step * viewport.scale < max_radius_px:
        # radii are index * step, never a running sum
        rings.append(index * spec.step)
        index += 1

    spokes = tuple(float(angle) for angle in range(0, 360, config.spoke_step_deg))
    logger.debug("Grid step=%s rings=%d at scale %.6g", format_tick(spec.step), len(rings), viewport.scale)
    return GridLayout(spec=spec, max_radius_px=max_radius_px, rings=tuple(rings), spokes=spokes)


__all__ = ["build_grid", "compute_nice_step", "format_tick", "snap_nice"]
