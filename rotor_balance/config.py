"""Configuration helpers for viewport and grid defaults."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class ViewportConfig:
    """Defaults applied to every new :class:`~rotor_balance.viewport.Viewport`."""

    initial_scale: float = 50.0  # pixels per plane unit
    min_scale: float = 0.005
    max_scale: float = 1000.0
    zoom_factor: float = 1.1
    fit_fraction: float = 0.45
    min_pixel_spacing: float = 60.0
    spoke_step_deg: int = 30
    grid_extent_factor: float = 1.5


_VIEWPORT_CONFIG = ViewportConfig()


def validate_viewport_config(config: ViewportConfig) -> None:
    if not 0 < config.min_scale <= config.max_scale:
        raise ValueError("viewport scale bounds must satisfy 0 < min_scale <= max_scale")


def get_viewport_config() -> ViewportConfig:
    return copy.deepcopy(_VIEWPORT_CONFIG)


def set_viewport_config(config: ViewportConfig) -> None:
    validate_viewport_config(config)
    global _VIEWPORT_CONFIG
    _VIEWPORT_CONFIG = copy.deepcopy(config)
