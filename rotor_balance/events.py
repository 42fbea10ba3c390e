"""Normalized input events delivered by the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PointerDown:
    x: float
    y: float


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerUp:
    pass


@dataclass(frozen=True)
class Wheel:
    delta_sign: int  # negative scrolls up (zoom in)


@dataclass(frozen=True)
class Resize:
    width: float
    height: float


InputEvent = Union[PointerDown, PointerMove, PointerUp, Wheel, Resize]

__all__ = ["InputEvent", "PointerDown", "PointerMove", "PointerUp", "Resize", "Wheel"]
