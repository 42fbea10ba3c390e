"""Coerce raw form/JSON values into solver inputs."""

from __future__ import annotations

import logging
import math
import numbers
from typing import Any, Mapping, Optional, Sequence

from .model import SolverInput, TestRun

logger = logging.getLogger(__name__)

RUN_COUNT = 3


class ValidationError(ValueError):
    """Raised when an input payload has the wrong structure."""


def coerce_number(value: object, *, field: str = "value") -> float:
    """Return ``value`` as a finite float, falling back to ``0.0``.

    Blanks, garbage, booleans and non-finite values all read as zero instead
    of failing.
    """

    result: Optional[float] = None
    if isinstance(value, bool):
        result = None
    elif isinstance(value, numbers.Real):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            result = None

    if result is None or not math.isfinite(result):
        logger.debug("Invalid %s %r treated as 0", field, value)
        return 0.0
    return result


def parse_run(raw: Mapping[str, Any], color_id: int) -> TestRun:
    if not isinstance(raw, Mapping):
        raise ValidationError(f"run {color_id} must be an object with 'r' and 'theta'")
    return TestRun(
        amplitude=coerce_number(raw.get("r"), field=f"run {color_id} amplitude"),
        phase_deg=coerce_number(raw.get("theta"), field=f"run {color_id} phase"),
        color_id=color_id,
    )


def build_solver_input(v0: object, runs: Sequence[Mapping[str, Any]]) -> SolverInput:
    """Build a :class:`SolverInput` from the base amplitude and three raw runs."""

    if isinstance(runs, (str, bytes)) or not isinstance(runs, Sequence):
        raise ValidationError("'runs' must be a list of three {r, theta} objects")
    if len(runs) != RUN_COUNT:
        raise ValidationError(f"expected exactly {RUN_COUNT} runs, got {len(runs)}")
    parsed = tuple(parse_run(raw, idx) for idx, raw in enumerate(runs, start=1))
    return SolverInput(
        base_amplitude=coerce_number(v0, field="base amplitude"),
        runs=parsed,  # type: ignore[arg-type]
    )


def parse_payload(payload: object) -> SolverInput:
    """Parse a ``POST /calculate`` body of the form ``{v0, runs: [{r, theta}] * 3}``."""

    if not isinstance(payload, Mapping):
        raise ValidationError("request body must be a JSON object")
    return build_solver_input(payload.get("v0"), payload.get("runs"))  # type: ignore[arg-type]


def parse_form(values: Mapping[str, object]) -> SolverInput:
    """Parse flat form fields: ``init-amp``, ``t1-amp``, ``t1-phase`` ... ``t3-phase``."""

    runs = [
        {"r": values.get(f"t{idx}-amp"), "theta": values.get(f"t{idx}-phase")}
        for idx in range(1, RUN_COUNT + 1)
    ]
    return build_solver_input(values.get("init-amp"), runs)


__all__ = [
    "RUN_COUNT",
    "ValidationError",
    "build_solver_input",
    "coerce_number",
    "parse_form",
    "parse_payload",
    "parse_run",
]
