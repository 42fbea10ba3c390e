"""Verbose DEBUG tracing for the pure numeric entry points."""

from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 6
_repr.maxtuple = 6

_MAX_ITEMS = 4


def summarize(value: Any) -> str:
    """Return a short, log-friendly rendering of ``value``."""

    if isinstance(value, float):
        return f"{value:.6g}"
    if isinstance(value, np.ndarray):
        if value.size == 0 or value.size > _MAX_ITEMS:
            return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
        return "ndarray(" + ", ".join(f"{float(v):.6g}" for v in value.ravel()) + ")"
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        fields = ", ".join(
            f"{f.name}={summarize(getattr(value, f.name))}" for f in dataclasses.fields(value)
        )
        return f"{type(value).__name__}({fields})"
    if isinstance(value, (list, tuple)):
        items = [summarize(item) for item in value[:_MAX_ITEMS]]
        if len(value) > _MAX_ITEMS:
            items.append("...")
        body = ", ".join(items)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"
    return _repr.repr(value)


def _describe_call(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [summarize(arg) for arg in args]
    parts.extend(f"{key}={summarize(val)}" for key, val in kwargs.items())
    return ", ".join(parts) or "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and failures at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            enabled = logger.isEnabledFor(logging.DEBUG)
            if enabled:
                logger.debug("-> %s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if enabled:
                    logger.exception("!! %s raised", label)
                raise
            if enabled:
                logger.debug("<- %s = %s", label, summarize(result) if log_result else "...")
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with tracing.

    Private helpers (leading underscore) and names in ``skip`` are left alone.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(str(module_name))
    skipped = set(skip or ())

    for attr, value in list(namespace.items()):
        if attr.startswith("_") or attr in skipped:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)
