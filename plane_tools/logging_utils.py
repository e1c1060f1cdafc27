"""DEBUG call tracing for the public entry points of the package."""

from __future__ import annotations

import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .graph import Graph
from .point import PlanarPoint

F = TypeVar("F", bound=Callable[..., Any])

MAX_ITEMS = 5
MAX_LENGTH = 400

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = _repr.maxtuple = _repr.maxset = 10


def _point(point: PlanarPoint) -> str:
    return f"({point.x:g}, {point.y:g})"


def _is_segment(value: Any) -> bool:
    return isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, PlanarPoint) for v in value)


def _graph(graph: Graph[Any]) -> str:
    return f"Graph(|V|={len(graph)}, |E|={len(graph.edges())})"


def _array(arr: np.ndarray) -> str:
    summary = f"ndarray(shape={tuple(arr.shape)}, dtype={arr.dtype})"
    if 0 < arr.size <= MAX_ITEMS:
        summary += f", values={_repr.repr(arr.tolist())}"
    return summary


def _collection(value: Any) -> str:
    if isinstance(value, tuple):
        left, right = "(", ")"
    elif isinstance(value, (set, frozenset)):
        left, right = "{", "}"
    else:
        left, right = "[", "]"
    items = [_safe_repr(item) for _, item in zip(range(MAX_ITEMS), value)]
    if len(value) > MAX_ITEMS:
        items.append(f"... ({len(value)} total)")
    return left + ", ".join(items) + right


def _safe_repr(value: Any) -> str:
    """Short description of ``value`` for a log line."""

    if isinstance(value, PlanarPoint):
        return _point(value)
    if _is_segment(value):
        return f"{_point(value[0])}-{_point(value[1])}"
    if isinstance(value, Graph):
        return _graph(value)
    if isinstance(value, np.ndarray):
        return _array(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return _collection(value)

    rendered = _repr.repr(value)
    if len(rendered) > MAX_LENGTH:
        rendered = rendered[:MAX_LENGTH] + "... (truncated)"
    return rendered


def _describe_call(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    described = []
    if args:
        described.append(f"args=[{', '.join(map(_safe_repr, args))}]")
    if kwargs:
        pairs = ", ".join(f"{key}={_safe_repr(val)}" for key, val in kwargs.items())
        described.append(f"kwargs={{{pairs}}}")
    return ", ".join(described) or "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorate a function so its calls are traced on ``logger`` at DEBUG.

    Graphs, points and arrays in the arguments and the result are logged as
    short summaries. Exceptions are logged with their traceback and re-raised.
    """

    def decorator(func: F) -> F:
        label = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("Entering %s (%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if tracing:
                    logger.debug("Exception in %s", label, exc_info=True)
                raise
            if tracing:
                if log_result:
                    logger.debug("Exiting %s -> %s", label, _safe_repr(result))
                else:
                    logger.debug("Exiting %s", label)
            return result

        return cast(F, wrapper)

    return decorator


__all__ = ["debug_log_call"]
