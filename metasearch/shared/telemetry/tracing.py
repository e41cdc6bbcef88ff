"""Tracing helpers for resolvers.

Spans are no-ops when no tracer provider is configured, so resolvers can be
traced unconditionally.
"""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

F = TypeVar("F", bound=Callable[..., Any])

# Only these arguments (positional or keyword) are copied onto spans.
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "start", "count", "limit", "field", "path", "query", "urn",
})


def traced(operation_name: str | None = None) -> Callable[[F], F]:
    """Decorator: run a sync function inside a span; record failures on it.

    Args:
        operation_name: Span name (defaults to module.qualname).
    """

    def decorator(func: F) -> F:
        tracer = trace.get_tracer(func.__module__)
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"
        signature = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name) as span:
                arguments = signature.bind_partial(*args, **kwargs).arguments
                for key, value in arguments.items():
                    if key in _SAFE_SPAN_ATTR_KEYS and value is not None:
                        span.set_attribute(f"arg.{key}", str(value))
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        return wrapper  # type: ignore[return-value]

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
