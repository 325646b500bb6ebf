"""
Span helpers for diff runs.

trace_operation opens a span around a block; the add_* helpers annotate
whichever span is current, so code deep inside a comparison can attach
details without being handed the span.
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.util.types import AttributeValue

from .tracer import get_tracer

NATIVE_TYPES = (bool, int, float, str)


def _attributes(values: Mapping[str, Any]) -> dict[str, AttributeValue]:
    # Numbers and flags keep their type, anything else becomes text
    return {
        key: value if isinstance(value, NATIVE_TYPES) else str(value)
        for key, value in values.items()
        if value is not None
    }


def _mark_error(span: trace.Span, exc: BaseException) -> None:
    span.set_attributes({
        "error": True,
        "error.type": type(exc).__name__,
        "error.message": str(exc),
    })
    span.record_exception(exc)
    span.set_status(trace.Status(trace.StatusCode.ERROR, str(exc)))


@contextmanager
def trace_operation(
    operation_name: str,
    kind: trace.SpanKind = trace.SpanKind.INTERNAL,
    **attributes: Any,
) -> Iterator[trace.Span]:
    """
    Run a block inside a span.

    Attributes with a None value are dropped. An exception escaping the
    block marks the span as failed and is re-raised.

    Args:
        operation_name: Span name
        kind: Span kind (INTERNAL, CLIENT, SERVER, etc.)
        **attributes: Attributes set when the span starts

    Yields:
        The span, for attributes only known at the end

    Example:
        >>> with trace_operation("row_diff", columns=3) as span:
        ...     differ.diff(expected, actual)
        ...     span.set_attribute("row_status", "SUCCESS")
    """
    with get_tracer().start_as_current_span(
        operation_name,
        kind=kind,
        attributes=_attributes(attributes),
        record_exception=False,
        set_status_on_exception=False,
    ) as span:
        try:
            yield span
        except Exception as e:
            _mark_error(span, e)
            raise


def add_span_attributes(**attributes: Any) -> None:
    """Set attributes on the current span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.set_attributes(_attributes(attributes))


def add_span_event(name: str, **attributes: Any) -> None:
    """Add an event to the current span, if one is recording."""
    span = trace.get_current_span()
    if span.is_recording():
        span.add_event(name, attributes=_attributes(attributes))
