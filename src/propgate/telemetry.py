"""Tracing for propgate.

Wraps OpenTelemetry's tracer so the engine can describe its work in spans
without caring whether the host application configured a tracer provider.
With only ``opentelemetry-api`` installed every span is a cheap no-op.

Example:
    ```python
    with traced_operation("propgate.process", {"propgate.property_count": 3}) as span:
        ...
        span.set_attribute("propgate.result", "ok")
    ```
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Protocol

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from propgate.version import PACKAGE_NAME, PACKAGE_VERSION

logger = logging.getLogger(__name__)

__all__ = [
    "Span",
    "traced_operation",
    "is_telemetry_enabled",
    "set_telemetry_enabled",
]

_enabled = True
_tracer: trace.Tracer | None = None


class Span(Protocol):
    def set_attribute(self, key: str, value: Any) -> None: ...

    def record_exception(self, exception: Exception) -> None: ...

    def is_recording(self) -> bool: ...


class NoOpSpan:
    """No-op span for when telemetry is disabled."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def record_exception(self, exception: Exception) -> None:
        pass

    def is_recording(self) -> bool:
        return False


class SpanWrapper:
    """Wraps an OpenTelemetry span, dropping attribute values it cannot carry."""

    def __init__(self, otel_span: Any) -> None:
        self._span = otel_span

    def set_attribute(self, key: str, value: Any) -> None:
        if not self.is_recording() or value is None:
            return
        if isinstance(value, str | int | float | bool):
            self._span.set_attribute(key, value)
        elif isinstance(value, list | tuple) and all(
            isinstance(v, str | int | float | bool) for v in value
        ):
            self._span.set_attribute(key, list(value))
        else:
            self._span.set_attribute(key, str(value))

    def record_exception(self, exception: Exception) -> None:
        if self.is_recording():
            self._span.record_exception(exception)
            self._span.set_status(Status(StatusCode.ERROR, str(exception)))

    def is_recording(self) -> bool:
        return self._span is not None and bool(self._span.is_recording())


def _get_tracer() -> trace.Tracer:
    """Get or create the propgate tracer."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(PACKAGE_NAME, PACKAGE_VERSION)
    return _tracer


def is_telemetry_enabled() -> bool:
    return _enabled


def set_telemetry_enabled(enabled: bool) -> None:
    """Turn span creation on or off for the whole process."""
    global _enabled
    _enabled = enabled
    logger.debug(f"propgate telemetry {'enabled' if enabled else 'disabled'}")


@contextmanager
def traced_operation(name: str, attributes: dict[str, Any] | None = None) -> Iterator[Span]:
    """Context manager for tracing an operation.

    Args:
        name: Operation name (e.g., "propgate.process")
        attributes: Initial span attributes

    Yields:
        Span object (a no-op span when telemetry is disabled)
    """
    if not _enabled:
        yield NoOpSpan()
        return

    with _get_tracer().start_as_current_span(
        name, record_exception=False, set_status_on_exception=False
    ) as otel_span:
        span = SpanWrapper(otel_span)

        if attributes:
            for key, value in attributes.items():
                span.set_attribute(key, value)

        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            raise
