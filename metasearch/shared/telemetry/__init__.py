"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from metasearch.shared.telemetry.logging import RequestIdFilter, setup_logging
from metasearch.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from metasearch.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "RequestIdFilter",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
