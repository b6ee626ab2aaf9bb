"""Shared telemetry: logging setup and listing spans.

OpenTelemetry provider setup lives in ``telemetry.telemetry`` and is
imported lazily by the lifespan, only when tracing is enabled.
"""

from photofeed.shared.telemetry.logging import get_logger, setup_logging
from photofeed.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "traced",
    "add_span_attributes",
]
