"""OpenTelemetry tracing for game runs.

The engine only talks to the ``opentelemetry.trace`` API. Without a
configured provider its spans are no-ops; frontends build their own
TracerProvider with create_tracer_provider() and hand the resulting tracer
to the engine.
"""

import logging
from typing import Optional, Sequence

from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME as SERVICE_NAME_KEY
from opentelemetry.sdk.resources import SERVICE_VERSION as SERVICE_VERSION_KEY
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor, SpanExporter, SpanExportResult

SERVICE_NAME = "Conway.GameOfLife"
SERVICE_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_tracer_provider(*exporters: SpanExporter) -> TracerProvider:
    """Build a provider tagged with the service identity.

    Args:
        exporters: Exporters that receive every finished span, each through
            its own SimpleSpanProcessor

    Returns:
        Configured TracerProvider (not installed globally)
    """
    resource = Resource.create({SERVICE_NAME_KEY: SERVICE_NAME, SERVICE_VERSION_KEY: SERVICE_VERSION})
    provider = TracerProvider(resource=resource)
    for exporter in exporters:
        provider.add_span_processor(SimpleSpanProcessor(exporter))
    return provider


def get_tracer(provider: Optional[trace.TracerProvider] = None) -> trace.Tracer:
    """Get the service tracer from a provider, or from the global one."""
    if provider is None:
        return trace.get_tracer(SERVICE_NAME, SERVICE_VERSION)
    return provider.get_tracer(SERVICE_NAME, SERVICE_VERSION)


class LoggingSpanExporter(SpanExporter):
    """Writes finished spans to a logger at DEBUG level."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self.log = log or logger

    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        for span in spans:
            parent = f"{span.parent.span_id:016x}" if span.parent else None
            duration = ((span.end_time or 0) - (span.start_time or 0)) / 1e9
            self.log.debug(
                "span %s trace=%032x id=%016x parent=%s duration=%.6fs attributes=%s",
                span.name,
                span.context.trace_id,
                span.context.span_id,
                parent,
                duration,
                dict(span.attributes or {}),
            )
        return SpanExportResult.SUCCESS

    def shutdown(self) -> None:
        pass
