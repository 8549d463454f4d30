"""Tests for tracing helpers."""

import logging

import pytest
from opentelemetry import trace
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from conway.core.telemetry import (
    SERVICE_NAME,
    SERVICE_VERSION,
    LoggingSpanExporter,
    create_tracer_provider,
    get_tracer,
)


@pytest.fixture
def tracer_and_exporter():
    exporter = InMemorySpanExporter()
    provider = create_tracer_provider(exporter)
    yield get_tracer(provider), exporter
    provider.shutdown()


class TestTracerProvider:
    """Test cases for provider and tracer setup."""

    def test_resource(self):
        """Providers carry the service identity."""
        provider = create_tracer_provider()
        attributes = provider.resource.attributes

        assert attributes["service.name"] == SERVICE_NAME == "Conway.GameOfLife"
        assert attributes["service.version"] == SERVICE_VERSION == "1.0.0"

    def test_provider_not_installed_globally(self):
        before = trace.get_tracer_provider()
        create_tracer_provider(InMemorySpanExporter())
        assert trace.get_tracer_provider() is before

    def test_global_tracer(self):
        assert isinstance(get_tracer(), trace.Tracer)


class TestSpans:
    """Test cases for spans recorded through the SDK."""

    def test_span_recorded(self, tracer_and_exporter):
        """Finished spans reach the exporter with their attributes."""
        tracer, exporter = tracer_and_exporter

        with tracer.start_as_current_span("work") as span:
            span.set_attribute("answer", 42)
            span.set_attribute("extra", "yes")

        (finished,) = exporter.get_finished_spans()
        assert finished.name == "work"
        assert dict(finished.attributes) == {"answer": 42, "extra": "yes"}
        assert finished.parent is None
        assert finished.end_time >= finished.start_time

    def test_nested_spans(self, tracer_and_exporter):
        """Child spans share the trace and point at their parent."""
        tracer, exporter = tracer_and_exporter

        with tracer.start_as_current_span("parent"):
            with tracer.start_as_current_span("child"):
                pass
            with tracer.start_as_current_span("child"):
                pass

        spans = exporter.get_finished_spans()
        assert [s.name for s in spans] == ["child", "child", "parent"]
        first, second, parent = spans
        for child in (first, second):
            assert child.context.trace_id == parent.context.trace_id
            assert child.parent.span_id == parent.context.span_id
        assert first.context.span_id != second.context.span_id

    def test_separate_traces(self, tracer_and_exporter):
        """Sibling root spans get distinct trace ids."""
        tracer, exporter = tracer_and_exporter

        with tracer.start_as_current_span("one"):
            pass
        with tracer.start_as_current_span("two"):
            pass

        one, two = exporter.get_finished_spans()
        assert one.context.trace_id != two.context.trace_id

    def test_span_ends_on_error(self, tracer_and_exporter):
        """Spans are finished even when the block raises."""
        tracer, exporter = tracer_and_exporter

        with pytest.raises(RuntimeError):
            with tracer.start_as_current_span("failing"):
                raise RuntimeError("boom")

        (failing,) = exporter.get_finished_spans()
        assert failing.name == "failing"
        assert not failing.status.is_ok


class TestLoggingSpanExporter:
    """Test cases for the logging exporter."""

    def test_spans_logged_at_debug(self, caplog):
        log = logging.getLogger("conway.test")
        provider = create_tracer_provider(LoggingSpanExporter(log))
        tracer = get_tracer(provider)

        with caplog.at_level(logging.DEBUG, logger="conway.test"):
            with tracer.start_as_current_span("Board.Tick") as span:
                span.set_attribute("board.size", "3x3")

        provider.shutdown()
        assert "Board.Tick" in caplog.text
        assert "3x3" in caplog.text
        assert "parent=None" in caplog.text

    def test_child_logs_parent_id(self, caplog):
        provider = create_tracer_provider(LoggingSpanExporter())
        tracer = get_tracer(provider)

        with caplog.at_level(logging.DEBUG, logger="conway.core.telemetry"):
            with tracer.start_as_current_span("outer") as outer:
                with tracer.start_as_current_span("inner"):
                    pass

        provider.shutdown()
        outer_id = f"{outer.get_span_context().span_id:016x}"
        inner_record = next(r for r in caplog.records if "span inner" in r.getMessage())
        assert f"parent={outer_id}" in inner_record.getMessage()
