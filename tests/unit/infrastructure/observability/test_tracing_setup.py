import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from proposal_intake.infrastructure.observability import tracing_setup
from proposal_intake.infrastructure.observability.tracing_setup import trace_operation


@pytest.fixture
def exporter(monkeypatch):
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing_setup, "get_tracer", lambda: provider.get_tracer("test"))
    return exporter


@pytest.mark.asyncio
async def test_coroutine_runs_inside_named_span(exporter):
    @trace_operation("tracker.create_issue", {"tracker": "jira"})
    async def create(key):
        return key

    assert await create("RVS-1") == "RVS-1"

    [span] = exporter.get_finished_spans()
    assert span.name == "tracker.create_issue"
    assert span.attributes["tracker"] == "jira"


@pytest.mark.asyncio
async def test_failures_propagate_and_mark_the_span(exporter):
    @trace_operation("tracker.myself")
    async def whoami():
        raise RuntimeError("down")

    with pytest.raises(RuntimeError):
        await whoami()

    [span] = exporter.get_finished_spans()
    assert not span.status.is_ok
