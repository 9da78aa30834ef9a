"""Behavior-focused tests for HitForwarder."""

from unittest.mock import AsyncMock

import pytest

from ga_beacon.application.services import HitForwarder
from ga_beacon.domain.models import ForwardResult, HitRecord, Severity


class RecordingDiagnosticSink:
    """Diagnostic sink that keeps every event for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[Severity, str]] = []

    def record(self, severity: Severity, message: str) -> None:
        self.events.append((severity, message))

    def messages(self, severity: Severity) -> list[str]:
        return [message for s, message in self.events if s is severity]


def _hit() -> HitRecord:
    return HitRecord(
        tracking_id="UA-12345-1",
        client_id="GA.1-2.1.2",
        page_path="docs/readme",
        ip_address="203.0.113.5",
    )


@pytest.mark.asyncio
async def test_when_collector_accepts_then_records_information() -> None:
    """Given a 2xx collector response, when forwarding, then an info event is recorded."""
    collector = AsyncMock()
    collector.post_hit.return_value = ForwardResult.delivered(200)
    sink = RecordingDiagnosticSink()

    result = await HitForwarder(collector, sink).forward(_hit(), "Mozilla/5.0")

    assert result.succeeded
    assert len(sink.messages(Severity.INFORMATION)) == 1
    assert "GA hit was logged" in sink.messages(Severity.INFORMATION)[0]
    assert sink.messages(Severity.ERROR) == []


@pytest.mark.asyncio
async def test_sends_form_fields_and_user_agent_once() -> None:
    """Given a hit, when forwarding, then the collector gets one call with form and UA."""
    collector = AsyncMock()
    collector.post_hit.return_value = ForwardResult.delivered(200)

    await HitForwarder(collector, RecordingDiagnosticSink()).forward(_hit(), "Agent/1.0")

    collector.post_hit.assert_awaited_once()
    form, user_agent = collector.post_hit.await_args.args
    assert form["t"] == "pageview"
    assert form["dp"] == "docs/readme"
    assert form["uip"] == "203.0.113.5"
    assert user_agent == "Agent/1.0"


@pytest.mark.asyncio
async def test_when_user_agent_missing_then_sends_empty_string() -> None:
    """Given no user agent, when forwarding, then an empty header value is passed on."""
    collector = AsyncMock()
    collector.post_hit.return_value = ForwardResult.delivered(204)

    await HitForwarder(collector, RecordingDiagnosticSink()).forward(_hit(), None)

    assert collector.post_hit.await_args.args[1] == ""


@pytest.mark.asyncio
async def test_when_collector_returns_500_then_records_error() -> None:
    """Given a 500 from the collector, when forwarding, then an error event names the status."""
    collector = AsyncMock()
    collector.post_hit.return_value = ForwardResult.failed("bad", status_code=500)
    sink = RecordingDiagnosticSink()

    result = await HitForwarder(collector, sink).forward(_hit(), "UA")

    assert not result.succeeded
    errors = sink.messages(Severity.ERROR)
    assert len(errors) == 1
    assert "500" in errors[0]
    assert collector.post_hit.await_count == 1


@pytest.mark.asyncio
async def test_when_transport_fails_then_records_error() -> None:
    """Given a transport failure result, when forwarding, then an error event is recorded."""
    collector = AsyncMock()
    collector.post_hit.return_value = ForwardResult.failed("timed out waiting for the collector")
    sink = RecordingDiagnosticSink()

    await HitForwarder(collector, sink).forward(_hit(), "UA")

    errors = sink.messages(Severity.ERROR)
    assert len(errors) == 1
    assert "timed out" in errors[0]


@pytest.mark.asyncio
async def test_when_collector_raises_then_error_is_recorded_not_raised() -> None:
    """Given a collector that raises, when forwarding, then the error is downgraded."""
    collector = AsyncMock()
    collector.post_hit.side_effect = RuntimeError("unexpected")
    sink = RecordingDiagnosticSink()

    result = await HitForwarder(collector, sink).forward(_hit(), "UA")

    assert result.attempted
    assert not result.succeeded
    assert "unexpected" in sink.messages(Severity.ERROR)[0]
