from opentelemetry.sdk.trace import TracerProvider

from proposal_intake.infrastructure.observability.logging.record_shaper import shape_intake_record


def shape(**event):
    return shape_intake_record(None, "info", event)


def test_fields_are_grouped_by_concern():
    record = shape(
        event="Tracker refused the proposal",
        level="error",
        component="submit_proposal_usecase",
        correlation_id="abc123",
        request_method="POST",
        request_path="/api/submit",
        outcome="upstream_auth",
        upstream="jira",
        operation="create_issue",
        error_type="TrackerError",
        error_code=401,
    )

    assert record["message"] == "Tracker refused the proposal"
    assert record["level"] == "error"
    assert record["service"] == "proposal-intake"
    assert record["component"] == "submit_proposal_usecase"
    assert record["correlation_id"] == "abc123"
    assert record["request"] == {"method": "POST", "path": "/api/submit"}
    assert record["submission"] == {"outcome": "upstream_auth"}
    assert record["tracker"] == {"system": "jira", "operation": "create_issue"}
    assert record["error"] == {"type": "TrackerError", "code": 401}
    assert "extra" not in record


def test_ticket_account_and_status_have_their_own_slots():
    record = shape(event="done", ticket_key="RVS-42", account="557058:abc", http_status=200, duration_ms=12.5)

    assert record["submission"] == {"ticket_key": "RVS-42"}
    assert record["tracker"] == {"account": "557058:abc"}
    assert record["request"] == {"status": 200, "duration_ms": 12.5}


def test_groups_without_fields_are_left_out_and_unknown_fields_go_to_extra():
    record = shape(event="Boot diagnostics", app_name="Proposal Intake")

    assert not {"request", "submission", "tracker", "error"} & record.keys()
    assert record["extra"] == {"app_name": "Proposal Intake"}
    assert record["level"] == "info"


def test_exception_stays_at_top_level_for_renderers():
    record = shape(event="boom", exception="Traceback ...")

    assert record["exception"] == "Traceback ..."
    assert "extra" not in record


def test_trace_id_comes_from_the_active_span():
    tracer = TracerProvider().get_tracer("test")

    with tracer.start_as_current_span("tracker.create_issue") as span:
        record = shape(event="inside span")

    assert record["trace_id"] == format(span.get_span_context().trace_id, "032x")


def test_no_trace_id_outside_a_span():
    assert "trace_id" not in shape(event="no span")
