"""Prometheus metrics declarations for the proposal intake service.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never dynamic IDs (issue keys, emails).
"""

from prometheus_client import Counter, Histogram, start_http_server

SUBMISSIONS_TOTAL = Counter(
    "proposal_intake_submissions_total",
    "Proposal submissions handled, by outcome",
    ["outcome"],
)

TRACKER_CALLS_TOTAL = Counter(
    "proposal_intake_tracker_calls_total",
    "Outbound issue tracker calls",
    ["operation", "outcome"],
)

TRACKER_LATENCY_SECONDS = Histogram(
    "proposal_intake_tracker_latency_seconds",
    "Issue tracker call latency in seconds",
    ["operation"],
)

_EXPOSED = False


def expose_metrics(port: int) -> None:
    """Serve /metrics on a side port. Only the first call binds."""
    global _EXPOSED  # noqa: PLW0603
    if _EXPOSED:
        return
    _EXPOSED = True
    start_http_server(port)
