from proposal_intake.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from proposal_intake.infrastructure.observability.logging.record_shaper import shape_intake_record

__all__ = [
    "CorrelationMiddleware",
    "shape_intake_record",
]
