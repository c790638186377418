from proposal_intake.application.core.domain.exceptions.tracker_error import TrackerError

__all__ = [
    "TrackerError",
]
