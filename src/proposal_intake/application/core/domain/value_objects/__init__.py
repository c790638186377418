from proposal_intake.application.core.domain.value_objects.failure_kind import FailureKind
from proposal_intake.application.core.domain.value_objects.fast_track import FastTrack
from proposal_intake.application.core.domain.value_objects.field_error import FieldError
from proposal_intake.application.core.domain.value_objects.isa_type import IsaType

__all__ = [
    "FailureKind",
    "FastTrack",
    "FieldError",
    "IsaType",
]
