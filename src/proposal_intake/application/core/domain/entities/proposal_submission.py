from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ProposalSubmission:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    affiliation: str = ""
    summary: str = ""
    description: str = ""
    isa_type: str = ""
    # Kept raw: the form sends "Yes"/"No", other callers send booleans
    fast_track: Any = None
    github_url: str | None = None
    extensions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
