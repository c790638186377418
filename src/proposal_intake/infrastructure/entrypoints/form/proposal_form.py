from dataclasses import dataclass, fields
from typing import Any

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.services.extension_tokenizer import split_extension_input


@dataclass
class ProposalForm:
    """Mutable record behind the proposal form. Every field holds the raw text the user typed."""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    affiliation: str = ""
    summary: str = ""
    description: str = ""
    isa_type: str = ""
    fast_track: str = ""
    github_url: str = ""
    extensions: str = ""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def to_submission(self) -> ProposalSubmission:
        return ProposalSubmission(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            affiliation=self.affiliation,
            summary=self.summary,
            description=self.description,
            isa_type=self.isa_type,
            fast_track=self.fast_track,
            github_url=self.github_url or None,
            extensions=tuple(split_extension_input(self.extensions)),
        )

    def to_request_body(self) -> dict[str, Any]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "affiliation": self.affiliation,
            "summary": self.summary,
            "description": self.description,
            "isaType": self.isa_type,
            "fastTrack": self.fast_track,
            "githubUrl": self.github_url or None,
            "extensions": split_extension_input(self.extensions),
        }
