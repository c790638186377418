from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.services.extension_tokenizer import split_extension_field


class ProposalSubmissionDTO(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    first_name: str | None = Field(None, alias="firstName")
    last_name: str | None = Field(None, alias="lastName")
    email: str | None = None
    affiliation: str | None = None
    summary: str | None = None
    description: str | None = None
    isa_type: str | None = Field(None, alias="isaType")
    # Booleans and "Yes"/"No" strings both arrive here; coercion would change their meaning
    fast_track: Any = Field(None, alias="fastTrack")
    github_url: str | None = Field(None, alias="githubUrl")
    extensions: list[Any] | str | None = None

    def to_domain(self) -> ProposalSubmission:
        return ProposalSubmission(
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            email=self.email or "",
            affiliation=self.affiliation or "",
            summary=self.summary or "",
            description=self.description or "",
            isa_type=self.isa_type or "",
            fast_track=self.fast_track,
            github_url=self.github_url or None,
            extensions=split_extension_field(self.extensions),
        )
