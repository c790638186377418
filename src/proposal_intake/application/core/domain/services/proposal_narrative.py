from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission


class ProposalNarrative:
    """Plain-text body of the ticket: proposer details followed by the proposal itself."""

    @staticmethod
    def render(submission: ProposalSubmission) -> str:
        affiliation = submission.affiliation or "Not specified"
        details = submission.description or "No details provided."
        return (
            "**Proposer Information:**\n"
            f"- Name: {submission.full_name}\n"
            f"- Email: {submission.email}\n"
            f"- Affiliation: {affiliation}\n"
            "\n"
            "**Proposal Details:**\n"
            f"{details}"
        )
