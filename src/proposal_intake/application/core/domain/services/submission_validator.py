import re

from proposal_intake.application.core.domain.entities.proposal_submission import ProposalSubmission
from proposal_intake.application.core.domain.value_objects.field_error import FieldError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
GITHUB_URL_PREFIX = "https://github.com/"


class SubmissionValidator:
    """
    Field checks shared by the submission endpoint and the form client.
    Errors are returned in a stable order; nothing here raises.
    """

    @classmethod
    def validate(cls, submission: ProposalSubmission) -> list[FieldError]:
        errors: list[FieldError] = []

        if not cls._present(submission.first_name):
            errors.append(FieldError("first_name", "First name is required"))
        if not cls._present(submission.last_name):
            errors.append(FieldError("last_name", "Last name is required"))
        if not cls._present(submission.email):
            errors.append(FieldError("email", "Email is required"))
        elif not EMAIL_PATTERN.fullmatch(submission.email):
            errors.append(FieldError("email", "Invalid email format"))
        if not cls._present(submission.summary):
            errors.append(FieldError("summary", "Specification name is required"))
        if not cls._present(submission.description):
            errors.append(FieldError("description", "Proposal details are required"))
        if submission.github_url and not submission.github_url.startswith(GITHUB_URL_PREFIX):
            errors.append(FieldError("github_url", f"GitHub URL must start with {GITHUB_URL_PREFIX}"))

        return errors

    @classmethod
    def validate_form(cls, submission: ProposalSubmission) -> list[FieldError]:
        """Server checks plus the selections the form insists on before sending."""
        errors = cls.validate(submission)

        if not cls._present(submission.affiliation):
            errors.append(FieldError("affiliation", "Affiliation is required"))
        if not submission.isa_type:
            errors.append(FieldError("isa_type", "Please select ISA or NON-ISA"))
        if not submission.fast_track:
            errors.append(FieldError("fast_track", "Please select Fast Track option"))

        return errors

    @staticmethod
    def _present(value: str | None) -> bool:
        return bool(value and value.strip())
