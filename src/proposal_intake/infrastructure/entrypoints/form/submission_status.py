from dataclasses import dataclass
from enum import StrEnum

SUCCESS_MESSAGE = "Your proposal has been submitted successfully!"
DEFAULT_FAILURE_MESSAGE = "Failed to submit proposal. Please try again."


class StatusType(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SubmissionStatus:
    type: StatusType
    message: str
    jira_key: str | None = None
    jira_url: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.type == StatusType.SUCCESS

    @classmethod
    def success(cls, jira_key: str | None, jira_url: str | None) -> "SubmissionStatus":
        return cls(StatusType.SUCCESS, SUCCESS_MESSAGE, jira_key, jira_url)

    @classmethod
    def error(cls, message: str) -> "SubmissionStatus":
        return cls(StatusType.ERROR, message)
