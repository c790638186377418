from enum import StrEnum


class IsaType(StrEnum):
    ISA = "ISA"
    NON_ISA = "NON-ISA"

    @classmethod
    def resolve(cls, raw: str | None) -> str:
        """Returns the submitted classification, or ISA when nothing was chosen."""
        return raw or cls.ISA.value
