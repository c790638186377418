from enum import StrEnum
from typing import Any


class FastTrack(StrEnum):
    YES = "Yes"
    NO = "No"

    @classmethod
    def from_raw(cls, value: Any) -> "FastTrack":
        """
        Maps the loosely typed fastTrack input to the tracker option.
        Only boolean True and the strings "true" / "Yes" count as a yes.
        """
        if value is True:
            return cls.YES
        if isinstance(value, str) and value in ("true", cls.YES.value):
            return cls.YES
        return cls.NO
