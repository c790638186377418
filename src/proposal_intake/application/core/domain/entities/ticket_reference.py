from dataclasses import dataclass


@dataclass(frozen=True)
class TicketReference:
    key: str
    id: str
    url: str
