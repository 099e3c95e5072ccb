"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

MAX_TICKETS_PER_PURCHASE = 25


class TicketType(Enum):
    """Closed set of ticket types sold."""

    INFANT = "INFANT"
    CHILD = "CHILD"
    ADULT = "ADULT"

    @property
    def unit_price(self) -> int:
        return TICKET_PRICES[self]

    @property
    def requires_seat(self) -> bool:
        """Infants sit on an adult's lap."""
        return self is not TicketType.INFANT


TICKET_PRICES = MappingProxyType(
    {
        TicketType.INFANT: 0,
        TicketType.CHILD: 15,
        TicketType.ADULT: 25,
    }
)


def is_int(value: object) -> bool:
    """True for a real ``int``. Bools and floats do not count."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_positive_int(value: object) -> bool:
    return is_int(value) and value > 0


@dataclass(frozen=True)
class AccountId:
    """Caller-supplied account identifier. Never looked up, only routed."""

    value: int

    def __post_init__(self) -> None:
        if not is_positive_int(self.value):
            raise ValueError("Account ID must be a positive integer")

    def __int__(self) -> int:
        return self.value
