"""Domain models for a ticket purchase.

These are pure domain objects. Nothing here is persisted; an order lives for
the length of a single purchase call.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from tickets.domain.errors import InvalidTicketRequestError
from tickets.domain.value_objects import TicketType, is_positive_int


@dataclass(frozen=True)
class TicketTypeRequest:
    """N tickets of a single type."""

    ticket_type: TicketType
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.ticket_type, TicketType):
            raise InvalidTicketRequestError(f"Invalid ticket type: {self.ticket_type!r}")
        if not is_positive_int(self.quantity):
            raise InvalidTicketRequestError("Number of tickets must be a positive integer")

    def unit_price(self) -> int:
        return self.ticket_type.unit_price

    def total_price(self) -> int:
        return self.unit_price() * self.quantity

    def requires_seat(self) -> bool:
        return self.ticket_type.requires_seat


def _freeze_breakdown(counts: Mapping[TicketType, int]) -> Mapping[TicketType, int]:
    return MappingProxyType({ticket_type: counts.get(ticket_type, 0) for ticket_type in TicketType})


@dataclass(frozen=True)
class OrderTotals:
    """Aggregated amount, seats and per-type quantities of a batch of requests."""

    total_amount: int
    total_seats: int
    total_tickets: int
    ticket_breakdown: Mapping[TicketType, int]

    @classmethod
    def from_requests(cls, requests: Iterable[TicketTypeRequest]) -> Self:
        """Sum every request. Repeated types add up, they do not overwrite."""
        total_amount = 0
        total_seats = 0
        total_tickets = 0
        breakdown = dict.fromkeys(TicketType, 0)

        for request in requests:
            total_amount += request.total_price()
            total_tickets += request.quantity
            breakdown[request.ticket_type] += request.quantity
            if request.requires_seat():
                total_seats += request.quantity

        return cls(
            total_amount=total_amount,
            total_seats=total_seats,
            total_tickets=total_tickets,
            ticket_breakdown=_freeze_breakdown(breakdown),
        )

    def count(self, ticket_type: TicketType) -> int:
        return self.ticket_breakdown[ticket_type]


@dataclass(frozen=True)
class PurchaseSummary:
    """Result of a completed purchase."""

    total_amount: int
    total_seats: int
    ticket_breakdown: Mapping[TicketType, int]

    @classmethod
    def from_totals(cls, totals: OrderTotals) -> Self:
        return cls(
            total_amount=totals.total_amount,
            total_seats=totals.total_seats,
            ticket_breakdown=_freeze_breakdown(totals.ticket_breakdown),
        )
