from tickets.domain.models import OrderTotals, PurchaseSummary, TicketTypeRequest
from tickets.domain.value_objects import (
    MAX_TICKETS_PER_PURCHASE,
    TICKET_PRICES,
    AccountId,
    TicketType,
)

__all__ = [
    "TicketTypeRequest",
    "OrderTotals",
    "PurchaseSummary",
    "TicketType",
    "TICKET_PRICES",
    "MAX_TICKETS_PER_PURCHASE",
    "AccountId",
]
