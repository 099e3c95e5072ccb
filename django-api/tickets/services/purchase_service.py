"""Purchase service - all business logic lives here.

Services:
- Depend only on interfaces (gateways)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every rejection is raised before either gateway is called.
"""

import logging
from collections.abc import Sequence

from tickets.domain.errors import (
    AdultRequiredError,
    InfantsExceedAdultsError,
    InvalidAccountIdError,
    InvalidTicketRequestsError,
    TicketLimitExceededError,
)
from tickets.domain.models import OrderTotals, PurchaseSummary, TicketTypeRequest
from tickets.domain.value_objects import MAX_TICKETS_PER_PURCHASE, AccountId, TicketType
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class PurchaseService:
    """Service for ticket purchases."""

    def __init__(
        self,
        payment_gateway: PaymentGateway,
        seat_reservation_gateway: SeatReservationGateway,
    ) -> None:
        self._payment_gateway = payment_gateway
        self._seat_reservation_gateway = seat_reservation_gateway

    def purchase(self, account_id: int, requests: Sequence[TicketTypeRequest]) -> PurchaseSummary:
        """Validate, price and dispatch a batch of ticket requests.

        Payment is taken before seats are reserved. Gateway errors propagate
        unchanged.

        Raises:
            InvalidAccountIdError: If account_id is not a positive integer.
            InvalidTicketRequestsError: If requests is empty or holds
                anything other than TicketTypeRequest instances.
            TicketLimitExceededError: If more than 25 tickets are requested.
            AdultRequiredError: If child or infant tickets have no adult.
            InfantsExceedAdultsError: If infants outnumber adults.
        """
        account = self._parse_account_id(account_id)
        self._validate_requests(requests)

        totals = OrderTotals.from_requests(requests)
        self._validate_business_rules(totals)

        if totals.total_amount > 0:
            logger.debug("Charging %s to account %s", totals.total_amount, account.value)
            self._payment_gateway.charge(account.value, totals.total_amount)

        if totals.total_seats > 0:
            logger.debug("Reserving %s seats for account %s", totals.total_seats, account.value)
            self._seat_reservation_gateway.reserve(account.value, totals.total_seats)

        logger.info(
            "Purchase completed for account %s: amount=%s seats=%s",
            account.value,
            totals.total_amount,
            totals.total_seats,
        )
        return PurchaseSummary.from_totals(totals)

    @staticmethod
    def _parse_account_id(account_id: int) -> AccountId:
        try:
            return AccountId(account_id)
        except ValueError as exc:
            raise InvalidAccountIdError() from exc

    @staticmethod
    def _validate_requests(requests: Sequence[TicketTypeRequest]) -> None:
        if not isinstance(requests, Sequence) or isinstance(requests, (str, bytes)):
            raise InvalidTicketRequestsError("Ticket requests must be a sequence")
        if len(requests) == 0:
            raise InvalidTicketRequestsError("At least one ticket request must be provided")
        for request in requests:
            if not isinstance(request, TicketTypeRequest):
                raise InvalidTicketRequestsError(
                    "All ticket requests must be TicketTypeRequest instances"
                )

    @staticmethod
    def _validate_business_rules(totals: OrderTotals) -> None:
        if totals.total_tickets > MAX_TICKETS_PER_PURCHASE:
            raise TicketLimitExceededError(MAX_TICKETS_PER_PURCHASE)

        adults = totals.count(TicketType.ADULT)
        infants = totals.count(TicketType.INFANT)
        children = totals.count(TicketType.CHILD)

        if (children > 0 or infants > 0) and adults == 0:
            raise AdultRequiredError()

        # One lap per adult.
        if infants > adults:
            raise InfantsExceedAdultsError()
