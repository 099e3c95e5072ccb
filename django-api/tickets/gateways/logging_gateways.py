"""Placeholder gateways used when no real payment or booking provider is configured.

They check their arguments the way the providers do and log the call.
No money moves and no seat is held.
"""

import logging

from tickets.domain.value_objects import is_int, is_positive_int
from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway

logger = logging.getLogger(__name__)


class LoggingPaymentGateway(PaymentGateway):
    """Payment gateway that only records the charge in the log."""

    def charge(self, account_id: int, amount: int) -> None:
        if not is_positive_int(account_id):
            raise TypeError("account_id must be an integer greater than zero")
        if not is_int(amount):
            raise TypeError("amount must be an integer")

        logger.info("Charged %s to account %s", amount, account_id)


class LoggingSeatReservationGateway(SeatReservationGateway):
    """Seat reservation gateway that only records the reservation in the log."""

    def reserve(self, account_id: int, seat_count: int) -> None:
        if not is_positive_int(account_id):
            raise TypeError("account_id must be an integer greater than zero")
        if not is_int(seat_count):
            raise TypeError("seat_count must be an integer")

        logger.info("Reserved %s seats for account %s", seat_count, account_id)
