from django.conf import settings
from django.utils.module_loading import import_string

from tickets.gateways.interfaces import PaymentGateway, SeatReservationGateway
from tickets.gateways.logging_gateways import (
    LoggingPaymentGateway,
    LoggingSeatReservationGateway,
)

__all__ = [
    "PaymentGateway",
    "SeatReservationGateway",
    "LoggingPaymentGateway",
    "LoggingSeatReservationGateway",
    "get_payment_gateway",
    "get_seat_reservation_gateway",
]


def get_payment_gateway() -> PaymentGateway:
    """Instantiate the payment gateway named in ``settings.TICKETS``."""
    return import_string(settings.TICKETS["PAYMENT_GATEWAY"])()


def get_seat_reservation_gateway() -> SeatReservationGateway:
    """Instantiate the seat reservation gateway named in ``settings.TICKETS``."""
    return import_string(settings.TICKETS["SEAT_RESERVATION_GATEWAY"])()
