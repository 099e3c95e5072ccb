"""Gateway interfaces for the external payment and seat booking services.

Gateways must be swappable. Their failures are not handled by the service.
"""

from abc import ABC, abstractmethod


class PaymentGateway(ABC):
    """Interface for charging an account."""

    @abstractmethod
    def charge(self, account_id: int, amount: int) -> None:
        """Charge ``amount`` to the account."""
        ...


class SeatReservationGateway(ABC):
    """Interface for reserving seats."""

    @abstractmethod
    def reserve(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for the account."""
        ...
