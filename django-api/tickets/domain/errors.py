"""Domain error codes for the tickets module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_TICKET_REQUEST = "INVALID_TICKET_REQUEST"
    INVALID_ACCOUNT_ID = "INVALID_ACCOUNT_ID"
    INVALID_TICKET_REQUESTS = "INVALID_TICKET_REQUESTS"
    TICKET_LIMIT_EXCEEDED = "TICKET_LIMIT_EXCEEDED"
    ADULT_REQUIRED = "ADULT_REQUIRED"
    INFANTS_EXCEED_ADULTS = "INFANTS_EXCEED_ADULTS"
    INVALID_PAYLOAD = "INVALID_PAYLOAD"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidTicketRequestError(DomainError):
    """Raised when a ticket type request cannot be constructed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_REQUEST, message=message)


class PurchaseRejectedError(DomainError):
    """Raised when a purchase fails validation. Nothing has been charged."""

    @property
    def reason(self) -> str:
        """Human readable reason for the rejection, same as ``message``."""
        return self.message


class InvalidAccountIdError(PurchaseRejectedError):
    """Raised when the account ID is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ACCOUNT_ID,
            message="Account ID must be a positive integer",
        )


class InvalidTicketRequestsError(PurchaseRejectedError):
    """Raised when the request list is empty or holds anything but ticket type requests."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_TICKET_REQUESTS, message=message)


class TicketLimitExceededError(PurchaseRejectedError):
    """Raised when a purchase holds more tickets than allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_LIMIT_EXCEEDED,
            message=f"Cannot purchase more than {limit} tickets at once",
        )
        self.limit = limit


class AdultRequiredError(PurchaseRejectedError):
    """Raised when child or infant tickets are bought without an adult."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ADULT_REQUIRED,
            message="Child and Infant tickets cannot be purchased without Adult tickets",
        )


class InfantsExceedAdultsError(PurchaseRejectedError):
    """Raised when there are more infants than adult laps to sit on."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INFANTS_EXCEED_ADULTS,
            message="Number of infants cannot exceed number of adults",
        )
