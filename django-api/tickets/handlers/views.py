"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from tickets.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidTicketRequestError,
    PurchaseRejectedError,
)
from tickets.gateways import get_payment_gateway, get_seat_reservation_gateway
from tickets.handlers.serializers import PurchaseRequestSerializer, PurchaseSummarySerializer
from tickets.services import PurchaseService

logger = logging.getLogger(__name__)


def error_response(code: ErrorCode, message: str, status_code: int) -> Response:
    return Response({"error": {"code": code.value, "message": message}}, status=status_code)


def domain_error_response(error: DomainError, status_code: int) -> Response:
    return error_response(error.code, error.message, status_code)


class PurchaseView(APIView):
    """Handler for POST /api/purchases"""

    def get_service(self) -> PurchaseService:
        return PurchaseService(
            payment_gateway=get_payment_gateway(),
            seat_reservation_gateway=get_seat_reservation_gateway(),
        )

    def post(self, request: Request) -> Response:
        serializer = PurchaseRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response(
                ErrorCode.INVALID_PAYLOAD,
                "Invalid request payload",
                status.HTTP_400_BAD_REQUEST,
            )

        try:
            ticket_requests = serializer.to_domain()
        except InvalidTicketRequestError as exc:
            return domain_error_response(exc, status.HTTP_400_BAD_REQUEST)

        account_id = serializer.validated_data["account_id"]
        try:
            summary = self.get_service().purchase(account_id, ticket_requests)
        except PurchaseRejectedError as exc:
            logger.warning("Purchase rejected for account %s: %s", account_id, exc.code.value)
            return domain_error_response(exc, status.HTTP_422_UNPROCESSABLE_ENTITY)

        return Response(PurchaseSummarySerializer(summary).data, status=status.HTTP_200_OK)
