"""Serializers for purchase requests and responses.

Input serializers check format only. Business rules stay in the service.
"""

from rest_framework import serializers

from tickets.domain import PurchaseSummary, TicketType, TicketTypeRequest
from tickets.domain.value_objects import is_int


class StrictIntegerField(serializers.IntegerField):
    """Integer field that only accepts JSON integers.

    DRF coerces "1" and 1.0 to 1; those are rejected here instead.
    """

    def to_internal_value(self, data):
        if not is_int(data):
            self.fail("invalid")
        return super().to_internal_value(data)


class TicketLineSerializer(serializers.Serializer):
    """One line of a purchase: a ticket type and how many."""

    type = serializers.ChoiceField(choices=[ticket_type.value for ticket_type in TicketType])
    quantity = StrictIntegerField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of POST /api/purchases."""

    account_id = StrictIntegerField()
    tickets = TicketLineSerializer(many=True, allow_empty=True)

    def to_domain(self) -> list[TicketTypeRequest]:
        """Build domain requests from validated lines. Raises InvalidTicketRequestError."""
        return [
            TicketTypeRequest(
                ticket_type=TicketType(line["type"]),
                quantity=line["quantity"],
            )
            for line in self.validated_data["tickets"]
        ]


class PurchaseSummarySerializer(serializers.Serializer):
    """Serializer for the PurchaseSummary domain model."""

    total_amount = serializers.IntegerField()
    total_seats = serializers.IntegerField()
    ticket_breakdown = serializers.SerializerMethodField()

    def get_ticket_breakdown(self, summary: PurchaseSummary) -> dict[str, int]:
        return {ticket_type.value: count for ticket_type, count in summary.ticket_breakdown.items()}
