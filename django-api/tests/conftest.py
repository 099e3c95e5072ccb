"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from fakes import RecordingPaymentGateway, RecordingSeatReservationGateway
from tickets.services import PurchaseService


@pytest.fixture
def gateway_calls() -> list[tuple]:
    """Every gateway call in the order it happened."""
    return []


@pytest.fixture
def payment_gateway(gateway_calls: list[tuple]) -> RecordingPaymentGateway:
    return RecordingPaymentGateway(gateway_calls)


@pytest.fixture
def seat_gateway(gateway_calls: list[tuple]) -> RecordingSeatReservationGateway:
    return RecordingSeatReservationGateway(gateway_calls)


@pytest.fixture
def service(
    payment_gateway: RecordingPaymentGateway,
    seat_gateway: RecordingSeatReservationGateway,
) -> PurchaseService:
    return PurchaseService(payment_gateway, seat_gateway)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()
