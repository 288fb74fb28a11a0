from __future__ import annotations

from decimal import Decimal

import pytest
import stripe

from apps.bookings import payments


@pytest.fixture
def stripe_key(settings):
    settings.STRIPE_API_KEY = "sk_test_hotelhub"
    settings.STRIPE_CURRENCY = "inr"
    return settings.STRIPE_API_KEY


def _intent_payload(**overrides):
    payload = {
        "id": "pi_123",
        "status": "requires_payment_method",
        "amount": 150050,
        "currency": "inr",
        "client_secret": "pi_123_secret_abc",
        "metadata": {"hotelId": "7", "userId": "3"},
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("1500"), 150000),
        (Decimal("1500.5"), 150050),
        (Decimal("0.005"), 1),
    ],
)
def test_to_minor_units(amount, expected):
    assert payments.to_minor_units(amount) == expected


def test_amount_major_converts_back_from_minor_units():
    intent = payments.PaymentIntent(id="pi_1", status="succeeded", amount=150050, currency="inr")
    assert intent.amount_major == Decimal("1500.50")


def test_create_payment_intent_sends_minor_units(stripe_key, monkeypatch):
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return _intent_payload()

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    intent = payments.create_payment_intent(
        amount=Decimal("1500.50"),
        customer_id="cus_1",
        description="Booking at Lake View for 1 nights",
        metadata={"hotelId": "7", "userId": "3"},
    )

    assert calls == [
        {
            "api_key": stripe_key,
            "amount": 150050,
            "currency": "inr",
            "customer": "cus_1",
            "description": "Booking at Lake View for 1 nights",
            "metadata": {"hotelId": "7", "userId": "3"},
        }
    ]
    assert intent.id == "pi_123"
    assert intent.client_secret == "pi_123_secret_abc"
    assert intent.metadata == {"hotelId": "7", "userId": "3"}


def test_create_customer_uses_configured_address(stripe_key, settings, monkeypatch):
    calls = []

    def fake_create(**kwargs):
        calls.append(kwargs)
        return {"id": "cus_1"}

    monkeypatch.setattr(stripe.Customer, "create", fake_create)

    customer_id = payments.create_customer(name="Asha Rao", email="asha@example.com")

    assert customer_id == "cus_1"
    assert calls[0]["address"] == settings.STRIPE_CUSTOMER_ADDRESS
    assert calls[0]["name"] == "Asha Rao"


def test_stripe_errors_become_gateway_errors(stripe_key, monkeypatch):
    def fake_create(**kwargs):
        raise stripe.APIConnectionError("network unreachable")

    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    with pytest.raises(payments.PaymentGatewayError):
        payments.create_payment_intent(
            amount=Decimal("100"), customer_id="cus_1", description="x", metadata={}
        )


def test_retrieve_returns_none_for_missing_intent(stripe_key, monkeypatch):
    def fake_retrieve(payment_intent_id, **kwargs):
        raise stripe.InvalidRequestError(
            "No such payment_intent", "intent", code="resource_missing"
        )

    monkeypatch.setattr(stripe.PaymentIntent, "retrieve", fake_retrieve)

    assert payments.retrieve_payment_intent("pi_missing") is None


def test_retrieve_wraps_other_invalid_requests(stripe_key, monkeypatch):
    def fake_retrieve(payment_intent_id, **kwargs):
        raise stripe.InvalidRequestError("Invalid id", "intent", code="parameter_invalid_string")

    monkeypatch.setattr(stripe.PaymentIntent, "retrieve", fake_retrieve)

    with pytest.raises(payments.PaymentGatewayError):
        payments.retrieve_payment_intent("bad id")


def test_retrieve_maps_intent(stripe_key, monkeypatch):
    monkeypatch.setattr(
        stripe.PaymentIntent,
        "retrieve",
        lambda payment_intent_id, **kwargs: _intent_payload(id=payment_intent_id, status="succeeded"),
    )

    intent = payments.retrieve_payment_intent("pi_999")

    assert intent is not None
    assert intent.id == "pi_999"
    assert intent.status == "succeeded"
    assert intent.amount_major == Decimal("1500.50")


def test_missing_api_key_is_a_gateway_error(settings):
    settings.STRIPE_API_KEY = ""

    with pytest.raises(payments.PaymentGatewayError, match="not configured"):
        payments.retrieve_payment_intent("pi_1")
