"""Stripe payment gateway.

Thin wrapper around the Stripe SDK used by the booking flow: create a
customer, create a PaymentIntent for a stay and look a PaymentIntent up
again when the client confirms the booking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

import stripe
from django.conf import settings

logger = logging.getLogger(__name__)

MINOR_UNITS = Decimal("100")


class PaymentGatewayError(Exception):
    """Raised when Stripe rejects a call or cannot be reached."""


@dataclass(frozen=True)
class PaymentIntent:
    id: str
    status: str
    amount: int
    currency: str
    client_secret: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def amount_major(self) -> Decimal:
        """Charged amount in major currency units (rupees, not paise)."""
        return (Decimal(self.amount) / MINOR_UNITS).quantize(Decimal("0.01"))


def to_minor_units(amount: Decimal) -> int:
    return int((amount * MINOR_UNITS).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _api_key() -> str:
    api_key = settings.STRIPE_API_KEY
    if not api_key:
        raise PaymentGatewayError("Stripe API key is not configured")
    return api_key


def _to_intent(obj) -> PaymentIntent:
    return PaymentIntent(
        id=obj["id"],
        status=obj["status"],
        amount=obj["amount"],
        currency=obj["currency"],
        client_secret=obj["client_secret"],
        metadata={key: str(value) for key, value in (obj["metadata"] or {}).items()},
    )


def create_customer(*, name: str, email: str, address: dict[str, str] | None = None) -> str:
    """Creates a Stripe customer and returns its id."""
    try:
        customer = stripe.Customer.create(
            api_key=_api_key(),
            name=name,
            email=email,
            address=address or settings.STRIPE_CUSTOMER_ADDRESS,
        )
    except stripe.StripeError as exc:
        logger.error(f"Stripe customer creation failed for {email}: {exc}")
        raise PaymentGatewayError(f"Customer creation failed: {exc}") from exc

    logger.info(f"Stripe customer {customer['id']} created")
    return customer["id"]


def create_payment_intent(
    *,
    amount: Decimal,
    customer_id: str,
    description: str,
    metadata: dict[str, str],
    currency: str | None = None,
) -> PaymentIntent:
    """
    Creates a PaymentIntent for ``amount`` in major units.

    Stripe expects the amount in the smallest currency unit, so 1500.00
    INR is sent as 150000.
    """
    currency = currency or settings.STRIPE_CURRENCY
    try:
        intent = stripe.PaymentIntent.create(
            api_key=_api_key(),
            amount=to_minor_units(amount),
            currency=currency,
            customer=customer_id,
            description=description,
            metadata=metadata,
        )
    except stripe.StripeError as exc:
        logger.error(f"Stripe PaymentIntent creation failed ({description}): {exc}")
        raise PaymentGatewayError(f"PaymentIntent creation failed: {exc}") from exc

    logger.info(f"Stripe PaymentIntent {intent['id']} created for {amount} {currency}")
    return _to_intent(intent)


def retrieve_payment_intent(payment_intent_id: str) -> PaymentIntent | None:
    """Looks up a PaymentIntent. Returns ``None`` if Stripe does not know it."""
    try:
        intent = stripe.PaymentIntent.retrieve(payment_intent_id, api_key=_api_key())
    except stripe.InvalidRequestError as exc:
        if getattr(exc, "code", None) == "resource_missing":
            logger.warning(f"Stripe PaymentIntent {payment_intent_id} not found")
            return None
        logger.error(f"Stripe PaymentIntent lookup failed for {payment_intent_id}: {exc}")
        raise PaymentGatewayError(f"PaymentIntent lookup failed: {exc}") from exc
    except stripe.StripeError as exc:
        logger.error(f"Stripe PaymentIntent lookup failed for {payment_intent_id}: {exc}")
        raise PaymentGatewayError(f"PaymentIntent lookup failed: {exc}") from exc

    return _to_intent(intent)
