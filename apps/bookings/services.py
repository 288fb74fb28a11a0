"""Domain services for the payment and booking workflow."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any

from django.db import IntegrityError, transaction  # type: ignore

from apps.hotels.models import Hotel

from . import payments
from .models import Booking

logger = logging.getLogger(__name__)

SUCCEEDED = "succeeded"

# Largest primary key a BigAutoField can hold
MAX_HOTEL_ID = 2**63 - 1


class BookingError(Exception):
    """Booking request rejected; the message is safe to show the client."""

    status_code = 400


class HotelNotFound(BookingError):
    def __init__(self, message: str = "Hotel not found", status_code: int = 404) -> None:
        super().__init__(message)
        self.status_code = status_code


class PaymentVerificationError(BookingError):
    """The PaymentIntent does not prove payment for this hotel and user."""


class DuplicateBookingError(BookingError):
    pass


def _hotel_pk(hotel_id) -> int | None:
    """Turns a hotel id from the URL into a primary key, or ``None`` if it cannot be one."""
    try:
        pk = int(hotel_id)
    except (TypeError, ValueError):
        return None
    return pk if 0 < pk <= MAX_HOTEL_ID else None


def start_payment(hotel_id: int | str, user, number_of_nights: int) -> dict[str, Any]:
    """Prices the stay and opens a Stripe PaymentIntent for it.

    Returns the payload the client needs to collect the card payment.
    """
    pk = _hotel_pk(hotel_id)
    hotel = Hotel.objects.filter(pk=pk).first() if pk is not None else None
    if hotel is None:
        raise HotelNotFound(status_code=400)

    total_cost = hotel.stay_cost(number_of_nights)

    customer_id = payments.create_customer(name=user.display_name, email=user.email)
    intent = payments.create_payment_intent(
        amount=total_cost,
        customer_id=customer_id,
        description=f"Booking at {hotel.name} for {number_of_nights} nights",
        metadata={"hotelId": str(hotel.id), "userId": str(user.id)},
    )
    logger.info(
        f"PaymentIntent {intent.id} opened for hotel {hotel.id} by user {user.id}: "
        f"{number_of_nights} nights, {total_cost}"
    )
    return {
        "paymentIntentId": intent.id,
        "clientSecret": intent.client_secret,
        "totalCost": total_cost,
    }


def verify_payment(payment_intent_id: str, hotel_id: int, user) -> payments.PaymentIntent:
    """Checks that the PaymentIntent paid for this hotel on behalf of this user."""
    intent = payments.retrieve_payment_intent(payment_intent_id)
    if intent is None:
        raise PaymentVerificationError("Payment intent not found")

    if intent.metadata.get("hotelId") != str(hotel_id) or intent.metadata.get("userId") != str(user.id):
        logger.warning(
            f"PaymentIntent {payment_intent_id} metadata {intent.metadata} does not match "
            f"hotel {hotel_id} / user {user.id}"
        )
        raise PaymentVerificationError("Payment intent metadata mismatch")

    if intent.status != SUCCEEDED:
        logger.warning(f"PaymentIntent {payment_intent_id} has status {intent.status}")
        raise PaymentVerificationError(f"Payment not succeeded. Status: {intent.status}")

    return intent


def confirm_booking(hotel_id: int | str, user, booking_data: dict[str, Any]) -> Booking:
    """Records a booking once Stripe reports the payment as succeeded.

    ``booking_data`` is the validated request body. The stored total cost
    is the amount Stripe actually charged.
    """
    pk = _hotel_pk(hotel_id)
    if pk is None:
        raise HotelNotFound()

    payment_intent_id = booking_data["payment_intent_id"]
    intent = verify_payment(payment_intent_id, pk, user)

    if Booking.objects.filter(payment_intent_id=payment_intent_id).exists():
        raise DuplicateBookingError("Booking already recorded for this payment")

    hotel = Hotel.objects.filter(pk=pk).first()
    if hotel is None:
        raise HotelNotFound()

    try:
        with transaction.atomic():
            booking = Booking.objects.create(
                hotel=hotel,
                user=user,
                first_name=booking_data["first_name"],
                last_name=booking_data["last_name"],
                email=booking_data["email"],
                adult_count=booking_data["adult_count"],
                child_count=booking_data.get("child_count", 0),
                check_in=booking_data["check_in"],
                check_out=booking_data["check_out"],
                total_cost=intent.amount_major,
                payment_intent_id=payment_intent_id,
            )
    except IntegrityError as exc:
        raise DuplicateBookingError("Booking already recorded for this payment") from exc

    claimed = booking_data.get("total_cost")
    if claimed is not None and Decimal(claimed) != booking.total_cost:
        logger.warning(
            f"Booking {booking.id}: client total {claimed} differs from charged {booking.total_cost}"
        )
    logger.info(f"Booking {booking.id} confirmed for hotel {pk} by user {user.id}")
    return booking
