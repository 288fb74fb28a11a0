"""URL routing for the booking flow under a hotel."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingConfirmView, PaymentIntentView

urlpatterns = [
    path(
        "<str:hotel_id>/bookings/payment-intent/",
        PaymentIntentView.as_view(),
        name="booking-payment-intent",
    ),
    path(
        "<str:hotel_id>/bookings/",
        BookingConfirmView.as_view(),
        name="booking-confirm",
    ),
]
