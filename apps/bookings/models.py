"""Booking domain models for HotelHub."""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Booking(models.Model):
    """Paid stay recorded against a hotel."""

    hotel = models.ForeignKey(
        "hotels.Hotel",
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="bookings",
    )
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField()
    adult_count = models.PositiveSmallIntegerField(default=1)
    child_count = models.PositiveSmallIntegerField(default=0)
    check_in = models.DateField()
    check_out = models.DateField()
    total_cost = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal("0.00"))
    payment_intent_id = models.CharField(
        max_length=255,
        unique=True,
        help_text=_("Stripe PaymentIntent that paid for this booking."),
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Booking")
        verbose_name_plural = _("Bookings")
        ordering = ["-created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(check_out__gt=models.F("check_in")),
                name="booking_valid_dates",
            ),
        ]
        indexes = [
            models.Index(fields=["hotel", "check_in", "check_out"], name="bookings_bo_hotel_i_4e8c2b_idx"),
            models.Index(fields=["user"], name="bookings_bo_user_id_9b1f70_idx"),
        ]

    def __str__(self) -> str:
        return f"Booking {self.payment_intent_id} at hotel {self.hotel_id}"

    @property
    def nights(self) -> int:
        return (self.check_out - self.check_in).days
