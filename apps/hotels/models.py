"""Hotel domain models for HotelHub.

A hotel belongs to the account that listed it, carries its capacity,
price and facilities, and collects the bookings confirmed against it.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Facility(models.Model):
    """Amenity a hotel can offer."""

    name = models.CharField(max_length=100, unique=True)

    class Meta:
        verbose_name = _("Facility")
        verbose_name_plural = _("Facilities")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Hotel(models.Model):
    """Hotel listed for booking."""

    class HotelType(models.TextChoices):
        BUDGET = "Budget", _("Budget")
        BOUTIQUE = "Boutique", _("Boutique")
        LUXURY = "Luxury", _("Luxury")
        SKI_RESORT = "Ski Resort", _("Ski Resort")
        BUSINESS = "Business", _("Business")
        FAMILY = "Family", _("Family")
        ROMANTIC = "Romantic", _("Romantic")
        HIKING_RESORT = "Hiking Resort", _("Hiking Resort")
        CABIN = "Cabin", _("Cabin")
        BEACH_RESORT = "Beach Resort", _("Beach Resort")
        GOLF_RESORT = "Golf Resort", _("Golf Resort")
        MOTEL = "Motel", _("Motel")
        ALL_INCLUSIVE = "All Inclusive", _("All Inclusive")
        PET_FRIENDLY = "Pet Friendly", _("Pet Friendly")
        SELF_CATERING = "Self Catering", _("Self Catering")

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="hotels",
    )
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    country = models.CharField(max_length=100)
    description = models.TextField()
    type = models.CharField(max_length=50, choices=HotelType.choices)
    adult_count = models.PositiveSmallIntegerField(validators=[MinValueValidator(1)])
    child_count = models.PositiveSmallIntegerField(default=0)
    facilities = models.ManyToManyField(Facility, related_name="hotels", blank=True)
    price_per_night = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    star_rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)],
    )
    image_urls = models.JSONField(default=list, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_updated = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Hotel")
        verbose_name_plural = _("Hotels")
        ordering = ["-last_updated"]
        indexes = [
            models.Index(fields=["city"], name="hotels_hote_city_8d1f3a_idx"),
            models.Index(fields=["country"], name="hotels_hote_country_5b7e21_idx"),
            models.Index(fields=["price_per_night"], name="hotels_hote_price_p_3c9a40_idx"),
            models.Index(fields=["star_rating"], name="hotels_hote_star_ra_7a2d15_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.city}, {self.country})"

    def stay_cost(self, nights: int) -> Decimal:
        """Price of ``nights`` nights at the current nightly rate."""
        return self.price_per_night * nights
