"""Serializers for the hotels domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from .models import Facility, Hotel


class FacilitySerializer(serializers.ModelSerializer):
    class Meta:
        model = Facility
        fields = ["id", "name"]


class HotelSerializer(serializers.ModelSerializer):
    """Public representation of a hotel. Bookings are never exposed here."""

    userId = serializers.ReadOnlyField(source="owner_id")
    adultCount = serializers.IntegerField(source="adult_count", min_value=1)
    childCount = serializers.IntegerField(source="child_count", min_value=0, default=0)
    facilities = serializers.SlugRelatedField(
        slug_field="name",
        queryset=Facility.objects.all(),
        many=True,
        required=False,
    )
    pricePerNight = serializers.DecimalField(
        source="price_per_night",
        max_digits=10,
        decimal_places=2,
        min_value=Decimal("0.00"),
        coerce_to_string=False,
    )
    starRating = serializers.IntegerField(source="star_rating", min_value=1, max_value=5)
    imageUrls = serializers.ListField(
        source="image_urls",
        child=serializers.URLField(),
        required=False,
    )
    lastUpdated = serializers.DateTimeField(source="last_updated", read_only=True)

    class Meta:
        model = Hotel
        fields = [
            "id",
            "userId",
            "name",
            "city",
            "country",
            "description",
            "type",
            "adultCount",
            "childCount",
            "facilities",
            "pricePerNight",
            "starRating",
            "imageUrls",
            "lastUpdated",
        ]
        read_only_fields = ["id", "userId", "lastUpdated"]
