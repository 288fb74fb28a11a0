"""Serializers for the booking domain."""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers  # type: ignore

from apps.hotels.serializers import HotelSerializer

from .models import Booking


class PaymentIntentRequestSerializer(serializers.Serializer):
    numberOfNights = serializers.IntegerField(min_value=1, max_value=365)


class PaymentIntentResponseSerializer(serializers.Serializer):
    paymentIntentId = serializers.CharField()
    clientSecret = serializers.CharField()
    totalCost = serializers.DecimalField(max_digits=12, decimal_places=2, coerce_to_string=False)


class BookingConfirmSerializer(serializers.Serializer):
    """Booking details sent after the client completed the card payment."""

    paymentIntentId = serializers.CharField(source="payment_intent_id", max_length=255)
    firstName = serializers.CharField(source="first_name", max_length=150)
    lastName = serializers.CharField(source="last_name", max_length=150)
    email = serializers.EmailField()
    adultCount = serializers.IntegerField(source="adult_count", min_value=1)
    childCount = serializers.IntegerField(source="child_count", min_value=0, default=0)
    checkIn = serializers.DateField(source="check_in")
    checkOut = serializers.DateField(source="check_out")
    totalCost = serializers.DecimalField(
        source="total_cost",
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
    )

    def validate(self, attrs):  # type: ignore
        if attrs["check_in"] >= attrs["check_out"]:
            raise serializers.ValidationError({"checkOut": "Check-out must be after check-in."})
        return attrs


class BookingSerializer(serializers.ModelSerializer):
    hotelId = serializers.ReadOnlyField(source="hotel_id")
    userId = serializers.ReadOnlyField(source="user_id")
    firstName = serializers.CharField(source="first_name")
    lastName = serializers.CharField(source="last_name")
    adultCount = serializers.IntegerField(source="adult_count")
    childCount = serializers.IntegerField(source="child_count")
    checkIn = serializers.DateField(source="check_in")
    checkOut = serializers.DateField(source="check_out")
    totalCost = serializers.DecimalField(
        source="total_cost", max_digits=12, decimal_places=2, coerce_to_string=False
    )
    paymentIntentId = serializers.CharField(source="payment_intent_id")
    createdAt = serializers.DateTimeField(source="created_at")

    class Meta:
        model = Booking
        fields = [
            "id",
            "hotelId",
            "userId",
            "firstName",
            "lastName",
            "email",
            "adultCount",
            "childCount",
            "checkIn",
            "checkOut",
            "totalCost",
            "paymentIntentId",
            "createdAt",
        ]
        read_only_fields = fields


class MyBookingSerializer(HotelSerializer):
    """Hotel with the current user's bookings attached."""

    bookings = BookingSerializer(source="user_bookings", many=True, read_only=True)

    class Meta(HotelSerializer.Meta):
        fields = HotelSerializer.Meta.fields + ["bookings"]
