"""API views for the booking domain."""

from __future__ import annotations

from django.db.models import Prefetch  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import generics, permissions, status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.hotels.models import Hotel

from . import services
from .models import Booking
from .serializers import (
    BookingConfirmSerializer,
    BookingSerializer,
    MyBookingSerializer,
    PaymentIntentRequestSerializer,
    PaymentIntentResponseSerializer,
)


class PaymentIntentView(APIView):
    """Opens a Stripe PaymentIntent for a stay at the hotel."""

    permission_classes = [permissions.IsAuthenticated]
    error_message = "Error creating payment intent"

    @extend_schema(request=PaymentIntentRequestSerializer, responses=PaymentIntentResponseSerializer)
    def post(self, request, hotel_id: str):  # type: ignore
        serializer = PaymentIntentRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            payload = services.start_payment(
                hotel_id, request.user, serializer.validated_data["numberOfNights"]
            )
        except services.BookingError as exc:
            return Response({"message": str(exc)}, status=exc.status_code)
        return Response(PaymentIntentResponseSerializer(payload).data)


class BookingConfirmView(APIView):
    """Records the booking once the PaymentIntent has succeeded."""

    permission_classes = [permissions.IsAuthenticated]
    error_message = "Something went wrong"

    @extend_schema(request=BookingConfirmSerializer, responses=BookingSerializer)
    def post(self, request, hotel_id: str):  # type: ignore
        serializer = BookingConfirmSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            booking = services.confirm_booking(hotel_id, request.user, serializer.validated_data)
        except services.BookingError as exc:
            return Response({"message": str(exc)}, status=exc.status_code)
        return Response(
            {"message": "Booking successful", "booking": BookingSerializer(booking).data},
            status=status.HTTP_200_OK,
        )


class MyBookingsView(generics.ListAPIView):
    """Hotels the current user has booked, each with only their bookings."""

    serializer_class = MyBookingSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends: list = []
    pagination_class = None
    error_message = "Unable to fetch bookings"

    def get_queryset(self):  # type: ignore
        user = self.request.user
        return (
            Hotel.objects.filter(bookings__user=user)
            .distinct()
            .prefetch_related(
                "facilities",
                Prefetch(
                    "bookings",
                    queryset=Booking.objects.filter(user=user).order_by("check_in"),
                    to_attr="user_bookings",
                ),
            )
            .order_by("-last_updated")
        )
