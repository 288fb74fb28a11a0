"""API tests for opening a PaymentIntent for a stay."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings import payments
from apps.hotels.tests.factories import make_hotel
from apps.users.models import User


class PaymentIntentAPITests(APITestCase):
    def setUp(self) -> None:
        self.owner = User.objects.create_user(email="owner@example.com", password="OwnerPass123")
        self.guest = User.objects.create_user(
            email="guest@example.com",
            password="GuestPass123",
            first_name="Asha",
            last_name="Rao",
        )
        self.hotel = make_hotel(self.owner, name="Lake View", price_per_night=Decimal("1500.00"))
        self.url = reverse("booking-payment-intent", args=[self.hotel.pk])
        self.intent = payments.PaymentIntent(
            id="pi_123",
            status="requires_payment_method",
            amount=450000,
            currency="inr",
            client_secret="pi_123_secret_abc",
            metadata={"hotelId": str(self.hotel.pk), "userId": str(self.guest.pk)},
        )

    def test_requires_authentication(self) -> None:
        response = self.client.post(self.url, {"numberOfNights": 3}, format="json")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    @patch("apps.bookings.services.payments.create_payment_intent")
    @patch("apps.bookings.services.payments.create_customer")
    def test_opens_intent_for_total_stay_cost(self, mock_customer, mock_intent) -> None:
        mock_customer.return_value = "cus_42"
        mock_intent.return_value = self.intent
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"numberOfNights": 3}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(
            response.data,
            {
                "paymentIntentId": "pi_123",
                "clientSecret": "pi_123_secret_abc",
                "totalCost": Decimal("4500.00"),
            },
        )
        mock_customer.assert_called_once_with(name="Asha Rao", email="guest@example.com")
        mock_intent.assert_called_once_with(
            amount=Decimal("4500.00"),
            customer_id="cus_42",
            description="Booking at Lake View for 3 nights",
            metadata={"hotelId": str(self.hotel.pk), "userId": str(self.guest.pk)},
        )

    @patch("apps.bookings.services.payments.create_payment_intent")
    @patch("apps.bookings.services.payments.create_customer")
    def test_unknown_hotel_is_bad_request(self, mock_customer, mock_intent) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("booking-payment-intent", args=[999999]), {"numberOfNights": 2}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Hotel not found"})
        mock_customer.assert_not_called()
        mock_intent.assert_not_called()

    @patch("apps.bookings.services.payments.create_customer")
    def test_malformed_hotel_id_is_bad_request(self, mock_customer) -> None:
        self.client.force_authenticate(self.guest)

        response = self.client.post(
            reverse("booking-payment-intent", args=["abc"]), {"numberOfNights": 2}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {"message": "Hotel not found"})
        mock_customer.assert_not_called()

    @patch("apps.bookings.services.payments.create_customer")
    def test_invalid_number_of_nights_is_rejected(self, mock_customer) -> None:
        self.client.force_authenticate(self.guest)

        for nights in (0, -1, "two", None):
            response = self.client.post(self.url, {"numberOfNights": nights}, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, nights)
            self.assertIn("numberOfNights", response.data)
        mock_customer.assert_not_called()

    @patch("apps.bookings.services.payments.create_payment_intent")
    @patch("apps.bookings.services.payments.create_customer")
    def test_gateway_failure_is_server_error(self, mock_customer, mock_intent) -> None:
        mock_customer.return_value = "cus_42"
        mock_intent.side_effect = payments.PaymentGatewayError("card network down")
        self.client.force_authenticate(self.guest)

        response = self.client.post(self.url, {"numberOfNights": 1}, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data, {"message": "Error creating payment intent"})
