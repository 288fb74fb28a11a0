"""API tests for authentication endpoints."""

from __future__ import annotations

from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.models import User


class AuthAPITests(APITestCase):
    def setUp(self) -> None:
        self.payload = {
            "email": "guest@example.com",
            "firstName": "Guest",
            "lastName": "User",
            "password": "StrongPass123",
            "confirmPassword": "StrongPass123",
        }

    def test_register_returns_tokens(self) -> None:
        response = self.client.post(reverse("auth:register"), self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertIn("access", response.data["tokens"])
        self.assertIn("refresh", response.data["tokens"])
        self.assertEqual(response.data["user"]["email"], self.payload["email"])
        self.assertEqual(response.data["user"]["firstName"], "Guest")
        self.assertNotIn("password", response.data["user"])

        user = User.objects.get(email=self.payload["email"])
        self.assertTrue(user.check_password("StrongPass123"))

    def test_register_rejects_mismatched_passwords(self) -> None:
        response = self.client.post(
            reverse("auth:register"),
            {**self.payload, "confirmPassword": "OtherPass123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("confirmPassword", response.data)
        self.assertFalse(User.objects.exists())

    def test_register_rejects_duplicate_email(self) -> None:
        User.objects.create_user(email="guest@example.com", password="Existing123")

        response = self.client.post(
            reverse("auth:register"),
            {**self.payload, "email": "GUEST@example.com"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("email", response.data)

    def test_login_returns_tokens(self) -> None:
        User.objects.create_user(email="guest@example.com", password="StrongPass123")

        response = self.client.post(
            reverse("auth:login"),
            {"email": "guest@example.com", "password": "StrongPass123"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIn("access", response.data["tokens"])

    def test_login_with_wrong_password(self) -> None:
        User.objects.create_user(email="guest@example.com", password="StrongPass123")

        response = self.client.post(
            reverse("auth:login"),
            {"email": "guest@example.com", "password": "wrong"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("message", response.data)

    def test_access_token_authenticates_requests(self) -> None:
        register = self.client.post(reverse("auth:register"), self.payload, format="json")
        access = register.data["tokens"]["access"]

        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        response = self.client.get(reverse("user-me"))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["email"], self.payload["email"])

    def test_refresh_issues_new_access_token(self) -> None:
        register = self.client.post(reverse("auth:register"), self.payload, format="json")

        response = self.client.post(
            reverse("auth:token_refresh"),
            {"refresh": register.data["tokens"]["refresh"]},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertIn("access", response.data)

    def test_me_requires_authentication(self) -> None:
        response = self.client.get(reverse("user-me"))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_users_prefix_has_no_browsable_root(self) -> None:
        response = self.client.get("/api/v1/users/")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
