"""URL routing for the current user's bookings."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import MyBookingsView

urlpatterns = [
    path("", MyBookingsView.as_view(), name="my-bookings"),
]
