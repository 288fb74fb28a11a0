"""Admin registration for bookings."""

from __future__ import annotations

from django.contrib import admin

from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = (
        "payment_intent_id",
        "hotel",
        "user",
        "check_in",
        "check_out",
        "total_cost",
        "created_at",
    )
    list_filter = ("check_in", "check_out")
    search_fields = ("payment_intent_id", "hotel__name", "user__email", "email")
    readonly_fields = ("payment_intent_id", "total_cost", "created_at")
