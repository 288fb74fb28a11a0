"""Admin registrations for hotels domain."""

from __future__ import annotations

from django.contrib import admin

from .models import Facility, Hotel


@admin.register(Facility)
class FacilityAdmin(admin.ModelAdmin):
    list_display = ("name",)
    search_fields = ("name",)


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "city",
        "country",
        "type",
        "star_rating",
        "price_per_night",
        "owner",
        "last_updated",
    )
    list_filter = ("type", "star_rating", "country")
    search_fields = ("name", "city", "country", "owner__email")
    filter_horizontal = ("facilities",)
    readonly_fields = ("created_at", "last_updated")
