"""URL routing for the public hotel catalogue."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import HotelSearchView, HotelViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r"", HotelViewSet, basename="hotel")

urlpatterns = [
    # Must precede the router so "search" is not taken for a hotel id
    path("search/", HotelSearchView.as_view(), name="hotel-search"),
    path("", include(router.urls)),
]
