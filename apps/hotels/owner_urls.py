"""URL routing for hotel owners managing their listings."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import MyHotelViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r"", MyHotelViewSet, basename="my-hotel")

urlpatterns = [
    path("", include(router.urls)),
]
