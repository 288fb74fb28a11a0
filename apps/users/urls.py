"""URL routing for account endpoints of the signed-in user."""

from __future__ import annotations

from django.urls import include, path  # type: ignore
from rest_framework.routers import DefaultRouter  # type: ignore

from .views import UserViewSet

router = DefaultRouter()
router.include_root_view = False
router.register(r"", UserViewSet, basename="user")

urlpatterns = [
    path("", include(router.urls)),
]
