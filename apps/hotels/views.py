"""Hotel API views."""

from __future__ import annotations

import logging

from django.http import Http404  # type: ignore
from django_filters.rest_framework import DjangoFilterBackend  # type: ignore
from rest_framework import generics, permissions, status, viewsets  # type: ignore
from rest_framework.response import Response  # type: ignore

from .filters import HotelFilterSet
from .models import Hotel
from .pagination import HotelSearchPagination
from .serializers import HotelSerializer

logger = logging.getLogger(__name__)


class HotelSearchView(generics.ListAPIView):
    """Search endpoint with filters, sorting and fixed-size pages."""

    serializer_class = HotelSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends = [DjangoFilterBackend]
    filterset_class = HotelFilterSet
    pagination_class = HotelSearchPagination
    error_message = "Something went wrong while searching hotels"

    def get_queryset(self):  # type: ignore
        return Hotel.objects.prefetch_related("facilities")


class HotelViewSet(viewsets.ReadOnlyModelViewSet):
    """Public catalogue: every hotel, newest changes first, or a single one."""

    serializer_class = HotelSerializer
    permission_classes = [permissions.AllowAny]
    filter_backends: list = []
    pagination_class = None

    def get_queryset(self):  # type: ignore
        return Hotel.objects.prefetch_related("facilities").order_by("-last_updated")

    @property
    def error_message(self) -> str:  # type: ignore
        if getattr(self, "action", None) == "retrieve":
            return "Error fetching hotel"
        return "Error fetching hotels"

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        try:
            hotel = self.get_object()
        except Http404:
            return Response({"message": "Hotel not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(hotel).data)


class MyHotelViewSet(viewsets.ModelViewSet):
    """Listing management for the hotels owned by the current user."""

    serializer_class = HotelSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends: list = []
    pagination_class = None
    http_method_names = ["get", "post", "put", "patch", "head", "options"]

    def get_queryset(self):  # type: ignore
        return (
            Hotel.objects.filter(owner=self.request.user)
            .prefetch_related("facilities")
            .order_by("-last_updated")
        )

    def retrieve(self, request, *args, **kwargs):  # type: ignore
        try:
            hotel = self.get_object()
        except Http404:
            return Response({"message": "Hotel not found"}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(hotel).data)

    def perform_create(self, serializer):  # type: ignore
        hotel = serializer.save(owner=self.request.user)
        logger.info(f"Hotel {hotel.id} created by user {self.request.user.id}")

    def perform_update(self, serializer):  # type: ignore
        hotel = serializer.save()
        logger.info(f"Hotel {hotel.id} updated by user {self.request.user.id}")
