"""FilterSet definitions for hotel search."""

from __future__ import annotations

import django_filters  # type: ignore
from django.db.models import Count, Q  # type: ignore
from django_filters.widgets import QueryArrayWidget  # type: ignore

from .models import Hotel


SORT_OPTIONS = {
    "starRating": ("-star_rating",),
    "pricePerNightAsc": ("price_per_night",),
    "pricePerNightDesc": ("-price_per_night",),
}


class ListValueWidget(QueryArrayWidget):
    """Reads ``?key=a&key=b``, ``?key[]=a&key[]=b`` and ``?key=a,b`` alike."""

    def value_from_datadict(self, data, files, name):  # type: ignore
        values = super().value_from_datadict(data, files, name)
        return [part.strip() for value in values for part in value.split(",") if part.strip()]


class CharListFilter(django_filters.BaseInFilter, django_filters.CharFilter):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", ListValueWidget)
        super().__init__(*args, **kwargs)


class NumberListFilter(django_filters.BaseInFilter, django_filters.NumberFilter):
    def __init__(self, *args, **kwargs):
        kwargs.setdefault("widget", ListValueWidget)
        super().__init__(*args, **kwargs)


class HotelFilterSet(django_filters.FilterSet):
    """Search filters. Every supplied parameter narrows the result."""

    destination = django_filters.CharFilter(method="filter_destination")
    adultCount = django_filters.NumberFilter(field_name="adult_count", lookup_expr="gte")
    childCount = django_filters.NumberFilter(field_name="child_count", lookup_expr="gte")
    # hotel must offer every listed facility
    facilities = CharListFilter(method="filter_facilities")
    types = CharListFilter(field_name="type", lookup_expr="in")
    stars = NumberListFilter(method="filter_stars")
    maxPrice = django_filters.NumberFilter(field_name="price_per_night", lookup_expr="lte")
    sortOption = django_filters.CharFilter(method="sort_results")

    class Meta:
        model = Hotel
        fields: list[str] = []

    def filter_destination(self, queryset, name, value):  # type: ignore
        value = value.strip()
        if not value:
            return queryset
        return queryset.filter(Q(city__icontains=value) | Q(country__icontains=value))

    def filter_facilities(self, queryset, name, value):  # type: ignore
        names = {facility.strip() for facility in value if facility.strip()}
        if not names:
            return queryset
        return (
            queryset.annotate(
                matched_facilities=Count(
                    "facilities", filter=Q(facilities__name__in=names), distinct=True
                )
            )
            .filter(matched_facilities=len(names))
        )

    def filter_stars(self, queryset, name, value):  # type: ignore
        ratings = {int(star) for star in value}
        return queryset.filter(star_rating__in=ratings)

    def sort_results(self, queryset, name, value):  # type: ignore
        ordering = SORT_OPTIONS.get(value)
        if ordering is None:
            return queryset
        return queryset.order_by(*ordering, "-last_updated")
