# file: arbinote_app/admin.py
"""Django admin configuration for federations, leagues and seasons.

Internal documentation (docstrings, comments) is in **English**. All
user-facing labels remain **French**.

Federations are edited together with their leagues through ``nested_admin``.
The season change list can be narrowed to the visitor's active league, using
the same league scope as the public site.
"""

from __future__ import annotations

from typing import Any

import nested_admin
from django.contrib import admin
from django.db.models import Count, QuerySet

from .context import get_league_scope
from .models import Federation, League, Season


# ------------------------------------------------------------
# Federation with inline leagues
# ------------------------------------------------------------
class LeagueInline(nested_admin.NestedTabularInline):
    """Leagues edited inside their federation."""

    model = League
    extra = 0
    fields = ("name", "name_en", "name_ar")
    ordering = ("name",)


@admin.register(Federation)
class FederationAdmin(nested_admin.NestedModelAdmin):
    """Admin for federations with their leagues inline."""

    list_display = ("code", "name", "league_count")
    search_fields = ("code", "name", "name_en")
    inlines = [LeagueInline]

    def get_queryset(self, request: Any) -> QuerySet[Federation]:  # type: ignore[override]
        """Annotate each federation with its number of leagues."""
        return super().get_queryset(request).annotate(_league_count=Count("leagues"))

    @admin.display(description="Ligues", ordering="_league_count")
    def league_count(self, obj: Any) -> int:
        """Return the annotated league count."""
        return getattr(obj, "_league_count", 0)


@admin.register(League)
class LeagueAdmin(admin.ModelAdmin):
    """Admin for leagues."""

    list_display = ("name", "federation", "created_at")
    list_filter = ("federation",)
    search_fields = ("name", "name_en", "federation__code", "federation__name")
    list_select_related = ("federation",)


# ------------------------------------------------------------
# Seasons scoped by the active league
# ------------------------------------------------------------
class ActiveLeagueFilter(admin.SimpleListFilter):
    """Limit seasons to the active league of the current admin request."""

    title = "Ligue active"
    parameter_name = "active_league"

    def lookups(self, request: Any, model_admin: Any) -> list[tuple[str, str]]:
        """Offer a single choice restricting the list to the active league."""
        return [("1", "Ligue active uniquement")]

    def queryset(self, request: Any, queryset: QuerySet[Season]) -> QuerySet[Season]:
        """Filter seasons by the request's active league when the choice is set.

        Returns an empty queryset when the catalog has no active league.
        """
        if self.value() != "1":
            return queryset
        league_id = get_league_scope(request).active_league_id
        if league_id is None:
            return queryset.none()
        return queryset.filter(league_id=league_id)


@admin.register(Season)
class SeasonAdmin(admin.ModelAdmin):
    """Admin for seasons."""

    list_display = ("name", "league", "date_start", "date_end")
    list_filter = (ActiveLeagueFilter, "league")
    search_fields = ("name", "league__name")
    list_select_related = ("league",)
