# file: arbinote_app/site/views/seasons.py
"""Seasons of the active league.

:class:`SeasonsView` renders ``site/seasons.html`` for visitors;
:class:`AdminSeasonsView` returns the same list as JSON for staff tools. Both
read the active league from the request's league scope and never resolve it
on their own.
"""

from __future__ import annotations

import logging
from typing import Any

from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.db.models import QuerySet
from django.http import HttpRequest, HttpResponseBase, JsonResponse
from django.views import View
from django.views.generic import TemplateView

from arbinote_app.context import LeagueScopeMixin
from arbinote_app.exceptions import CatalogUnavailable
from arbinote_app.models import Season

logger = logging.getLogger(__name__)


def seasons_for_league(league_id: str | None) -> QuerySet[Season]:
    """Return seasons ordered by start date, limited to ``league_id`` if set."""
    qs = Season.objects.select_related("league")
    if league_id:
        qs = qs.filter(league_id=league_id)
    return qs.order_by("date_start", "name")


class SeasonsView(LeagueScopeMixin, TemplateView):
    """List seasons of the active league (all seasons when none is active)."""

    template_name = "site/seasons.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        """Add the page title and the scoped season list."""
        ctx = super().get_context_data(**kwargs)
        ctx.update({
            "title": "Saisons",
            "seasons": seasons_for_league(self.league_scope.active_league_id),
        })
        return ctx


class AdminSeasonsView(LoginRequiredMixin, UserPassesTestMixin, LeagueScopeMixin, View):
    """Staff-only JSON list of the active league's seasons.

    Responds ``400`` when the catalog has no league to scope by and ``500``
    with a JSON error body when the catalog cannot be loaded.
    """

    http_method_names = ["get"]
    raise_exception = True

    def dispatch(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponseBase:
        """Run the access checks and the handler, reporting catalog failures as JSON."""
        try:
            return super().dispatch(request, *args, **kwargs)
        except CatalogUnavailable:
            logger.exception("Failed to load the catalog for the staff season list")
            return JsonResponse({"error": "Erreur serveur"}, status=500)

    def test_func(self) -> bool:
        """Allow staff members only."""
        return bool(self.request.user.is_staff)

    def get(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        """Return the active league's seasons as a JSON list."""
        league_id = self.league_scope.active_league_id
        if not league_id:
            return JsonResponse({"error": "Aucune ligue active"}, status=400)

        rows = [
            {
                "id": str(season.pk),
                "name": season.name,
                "league_id": league_id,
                "date_start": season.date_start.isoformat() if season.date_start else None,
                "date_end": season.date_end.isoformat() if season.date_end else None,
            }
            for season in seasons_for_league(league_id)
        ]
        return JsonResponse(rows, safe=False)
