# file: arbinote_app/site/views/home.py
"""Public site homepage view.

Exposes :class:`HomeView`, which renders ``site/home.html`` with the active
league, its federation and the league's most recent season. The league scope is
resolved by :class:`~arbinote_app.context.LeagueScopeMixin`.
"""

from __future__ import annotations

from typing import Any

from django.db.models import F
from django.views.generic import TemplateView

from arbinote_app.context import LeagueScopeMixin
from arbinote_app.models import Season


class HomeView(LeagueScopeMixin, TemplateView):
    """Render the homepage for the active league."""

    template_name = "site/home.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:  # type: ignore[override]
        """Return template context for the homepage.

        Returns:
            Context including ``title``, ``active_federation`` and
            ``latest_season`` (``None`` without an active league or seasons).
        """
        ctx = super().get_context_data(**kwargs)
        scope = self.league_scope

        latest_season = None
        if scope.active_league_id:
            latest_season = (
                Season.objects.filter(league_id=scope.active_league_id)
                .order_by(F("date_start").desc(nulls_last=True), "-created_at")
                .first()
            )

        ctx.update({
            "title": "Accueil",
            "active_federation": scope.active_federation,
            "latest_season": latest_season,
        })
        return ctx
