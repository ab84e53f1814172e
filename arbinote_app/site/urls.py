# file: arbinote_app/site/urls.py
"""Public *Site* URL configuration.

Public paths stay in **French** as required by the product.

Routes
------
- ``""`` → Home (Accueil)
- ``"saisons/"`` → Seasons of the active league
- ``"api/preferences/league/"`` → Change the active league (``POST``)
- ``"api/admin/saisons/"`` → Staff JSON list of the active league's seasons
"""

from __future__ import annotations

from django.urls import path
from django.urls.resolvers import URLPattern

from .views.home import HomeView
from .views.preferences import LeaguePreferenceView
from .views.seasons import AdminSeasonsView, SeasonsView


app_name = "site"

urlpatterns: list[URLPattern] = [
    # Accueil
    path("", HomeView.as_view(), name="home"),

    # Saisons
    path("saisons/", SeasonsView.as_view(), name="seasons"),

    # Ligue active
    path("api/preferences/league/", LeaguePreferenceView.as_view(), name="league_preference"),

    # Administration (JSON)
    path("api/admin/saisons/", AdminSeasonsView.as_view(), name="admin_seasons"),
]
