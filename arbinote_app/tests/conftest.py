# file: arbinote_app/tests/conftest.py
"""Common pytest fixtures for arbinote_app tests.

Provides model accessors (resolved dynamically via ``apps.get_model``) and a
small two-federation catalog used across test modules.

Fixtures:
    - ``Federation``, ``League``, ``Season``: Model classes.
    - ``catalog``: TUN with "Ligue Professionnelle 1" and FRA with "Ligue 1".
    - ``make_request``: ``RequestFactory`` GET request builder with cookies.
"""

from __future__ import annotations

import types
from typing import Any, Callable

import pytest
from django.apps import apps
from django.http import HttpRequest
from django.test import RequestFactory

APP: str = "arbinote_app"


@pytest.fixture
def Federation() -> Any:
    """Return the Federation model class."""
    return apps.get_model(APP, "Federation")


@pytest.fixture
def League() -> Any:
    """Return the League model class."""
    return apps.get_model(APP, "League")


@pytest.fixture
def Season() -> Any:
    """Return the Season model class."""
    return apps.get_model(APP, "Season")


@pytest.fixture
def catalog(Federation: Any, League: Any) -> types.SimpleNamespace:
    """Create the reference catalog.

    Federations are ordered by name, so FRA ("Fédération Française…") comes
    before TUN ("Fédération Tunisienne…") in snapshots.
    """
    tun = Federation.objects.create(code="TUN", name="Fédération Tunisienne de Football")
    fra = Federation.objects.create(code="FRA", name="Fédération Française de Football")
    l1 = League.objects.create(federation=tun, name="Ligue Professionnelle 1")
    l2 = League.objects.create(federation=fra, name="Ligue 1")
    return types.SimpleNamespace(tun=tun, fra=fra, l1=l1, l2=l2, l1_id=str(l1.pk), l2_id=str(l2.pk))


@pytest.fixture
def make_request() -> Callable[..., HttpRequest]:
    """Return a builder for GET requests carrying the given cookies."""
    factory = RequestFactory()

    def _make(path: str = "/", cookies: dict[str, str] | None = None) -> HttpRequest:
        request = factory.get(path)
        request.COOKIES.update(cookies or {})
        return request

    return _make
