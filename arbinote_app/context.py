# file: arbinote_app/context.py
"""Active league resolution and the per-request league scope.

Internal documentation is in English; user-facing strings stay in French.

Notes:
    - :func:`resolve_active_league` is a pure function over a catalog snapshot
      and the stored cookie value. It performs no I/O and never raises.
    - :func:`get_league_scope` builds the scope once per request and keeps it
      on ``request.league_scope``. Nothing is cached across requests, so
      catalog edits made in the admin apply from the next request on.
    - Views receive the scope through :class:`LeagueScopeMixin`, which passes
      it into the template context explicitly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from django.conf import settings
from django.http import HttpRequest, HttpResponseBase

from .catalog import FederationEntry, LeagueEntry, fetch_federations_with_leagues
from .selection import read_selection

logger = logging.getLogger(__name__)

DEFAULT_FEDERATION_CODE = "TUN"
DEFAULT_LEAGUE_NAME = "Ligue Professionnelle 1"

REQUEST_ATTR = "league_scope"


# --- Resolution ------------------------------------------------------------


def resolve_active_league(
    federations: Iterable[FederationEntry],
    stored_selection: str | None,
    *,
    default_federation_code: str | None = DEFAULT_FEDERATION_CODE,
    default_league_name: str | None = DEFAULT_LEAGUE_NAME,
) -> str | None:
    """Return the league identifier that is active for this request.

    Resolution order:
        1. ``stored_selection`` if it still exists in the catalog.
        2. The league named ``default_league_name`` inside the federation whose
           code is ``default_federation_code``.
        3. The first league of the first federation.
        4. ``None`` when the first federation has no leagues or the catalog is
           empty.

    Args:
        federations: Ordered catalog snapshot.
        stored_selection: Identifier read from the cookie, if any.
        default_federation_code: Federation code of the preferred default.
        default_league_name: League name of the preferred default.

    Returns:
        str | None: An identifier present in ``federations``, or ``None``.
    """
    federations = tuple(federations)
    available = {league.id for federation in federations for league in federation.leagues}

    if stored_selection and stored_selection in available:
        return stored_selection

    if default_federation_code and default_league_name:
        for federation in federations:
            if federation.code != default_federation_code:
                continue
            for league in federation.leagues:
                if league.name == default_league_name:
                    return league.id

    if federations and federations[0].leagues:
        return federations[0].leagues[0].id

    return None


def _default_sentinels() -> tuple[str | None, str | None]:
    """Read the preferred default federation code and league name."""
    code = getattr(settings, "ARBINOTE_DEFAULT_FEDERATION_CODE", DEFAULT_FEDERATION_CODE)
    name = getattr(settings, "ARBINOTE_DEFAULT_LEAGUE_NAME", DEFAULT_LEAGUE_NAME)
    return code, name


# --- Scope -----------------------------------------------------------------


@dataclass(frozen=True)
class LeagueScope:
    """Catalog snapshot plus the active league for one request."""

    federations: tuple[FederationEntry, ...]
    active_league_id: str | None

    @property
    def league_ids(self) -> frozenset[str]:
        """Return every league identifier in the snapshot."""
        return frozenset(league.id for federation in self.federations for league in federation.leagues)

    @property
    def active_league(self) -> LeagueEntry | None:
        """Return the active league entry, ``None`` when nothing is active."""
        pair = self._active_pair()
        return pair[1] if pair else None

    @property
    def active_federation(self) -> FederationEntry | None:
        """Return the federation owning the active league."""
        pair = self._active_pair()
        return pair[0] if pair else None

    def _active_pair(self) -> tuple[FederationEntry, LeagueEntry] | None:
        if self.active_league_id is None:
            return None
        for federation in self.federations:
            for league in federation.leagues:
                if league.id == self.active_league_id:
                    return federation, league
        return None

    def as_context(self) -> dict[str, Any]:
        """Return the template context keys derived from this scope."""
        return {
            "league_scope": self,
            "federations": self.federations,
            "active_league_id": self.active_league_id,
            "active_league": self.active_league,
        }


def build_league_scope(request: HttpRequest) -> LeagueScope:
    """Fetch the catalog, read the cookie and resolve the active league.

    Raises:
        CatalogUnavailable: If the catalog cannot be loaded. The request
            cannot be served without it.
    """
    federations = fetch_federations_with_leagues()
    stored = read_selection(request)
    code, name = _default_sentinels()
    active = resolve_active_league(
        federations,
        stored,
        default_federation_code=code,
        default_league_name=name,
    )
    if stored and active != stored:
        logger.info("Stored league %s is no longer in the catalog; using %s", stored, active)
    return LeagueScope(federations=federations, active_league_id=active)


def get_league_scope(request: HttpRequest) -> LeagueScope:
    """Return the request's league scope, building it on first use.

    Subsequent calls within the same request return the same object, so the
    active league is resolved exactly once per request.
    """
    scope = getattr(request, REQUEST_ATTR, None)
    if scope is None:
        scope = build_league_scope(request)
        setattr(request, REQUEST_ATTR, scope)
    return scope


# --- View mixin ------------------------------------------------------------


class LeagueScopeMixin:
    """Resolve the league scope before dispatching a class-based view.

    The scope is available as ``self.league_scope`` in handlers and is merged
    into the template context by :meth:`get_context_data`.
    """

    league_scope: LeagueScope

    def dispatch(self, request: HttpRequest, *args: Any, **kwargs: Any) -> HttpResponseBase:
        """Resolve the league scope, then dispatch as usual."""
        self.league_scope = get_league_scope(request)
        return super().dispatch(request, *args, **kwargs)  # type: ignore[misc]

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        """Merge the league scope keys into the template context."""
        ctx = super().get_context_data(**kwargs)  # type: ignore[misc]
        ctx.update(self.league_scope.as_context())
        return ctx
