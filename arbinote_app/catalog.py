# file: arbinote_app/catalog.py
"""Read-only federation → league catalog snapshot.

Exposes :func:`fetch_federations_with_leagues`, which loads every federation
together with its leagues and returns them as immutable dataclasses. The order
is meaningful: federations by name, and leagues by name within a federation
(ties broken by primary key). The resolver uses it to pick the fallback league.

The snapshot is fetched fresh for every request; nothing here is cached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import DatabaseError
from django.db.models import Prefetch

from .exceptions import CatalogUnavailable
from .models import Federation, League

logger = logging.getLogger(__name__)


# --- Snapshot nodes --------------------------------------------------------


@dataclass(frozen=True)
class LeagueEntry:
    """A league as seen by the scope resolver and the templates."""

    id: str
    name: str
    name_en: str | None = None
    name_ar: str | None = None


@dataclass(frozen=True)
class FederationEntry:
    """A federation with its ordered leagues."""

    id: str
    code: str
    name: str
    leagues: tuple[LeagueEntry, ...] = ()
    name_en: str | None = None
    name_ar: str | None = None


# --- Provider --------------------------------------------------------------


def _league_entry(league: League) -> LeagueEntry:
    return LeagueEntry(
        id=str(league.pk),
        name=league.name,
        name_en=league.name_en,
        name_ar=league.name_ar,
    )


def fetch_federations_with_leagues() -> tuple[FederationEntry, ...]:
    """Return the current catalog as an ordered tuple of federations.

    Two queries are issued (federations plus one prefetch for leagues).

    Returns:
        tuple[FederationEntry, ...]: Federations ordered by name, each with its
        leagues ordered by name. Empty when the catalog is empty.

    Raises:
        CatalogUnavailable: If the database cannot be read.
    """
    leagues_qs = League.objects.order_by("name", "id")
    try:
        federations = list(
            Federation.objects.order_by("name", "id").prefetch_related(
                Prefetch("leagues", queryset=leagues_qs)
            )
        )
    except DatabaseError as exc:
        logger.error("Catalog snapshot could not be loaded: %s", exc)
        raise CatalogUnavailable("Federation/league catalog is unavailable") from exc

    return tuple(
        FederationEntry(
            id=str(federation.pk),
            code=federation.code,
            name=federation.name,
            leagues=tuple(_league_entry(league) for league in federation.leagues.all()),
            name_en=federation.name_en,
            name_ar=federation.name_ar,
        )
        for federation in federations
    )
