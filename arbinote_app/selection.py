# file: arbinote_app/selection.py
"""Cookie-backed storage of the user's active league.

The selection is a single league identifier kept in a long-lived cookie
(``active-league`` by default) scoped to the whole site. Writing always
replaces the previous value. Reading never raises: a missing or malformed
cookie simply means "no selection", letting the resolver fall back to the
default league.

Settings:
    - ``ARBINOTE_ACTIVE_LEAGUE_COOKIE`` – cookie name (default
      ``"active-league"``).
"""

from __future__ import annotations

import logging
import re

from django.conf import settings
from django.http import HttpRequest, HttpResponse

from .exceptions import StoreReadCorrupt

logger = logging.getLogger(__name__)

DEFAULT_COOKIE_NAME = "active-league"
COOKIE_MAX_AGE = 60 * 60 * 24 * 365  # one year, in seconds
COOKIE_PATH = "/"

_MAX_ID_LENGTH = 64
_VALID_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def cookie_name() -> str:
    """Return the configured cookie name."""
    return getattr(settings, "ARBINOTE_ACTIVE_LEAGUE_COOKIE", None) or DEFAULT_COOKIE_NAME


def _parse(raw: str | None) -> str | None:
    """Return a cleaned identifier, ``None`` when absent.

    Raises:
        StoreReadCorrupt: If the value cannot be a league identifier.
    """
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    if len(value) > _MAX_ID_LENGTH or not _VALID_ID.match(value):
        raise StoreReadCorrupt(f"Malformed league cookie value: {raw[:_MAX_ID_LENGTH]!r}")
    return value


def read_selection(request: HttpRequest) -> str | None:
    """Return the stored league identifier for the requesting client.

    Args:
        request: Current HTTP request.

    Returns:
        str | None: The stored identifier, or ``None`` when the cookie is
        missing, empty, or malformed.
    """
    try:
        return _parse(request.COOKIES.get(cookie_name()))
    except StoreReadCorrupt as exc:
        logger.debug("Ignoring stored league selection: %s", exc)
        return None


def write_selection(response: HttpResponse, league_id: str) -> None:
    """Persist ``league_id`` as the client's active league.

    Overwrites any previous value. The cookie applies to every path and lives
    for one year.
    """
    response.set_cookie(
        cookie_name(),
        str(league_id),
        max_age=COOKIE_MAX_AGE,
        path=COOKIE_PATH,
        samesite="Lax",
    )
