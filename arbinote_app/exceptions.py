# file: arbinote_app/exceptions.py
"""Error kinds raised while resolving or changing the active league.

Only :class:`CatalogUnavailable` is allowed to escape a request; the other
kinds are translated into JSON responses by the preference endpoint, and
:class:`StoreReadCorrupt` never leaves :mod:`arbinote_app.selection`.
"""

from __future__ import annotations


class ScopeError(Exception):
    """Base class for active-league scope errors."""


class CatalogUnavailable(ScopeError):
    """The federation/league catalog could not be read."""


class InvalidSelectionInput(ScopeError):
    """A league change was requested without a league identifier."""


class UnknownLeague(ScopeError):
    """The requested league does not exist in the catalog."""

    def __init__(self, league_id: str) -> None:
        """Keep the rejected identifier on ``league_id``."""
        super().__init__(f"League {league_id!r} not found")
        self.league_id = league_id


class StoreReadCorrupt(ScopeError):
    """The stored selection cookie holds a malformed value."""
