# file: arbinote_app/site/views/preferences.py
"""Endpoint that changes the client's active league.

Exposes :class:`LeaguePreferenceView`. A ``POST`` carrying ``league_id``
is validated against the database and, when the league exists, stored in the
``active-league`` cookie. Form-encoded and multipart requests are read from
the form fields; any other body is parsed as JSON whatever its content type
(``fetch`` sends a bare string body as ``text/plain``).

Outcomes:
    - ``200`` ``{"success": true}`` and the updated cookie.
    - ``400`` when ``league_id`` is missing or empty, or the body is not JSON.
    - ``403`` when the CSRF token is missing or wrong (Django's CSRF
      middleware rejects the request before the view runs).
    - ``404`` when no league has that identifier.
    - ``405`` for any method other than ``POST``.
    - ``500`` when the database cannot be queried.

Only the success path writes the cookie; every failure leaves the stored
selection untouched.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import HttpRequest, JsonResponse
from django.views import View

from arbinote_app.exceptions import InvalidSelectionInput, UnknownLeague
from arbinote_app.models import League
from arbinote_app.selection import write_selection

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def _candidate_from(request: HttpRequest) -> str:
    """Extract the requested league identifier.

    Raises:
        InvalidSelectionInput: If the identifier is missing, empty, or not a
            string, or the JSON body cannot be parsed.
    """
    if request.content_type in FORM_CONTENT_TYPES:
        value = request.POST.get("league_id")
    else:
        try:
            payload = json.loads(request.body or b"{}")
        except (ValueError, UnicodeDecodeError) as exc:
            raise InvalidSelectionInput("Request body is not valid JSON") from exc
        value = payload.get("league_id") if isinstance(payload, dict) else None

    if not isinstance(value, str) or not value.strip():
        raise InvalidSelectionInput("league_id is required")
    return value.strip()


def _lookup_league_id(league_id: str) -> str:
    """Look the league up in the database and return its canonical id.

    Raises:
        UnknownLeague: If no league has ``league_id``.
        DatabaseError: If the lookup itself fails.
    """
    try:
        pk = League.objects.filter(pk=league_id).values_list("pk", flat=True).first()
    except ValidationError:
        # Not a UUID, so it cannot name any league.
        pk = None
    if pk is None:
        raise UnknownLeague(league_id)
    return str(pk)


class LeaguePreferenceView(View):
    """Validate and persist a league change requested by the client."""

    http_method_names = ["post"]

    def post(self, request: HttpRequest, *args: Any, **kwargs: Any) -> JsonResponse:
        """Handle the league change; see the module docstring for outcomes."""
        try:
            league_id = _lookup_league_id(_candidate_from(request))
        except InvalidSelectionInput:
            return JsonResponse({"error": "league_id is required"}, status=400)
        except UnknownLeague:
            return JsonResponse({"error": "League not found"}, status=404)
        except DatabaseError:
            logger.exception("Failed to set league preference")
            return JsonResponse({"error": "Internal server error"}, status=500)

        response = JsonResponse({"success": True})
        write_selection(response, league_id)
        return response
