# file: arbinote_app/tests/test_preferences_view.py
"""Tests for the active-league mutation endpoint.

Coverage:
* Success writes the cookie and the next request resolves to that league.
* Missing input, unknown leagues and database failures write nothing.
* JSON bodies are read whatever their content type; form posts are read too.
* Only ``POST`` is accepted, and only with a valid CSRF token.
"""

from __future__ import annotations

import json
from typing import Any

import pytest
from django.db import DatabaseError
from django.test import Client
from django.urls import reverse

from arbinote_app.site.views import preferences as preferences_module

pytestmark = pytest.mark.django_db

COOKIE = "active-league"


@pytest.fixture
def url() -> str:
    return reverse("site:league_preference")


def _post_json(client: Client, url: str, payload: Any) -> Any:
    return client.post(url, data=payload, content_type="application/json")


# --- Success ---------------------------------------------------------------


def test_valid_league_sets_cookie(client: Client, url: str, catalog: Any) -> None:
    response = _post_json(client, url, {"league_id": catalog.l2_id})

    assert response.status_code == 200
    assert response.json() == {"success": True}
    morsel = response.cookies[COOKIE]
    assert morsel.value == catalog.l2_id
    assert morsel["path"] == "/"
    assert int(morsel["max-age"]) == 60 * 60 * 24 * 365


def test_selection_is_used_by_next_request(client: Client, url: str, catalog: Any) -> None:
    """A fresh request after the change resolves to the chosen league."""
    _post_json(client, url, {"league_id": catalog.l2_id})

    response = client.get(reverse("site:home"))
    assert response.context["active_league_id"] == catalog.l2_id


@pytest.mark.parametrize("content_type", ["text/plain;charset=UTF-8", "application/octet-stream"])
def test_json_body_with_other_content_type_is_accepted(
    client: Client, url: str, catalog: Any, content_type: str
) -> None:
    """A JSON string body is read whatever content type the browser sent."""
    response = client.post(url, data=json.dumps({"league_id": catalog.l2_id}), content_type=content_type)
    assert response.status_code == 200
    assert response.cookies[COOKIE].value == catalog.l2_id


def test_empty_plain_body_is_rejected(client: Client, url: str, catalog: Any) -> None:
    response = client.post(url, data="", content_type="text/plain")
    assert response.status_code == 400
    assert COOKIE not in response.cookies


def test_form_encoded_body_is_accepted(client: Client, url: str, catalog: Any) -> None:
    response = client.post(url, data={"league_id": catalog.l2_id})
    assert response.status_code == 200
    assert response.cookies[COOKIE].value == catalog.l2_id


def test_identifier_is_stored_in_canonical_form(client: Client, url: str, catalog: Any) -> None:
    response = _post_json(client, url, {"league_id": catalog.l2_id.upper()})
    assert response.status_code == 200
    assert response.cookies[COOKIE].value == catalog.l2_id


def test_repeating_the_change_is_idempotent(client: Client, url: str, catalog: Any) -> None:
    first = _post_json(client, url, {"league_id": catalog.l1_id})
    second = _post_json(client, url, {"league_id": catalog.l1_id})
    assert first.status_code == second.status_code == 200
    assert client.cookies[COOKIE].value == catalog.l1_id


# --- Rejections --------------------------------------------------------------


@pytest.mark.parametrize(
    "payload",
    [{}, {"league_id": ""}, {"league_id": "   "}, {"league_id": None}, {"league_id": 42}, ["league_id"]],
)
def test_missing_identifier_is_rejected(client: Client, url: str, catalog: Any, payload: Any) -> None:
    response = _post_json(client, url, payload)
    assert response.status_code == 400
    assert response.json() == {"error": "league_id is required"}
    assert COOKIE not in response.cookies


def test_invalid_json_is_rejected(client: Client, url: str, catalog: Any) -> None:
    response = client.post(url, data="{not json", content_type="application/json")
    assert response.status_code == 400
    assert COOKIE not in response.cookies


@pytest.mark.parametrize("league_id", ["L9", "3c4d5e6f-0000-4000-8000-000000000000"])
def test_unknown_league_is_rejected(client: Client, url: str, catalog: Any, league_id: str) -> None:
    response = _post_json(client, url, {"league_id": league_id})
    assert response.status_code == 404
    assert response.json() == {"error": "League not found"}
    assert COOKIE not in response.cookies


def test_rejection_keeps_previous_selection(client: Client, url: str, catalog: Any) -> None:
    client.cookies[COOKIE] = catalog.l2_id

    _post_json(client, url, {"league_id": "L9"})
    _post_json(client, url, {})

    assert client.cookies[COOKIE].value == catalog.l2_id
    response = client.get(reverse("site:home"))
    assert response.context["active_league_id"] == catalog.l2_id


def test_database_failure_reports_server_error(
    client: Client, url: str, catalog: Any, monkeypatch: pytest.MonkeyPatch
) -> None:
    class _BrokenManager:
        def filter(self, *args: Any, **kwargs: Any) -> Any:
            raise DatabaseError("database is down")

    monkeypatch.setattr(preferences_module.League, "objects", _BrokenManager())

    response = _post_json(client, url, {"league_id": catalog.l2_id})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert COOKIE not in response.cookies


def test_get_is_not_allowed(client: Client, url: str) -> None:
    assert client.get(url).status_code == 405


def test_post_without_csrf_token_is_forbidden(catalog: Any, url: str) -> None:
    """CSRF middleware rejects the change before the view runs."""
    client = Client(enforce_csrf_checks=True)
    response = client.post(url, data={"league_id": catalog.l2_id}, content_type="application/json")
    assert response.status_code == 403
    assert COOKIE not in response.cookies


def test_post_with_csrf_token_succeeds(catalog: Any, url: str) -> None:
    """The switcher flow: the page hands out a token that the script sends back."""
    client = Client(enforce_csrf_checks=True)
    client.get(reverse("site:home"))
    token = client.cookies["csrftoken"].value

    response = client.post(
        url,
        data={"league_id": catalog.l2_id},
        content_type="application/json",
        HTTP_X_CSRFTOKEN=token,
    )
    assert response.status_code == 200
    assert response.cookies[COOKIE].value == catalog.l2_id
