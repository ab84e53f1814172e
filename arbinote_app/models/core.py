# file: arbinote_app/models/core.py
"""Catalog models: federations and their leagues.

Contains the entities the active-league scope is resolved against:
- :class:`Federation`, a national football association with a unique code.
- :class:`League`, a competition owned by exactly one federation.

Both use UUID primary keys; the league key is the opaque identifier stored in
the ``active-league`` cookie. Internal documentation is English; user-facing
labels stay French.
"""

from __future__ import annotations

import uuid

from django.db import models


# --- Federation ------------------------------------------------------------


class Federation(models.Model):
    """Football federation grouping one or more leagues.

    ``code`` is a short, stable and unique label (usually the ISO country
    code, e.g. ``"TUN"``); it is what the default-league setting refers to.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    code = models.CharField("Code", max_length=8, unique=True)
    name = models.CharField("Nom", max_length=255)
    name_en = models.CharField("Nom (anglais)", max_length=255, blank=True, null=True)
    name_ar = models.CharField("Nom (arabe)", max_length=255, blank=True, null=True)
    created_at = models.DateTimeField("Créée le", auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]
        verbose_name = "Fédération"
        verbose_name_plural = "Fédérations"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.code} - {self.name}"


# --- League ----------------------------------------------------------------


class League(models.Model):
    """A competition under a federation; the unit users select as active."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    federation = models.ForeignKey(
        Federation, on_delete=models.CASCADE, related_name="leagues", verbose_name="Fédération"
    )
    name = models.CharField("Nom", max_length=255)
    name_en = models.CharField("Nom (anglais)", max_length=255, blank=True, null=True)
    name_ar = models.CharField("Nom (arabe)", max_length=255, blank=True, null=True)
    created_at = models.DateTimeField("Créée le", auto_now_add=True)

    class Meta:
        ordering = ["name", "id"]
        verbose_name = "Ligue"
        verbose_name_plural = "Ligues"
        constraints = [
            models.UniqueConstraint(fields=["federation", "name"], name="uniq_league_name_per_federation"),
        ]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name
