# file: arbinote_app/models/seasons.py
"""Season model, the first data scoped by the active league."""

from __future__ import annotations

import uuid

from django.core.exceptions import ValidationError
from django.db import models


class Season(models.Model):
    """A season of a league.

    ``league`` is optional so that deleting a league keeps its seasons around
    (``SET_NULL``) instead of cascading.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField("Nom", max_length=255)
    name_ar = models.CharField("Nom (arabe)", max_length=255, blank=True, null=True)
    league = models.ForeignKey(
        "arbinote_app.League",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="seasons",
        verbose_name="Ligue",
    )
    date_start = models.DateField("Début", blank=True, null=True)
    date_end = models.DateField("Fin", blank=True, null=True)
    created_at = models.DateTimeField("Créée le", auto_now_add=True)

    class Meta:
        ordering = ["date_start", "name"]
        verbose_name = "Saison"
        verbose_name_plural = "Saisons"

    def clean(self) -> None:
        """Validate model state before saving.

        Raises:
            ValidationError: If ``date_end`` is before ``date_start``.
        """
        if self.date_end and self.date_start and self.date_end < self.date_start:
            raise ValidationError("La fin de saison doit être après le début.")

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.name
