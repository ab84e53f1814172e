# file: arbinote_app/apps.py
"""App configuration for the ArbiNote application.

Defines :class:`ArbinoteAppConfig`, the Django ``AppConfig`` that registers the
app. Models declare their own UUID primary keys; ``default_auto_field`` only
applies to models that do not.
"""

from __future__ import annotations

from django.apps import AppConfig


# --- AppConfig -------------------------------------------------------------

class ArbinoteAppConfig(AppConfig):
    """App registration and defaults for ``arbinote_app``."""

    default_auto_field: str = "django.db.models.BigAutoField"
    name: str = "arbinote_app"
    verbose_name: str = "ArbiNote"
