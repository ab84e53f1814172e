# file: arbinote_manager/urls.py
"""Project URL configuration for ``arbinote_manager``.

Routes:
* Django admin and ``nested_admin`` helpers.
* Public site and its JSON endpoints at root (``arbinote_app.site.urls``).
"""

from __future__ import annotations

from django.contrib import admin
from django.urls import URLPattern, URLResolver, include, path

# --- URL patterns ----------------------------------------------------------

urlpatterns: list[URLPattern | URLResolver] = [
    path("_nested_admin/", include("nested_admin.urls")),
    path("admin/", admin.site.urls),
    path("", include("arbinote_app.site.urls")),        # public site
]
