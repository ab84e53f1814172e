# file: arbinote_app/management/commands/load_demo_catalog.py
"""Seed the database with the demo federations, leagues and seasons.

Existing catalog rows are deleted first. The Tunisian federation and its
"Ligue Professionnelle 1" match the default active-league settings, so a fresh
install resolves to that league.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from django.core.management.base import BaseCommand
from django.db import transaction

from arbinote_app.models import Federation, League, Season

FEDERATIONS: list[dict[str, Any]] = [
    {
        "code": "TUN",
        "name": "Fédération Tunisienne de Football",
        "name_en": "Tunisian Football Federation",
        "name_ar": "الجامعة التونسية لكرة القدم",
        "leagues": [
            {"name": "Ligue Professionnelle 1", "name_en": "Tunisian Ligue 1", "name_ar": "الرابطة المحترفة الأولى"},
            {"name": "Ligue Professionnelle 2", "name_en": "Tunisian Ligue 2", "name_ar": "الرابطة المحترفة الثانية"},
        ],
    },
    {
        "code": "FRA",
        "name": "Fédération Française de Football",
        "name_en": "French Football Federation",
        "name_ar": "الاتحاد الفرنسي لكرة القدم",
        "leagues": [
            {"name": "Ligue 1", "name_en": "Ligue 1", "name_ar": "الدوري الفرنسي"},
            {"name": "Ligue 2", "name_en": "Ligue 2", "name_ar": "الدرجة الثانية الفرنسية"},
        ],
    },
]

SEASON_START = date(2025, 8, 1)
SEASON_END = date(2026, 5, 31)


class Command(BaseCommand):
    """Replace the catalog with the demo federations, leagues and seasons."""

    help = "Réinitialise le catalogue (fédérations, ligues, saisons) avec les données de démonstration."

    @transaction.atomic
    def handle(self, *args: Any, **options: Any) -> None:
        """Delete existing catalog rows and create the demo data in one transaction."""
        self.stdout.write("Réinitialisation du catalogue…")
        Season.objects.all().delete()
        League.objects.all().delete()
        Federation.objects.all().delete()

        league_count = 0
        for fed_data in FEDERATIONS:
            leagues = fed_data["leagues"]
            federation = Federation.objects.create(
                code=fed_data["code"],
                name=fed_data["name"],
                name_en=fed_data["name_en"],
                name_ar=fed_data["name_ar"],
            )
            for league_data in leagues:
                league = League.objects.create(federation=federation, **league_data)
                Season.objects.create(
                    name=f"{league.name} {SEASON_START.year}/{SEASON_END.year}",
                    league=league,
                    date_start=SEASON_START,
                    date_end=SEASON_END,
                )
                league_count += 1

        self.stdout.write(self.style.SUCCESS(
            f"{len(FEDERATIONS)} fédérations et {league_count} ligues insérées."
        ))
