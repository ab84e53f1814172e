import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Federation",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("code", models.CharField(max_length=8, unique=True, verbose_name="Code")),
                ("name", models.CharField(max_length=255, verbose_name="Nom")),
                ("name_en", models.CharField(blank=True, max_length=255, null=True, verbose_name="Nom (anglais)")),
                ("name_ar", models.CharField(blank=True, max_length=255, null=True, verbose_name="Nom (arabe)")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Créée le")),
            ],
            options={
                "verbose_name": "Fédération",
                "verbose_name_plural": "Fédérations",
                "ordering": ["name", "id"],
            },
        ),
        migrations.CreateModel(
            name="League",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Nom")),
                ("name_en", models.CharField(blank=True, max_length=255, null=True, verbose_name="Nom (anglais)")),
                ("name_ar", models.CharField(blank=True, max_length=255, null=True, verbose_name="Nom (arabe)")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Créée le")),
                (
                    "federation",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="leagues",
                        to="arbinote_app.federation",
                        verbose_name="Fédération",
                    ),
                ),
            ],
            options={
                "verbose_name": "Ligue",
                "verbose_name_plural": "Ligues",
                "ordering": ["name", "id"],
            },
        ),
        migrations.AddConstraint(
            model_name="league",
            constraint=models.UniqueConstraint(fields=("federation", "name"), name="uniq_league_name_per_federation"),
        ),
        migrations.CreateModel(
            name="Season",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Nom")),
                ("name_ar", models.CharField(blank=True, max_length=255, null=True, verbose_name="Nom (arabe)")),
                ("date_start", models.DateField(blank=True, null=True, verbose_name="Début")),
                ("date_end", models.DateField(blank=True, null=True, verbose_name="Fin")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Créée le")),
                (
                    "league",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="seasons",
                        to="arbinote_app.league",
                        verbose_name="Ligue",
                    ),
                ),
            ],
            options={
                "verbose_name": "Saison",
                "verbose_name_plural": "Saisons",
                "ordering": ["date_start", "name"],
            },
        ),
    ]
