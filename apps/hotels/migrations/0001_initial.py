from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Facility",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=100, unique=True)),
            ],
            options={
                "verbose_name": "Facility",
                "verbose_name_plural": "Facilities",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Hotel",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("city", models.CharField(max_length=100)),
                ("country", models.CharField(max_length=100)),
                ("description", models.TextField()),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("Budget", "Budget"),
                            ("Boutique", "Boutique"),
                            ("Luxury", "Luxury"),
                            ("Ski Resort", "Ski Resort"),
                            ("Business", "Business"),
                            ("Family", "Family"),
                            ("Romantic", "Romantic"),
                            ("Hiking Resort", "Hiking Resort"),
                            ("Cabin", "Cabin"),
                            ("Beach Resort", "Beach Resort"),
                            ("Golf Resort", "Golf Resort"),
                            ("Motel", "Motel"),
                            ("All Inclusive", "All Inclusive"),
                            ("Pet Friendly", "Pet Friendly"),
                            ("Self Catering", "Self Catering"),
                        ],
                        max_length=50,
                    ),
                ),
                (
                    "adult_count",
                    models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("child_count", models.PositiveSmallIntegerField(default=0)),
                (
                    "price_per_night",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                (
                    "star_rating",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ]
                    ),
                ),
                ("image_urls", models.JSONField(blank=True, default=list)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("last_updated", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="hotels",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "facilities",
                    models.ManyToManyField(blank=True, related_name="hotels", to="hotels.facility"),
                ),
            ],
            options={
                "verbose_name": "Hotel",
                "verbose_name_plural": "Hotels",
                "ordering": ["-last_updated"],
            },
        ),
        migrations.AddIndex(
            model_name="hotel",
            index=models.Index(fields=["city"], name="hotels_hote_city_8d1f3a_idx"),
        ),
        migrations.AddIndex(
            model_name="hotel",
            index=models.Index(fields=["country"], name="hotels_hote_country_5b7e21_idx"),
        ),
        migrations.AddIndex(
            model_name="hotel",
            index=models.Index(fields=["price_per_night"], name="hotels_hote_price_p_3c9a40_idx"),
        ),
        migrations.AddIndex(
            model_name="hotel",
            index=models.Index(fields=["star_rating"], name="hotels_hote_star_ra_7a2d15_idx"),
        ),
    ]
