from django.db import migrations

FACILITIES = [
    "Free WiFi",
    "Parking",
    "Airport Shuttle",
    "Family Rooms",
    "Non-Smoking Rooms",
    "Outdoor Pool",
    "Spa",
    "Fitness Center",
]


def create_facilities(apps, schema_editor):
    Facility = apps.get_model("hotels", "Facility")
    for name in FACILITIES:
        Facility.objects.get_or_create(name=name)


def remove_facilities(apps, schema_editor):
    Facility = apps.get_model("hotels", "Facility")
    Facility.objects.filter(name__in=FACILITIES, hotels__isnull=True).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("hotels", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_facilities, remove_facilities),
    ]
