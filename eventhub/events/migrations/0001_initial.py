from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField(blank=True)),
                ("image", models.ImageField(blank=True, null=True, upload_to="event_images/")),
                ("start_date", models.DateTimeField()),
                ("end_date", models.DateTimeField()),
                ("location", models.CharField(max_length=255)),
                ("max_attendees", models.PositiveIntegerField(blank=True, help_text="Leave empty for unlimited capacity.", null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("organiser", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="organised_events", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["start_date", "id"],
                "indexes": [models.Index(fields=["organiser", "start_date"], name="event_organiser_start_idx")],
            },
        ),
    ]
