from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class Event(models.Model):
    organiser = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="organised_events"
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    image = models.ImageField(upload_to="event_images/", blank=True, null=True)
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    location = models.CharField(max_length=255)
    max_attendees = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Leave empty for unlimited capacity.",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["start_date", "id"]
        indexes = [
            models.Index(fields=["organiser", "start_date"], name="event_organiser_start_idx")
        ]

    def __str__(self):
        return self.title

    def clean(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({"end_date": "The event cannot end before it starts."})

    @property
    def has_capacity(self):
        return self.max_attendees is not None

    def is_full(self, registration_count):
        """
        True when a capacity is set and ``registration_count`` reached it.
        Without a capacity the event is never full.
        """
        if self.max_attendees is None:
            return False
        return registration_count >= self.max_attendees

    def is_owned_by(self, user):
        return user is not None and user.is_authenticated and self.organiser_id == user.pk
