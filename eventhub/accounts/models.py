from django.conf import settings
from django.db import models


class Role(models.TextChoices):
    ATTENDEE = "attendee", "Attendee"
    ORGANISER = "organiser", "Organiser"


class UserRole(models.Model):
    """One row per identity, written once at sign-up."""

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="role_row"
    )
    role = models.CharField(max_length=20, choices=Role.choices)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user.get_username()} ({self.role})"
