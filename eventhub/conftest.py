# conftest.py
from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.models import Role, UserRole
from events.models import Event

PASSWORD = "Passw0rd1!"


def _make_user(django_user_model, email, role=None, full_name=""):
    user = django_user_model.objects.create_user(
        username=email, email=email, password=PASSWORD, first_name=full_name
    )
    if role is not None:
        UserRole.objects.create(user=user, role=role)
    return user


@pytest.fixture
def password():
    return PASSWORD


@pytest.fixture
def organiser(db, django_user_model):
    return _make_user(django_user_model, "org@example.com", Role.ORGANISER, "Olivia Org")


@pytest.fixture
def attendee(db, django_user_model):
    return _make_user(django_user_model, "att@example.com", Role.ATTENDEE, "Adam Att")


@pytest.fixture
def make_user(db, django_user_model):
    def factory(email, role=Role.ATTENDEE, full_name=""):
        return _make_user(django_user_model, email, role, full_name)

    return factory


@pytest.fixture
def make_event(db, organiser):
    def factory(**overrides):
        start = timezone.now() + timedelta(days=overrides.pop("days_ahead", 7))
        fields = {
            "title": "Sample Event",
            "description": "A test event",
            "start_date": start,
            "end_date": start + timedelta(hours=2),
            "location": "NYC",
            "organiser": organiser,
        }
        fields.update(overrides)
        return Event.objects.create(**fields)

    return factory
