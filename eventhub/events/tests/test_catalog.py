from datetime import timedelta

import pytest
from django.core.exceptions import ValidationError
from django.utils import timezone

from eventhub.exceptions import EventNotFound
from events import catalog

pytestmark = pytest.mark.django_db


def test_list_upcoming_orders_and_limits(make_event):
    third = make_event(title="Third", days_ahead=3)
    first = make_event(title="First", days_ahead=1)
    second = make_event(title="Second", days_ahead=2)
    make_event(title="Fourth", days_ahead=4)

    assert catalog.list_upcoming(3) == [first, second, third]


def test_list_upcoming_zero_limit(make_event):
    make_event()
    assert catalog.list_upcoming(0) == []


def test_list_all_returns_every_event(make_event):
    events = [make_event(days_ahead=d) for d in (5, 1, 3)]
    assert catalog.list_all() == sorted(events, key=lambda e: e.start_date)


def test_list_by_organiser_filters_owner(make_event, make_user, organiser):
    other = make_user("other@example.com", role="organiser")
    mine_late = make_event(title="Mine late", days_ahead=9)
    mine_early = make_event(title="Mine early", days_ahead=2)
    make_event(title="Not mine", organiser=other)

    assert catalog.list_by_organiser(organiser.pk) == [mine_early, mine_late]


def test_list_by_organiser_without_events(attendee):
    assert catalog.list_by_organiser(attendee.pk) == []


def test_get_by_id(make_event):
    event = make_event()
    assert catalog.get_by_id(event.pk) == event


@pytest.mark.parametrize("bad_id", [424242, "not-a-number", None])
def test_get_by_id_not_found(bad_id):
    with pytest.raises(EventNotFound):
        catalog.get_by_id(bad_id)


def test_create_event_sets_owner(organiser):
    start = timezone.now() + timedelta(days=1)
    event = catalog.create_event(
        organiser,
        title="Created",
        description="",
        start_date=start,
        end_date=start + timedelta(hours=1),
        location="Brooklyn",
        max_attendees=None,
    )
    assert event.pk is not None
    assert event.organiser == organiser


def test_create_event_validates_dates(organiser):
    start = timezone.now() + timedelta(days=1)
    with pytest.raises(ValidationError):
        catalog.create_event(
            organiser,
            title="Backwards",
            start_date=start,
            end_date=start - timedelta(hours=1),
            location="Queens",
        )
