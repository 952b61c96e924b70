from datetime import timedelta

import pytest
from django.contrib.auth.models import User
from django.test import TestCase
from django.utils import timezone

from eventhub.exceptions import AlreadyRegistered, EventFull, EventNotFound, NotRegistered
from events.models import Event
from registrations import ledger
from registrations.models import Registration

pytestmark = pytest.mark.django_db


def test_register_marks_user_and_increments_count(make_event, attendee):
    event = make_event()
    before = ledger.count_for(event.pk)

    ledger.register(event.pk, attendee.pk)

    assert ledger.is_registered(event.pk, attendee.pk) is True
    assert ledger.count_for(event.pk) == before + 1


def test_unregister_reverts_registration(make_event, attendee):
    event = make_event()
    ledger.register(event.pk, attendee.pk)

    ledger.unregister(event.pk, attendee.pk)

    assert ledger.is_registered(event.pk, attendee.pk) is False
    assert ledger.count_for(event.pk) == 0


def test_registering_twice_fails(make_event, attendee):
    event = make_event()
    ledger.register(event.pk, attendee.pk)

    with pytest.raises(AlreadyRegistered):
        ledger.register(event.pk, attendee.pk)

    assert Registration.objects.filter(event=event, user=attendee).count() == 1


def test_register_again_after_unregister(make_event, attendee):
    event = make_event()
    ledger.register(event.pk, attendee.pk)
    ledger.unregister(event.pk, attendee.pk)

    ledger.register(event.pk, attendee.pk)

    assert ledger.count_for(event.pk) == 1


def test_unregister_without_registration_raises(make_event, attendee):
    event = make_event()
    with pytest.raises(NotRegistered):
        ledger.unregister(event.pk, attendee.pk)


def test_register_unknown_event(attendee):
    with pytest.raises(EventNotFound):
        ledger.register(987654, attendee.pk)


def test_capacity_two_scenario(make_event, make_user):
    event = make_event(max_attendees=2)
    a = make_user("a@example.com")
    b = make_user("b@example.com")
    c = make_user("c@example.com")

    ledger.register(event.pk, a.pk)
    assert ledger.count_for(event.pk) == 1
    assert event.is_full(ledger.count_for(event.pk)) is False

    ledger.register(event.pk, b.pk)
    assert ledger.count_for(event.pk) == 2
    assert event.is_full(ledger.count_for(event.pk)) is True

    with pytest.raises(EventFull):
        ledger.register(event.pk, c.pk)
    assert ledger.count_for(event.pk) == 2
    assert ledger.is_registered(event.pk, c.pk) is False


def test_no_capacity_never_fills(make_event, make_user):
    event = make_event(max_attendees=None)
    for i in range(5):
        ledger.register(event.pk, make_user(f"u{i}@example.com").pk)
    assert event.is_full(ledger.count_for(event.pk)) is False


def test_count_for_many_matches_sum_per_organiser(make_event, make_user):
    other_org = make_user("other@example.com", role="organiser")
    mine = [make_event(title="Mine 1"), make_event(title="Mine 2")]
    theirs = [make_event(title="Theirs", organiser=other_org)]
    users = [make_user(f"p{i}@example.com") for i in range(3)]

    ledger.register(mine[0].pk, users[0].pk)
    ledger.register(mine[0].pk, users[1].pk)
    ledger.register(mine[1].pk, users[2].pk)
    ledger.register(theirs[0].pk, users[0].pk)

    assert ledger.count_for_many(e.pk for e in mine) == sum(
        ledger.count_for(e.pk) for e in mine
    ) == 3
    assert ledger.count_for_many(e.pk for e in theirs) == 1


def test_count_for_many_empty():
    assert ledger.count_for_many([]) == 0


def test_counts_by_event_includes_zero(make_event, attendee):
    busy, quiet = make_event(title="Busy"), make_event(title="Quiet")
    ledger.register(busy.pk, attendee.pk)

    assert ledger.counts_by_event([busy.pk, quiet.pk]) == {busy.pk: 1, quiet.pk: 0}


def test_registered_event_ids(make_event, attendee):
    first, second, _ = make_event(), make_event(), make_event()
    ledger.register(first.pk, attendee.pk)
    ledger.register(second.pk, attendee.pk)

    assert ledger.registered_event_ids(attendee.pk) == {first.pk, second.pk}
    assert ledger.registered_event_ids(None) == set()


def test_is_registered_for_anonymous(make_event):
    assert ledger.is_registered(make_event().pk, None) is False


class LedgerLoggingTests(TestCase):
    def setUp(self):
        self.organiser = User.objects.create_user(username="o@example.com", password="x")
        self.user = User.objects.create_user(username="u@example.com", password="x")
        start = timezone.now() + timedelta(days=1)
        self.event = Event.objects.create(
            organiser=self.organiser,
            title="Logged",
            start_date=start,
            end_date=start + timedelta(hours=1),
            location="NYC",
        )

    def test_register_and_unregister_are_logged(self):
        with self.assertLogs("registrations.ledger", level="INFO") as logs:
            ledger.register(self.event.pk, self.user.pk)
            ledger.unregister(self.event.pk, self.user.pk)
        self.assertEqual(len(logs.output), 2)
        self.assertIn("registered for event", logs.output[0])
        self.assertIn("unregistered from event", logs.output[1])
