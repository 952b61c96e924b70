"""
Registration bookkeeping: who is registered for which event.

The unique constraint on ``(event, user)`` is the source of truth for
"registered at most once". Capacity is checked under a row lock on the
event in the same transaction as the insert.
"""

import logging

from django.db import IntegrityError, transaction
from django.db.models import Count

from eventhub.exceptions import (
    AlreadyRegistered,
    EventFull,
    EventNotFound,
    NotRegistered,
    translate_store_errors,
)
from events.models import Event

from .models import Registration

logger = logging.getLogger(__name__)


def register(event_id, user_id):
    with translate_store_errors():
        try:
            with transaction.atomic():
                try:
                    event = Event.objects.select_for_update().get(pk=event_id)
                except Event.DoesNotExist as exc:
                    raise EventNotFound() from exc

                if event.max_attendees is not None:
                    taken = Registration.objects.filter(event_id=event_id).count()
                    if event.is_full(taken):
                        raise EventFull()

                registration = Registration.objects.create(event=event, user_id=user_id)
        except IntegrityError as exc:
            raise AlreadyRegistered() from exc

    logger.info("User %s registered for event %s", user_id, event_id)
    return registration


def unregister(event_id, user_id):
    with translate_store_errors():
        deleted, _ = Registration.objects.filter(event_id=event_id, user_id=user_id).delete()
    if not deleted:
        raise NotRegistered()
    logger.info("User %s unregistered from event %s", user_id, event_id)


def count_for(event_id):
    with translate_store_errors():
        return Registration.objects.filter(event_id=event_id).count()


def is_registered(event_id, user_id):
    if user_id is None:
        return False
    with translate_store_errors():
        return Registration.objects.filter(event_id=event_id, user_id=user_id).exists()


def count_for_many(event_ids):
    """Total registrations across ``event_ids``."""
    event_ids = list(event_ids)
    if not event_ids:
        return 0
    with translate_store_errors():
        return Registration.objects.filter(event_id__in=event_ids).count()


def counts_by_event(event_ids):
    """``{event_id: count}`` for every id given, zero included."""
    event_ids = list(event_ids)
    counts = dict.fromkeys(event_ids, 0)
    if not event_ids:
        return counts
    with translate_store_errors():
        rows = (
            Registration.objects.filter(event_id__in=event_ids)
            .values("event_id")
            .annotate(n=Count("id"))
        )
        for row in rows:
            counts[row["event_id"]] = row["n"]
    return counts


def registered_event_ids(user_id):
    if user_id is None:
        return set()
    with translate_store_errors():
        return set(
            Registration.objects.filter(user_id=user_id).values_list("event_id", flat=True)
        )
