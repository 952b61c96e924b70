"""Read access to events, plus the organiser's create operation."""

import logging

from eventhub.exceptions import EventNotFound, translate_store_errors

from .models import Event

logger = logging.getLogger(__name__)


def list_all():
    with translate_store_errors():
        return list(Event.objects.order_by("start_date", "id"))


def list_upcoming(limit):
    """Events by start time ascending, truncated to ``limit``."""
    if limit <= 0:
        return []
    with translate_store_errors():
        return list(Event.objects.order_by("start_date", "id")[:limit])


def list_by_organiser(organiser_id):
    with translate_store_errors():
        return list(
            Event.objects.filter(organiser_id=organiser_id).order_by("start_date", "id")
        )


def get_by_id(event_id):
    with translate_store_errors():
        try:
            return Event.objects.get(pk=event_id)
        except (Event.DoesNotExist, ValueError, TypeError) as exc:
            raise EventNotFound() from exc


def create_event(organiser, **fields):
    event = Event(organiser=organiser, **fields)
    event.full_clean()
    with translate_store_errors():
        event.save()
    logger.info("Organiser %s created event %s", organiser.pk, event.pk)
    return event
