"""
Helpers that turn events and ledger counts into what templates render.
"""

import enum
from dataclasses import dataclass

from django.templatetags.static import static
from django.utils import timezone

PLACEHOLDER_IMAGES = (
    "img/event-tech.svg",
    "img/event-workshop.svg",
    "img/event-networking.svg",
)


def placeholder_image(position):
    return static(PLACEHOLDER_IMAGES[position % len(PLACEHOLDER_IMAGES)])


def format_day(value):
    """'March 5, 2026'"""
    value = timezone.localtime(value)
    return f"{value:%B} {value.day}, {value.year}"


def format_moment(value):
    """'March 5, 2026 at 6:30 PM'"""
    value = timezone.localtime(value)
    hour = value.hour % 12 or 12
    return f"{format_day(value)} at {hour}:{value:%M} {value:%p}"


@dataclass
class EventCard:
    event: object
    image_url: str
    registration_count: int = 0
    is_registered: bool = False

    @property
    def description(self):
        return self.event.description or "No description available"

    @property
    def date_label(self):
        return format_day(self.event.start_date)

    @property
    def capacity_label(self):
        if self.event.max_attendees is None:
            return ""
        return f"{self.registration_count} / {self.event.max_attendees} attendees"


def build_cards(events, counts=None, registered_ids=frozenset()):
    counts = counts or {}
    cards = []
    for position, event in enumerate(events):
        image_url = event.image.url if event.image else placeholder_image(position)
        cards.append(
            EventCard(
                event=event,
                image_url=image_url,
                registration_count=counts.get(event.pk, 0),
                is_registered=event.pk in registered_ids,
            )
        )
    return cards


class ActionState(enum.Enum):
    SIGNED_OUT = "signed_out"
    ORGANISER = "organiser"
    REGISTERED = "registered"
    FULL = "full"
    AVAILABLE = "available"

    @property
    def can_submit(self):
        return self in (ActionState.REGISTERED, ActionState.AVAILABLE)


def registration_action(user, event, registration_count, is_registered):
    """
    State of the register/unregister control on the event page.

    A registered user can always unregister, even when the event is full.
    The organiser of the event gets a badge instead of a button.
    """
    if user is None or not user.is_authenticated:
        return ActionState.SIGNED_OUT
    if event.is_owned_by(user):
        return ActionState.ORGANISER
    if is_registered:
        return ActionState.REGISTERED
    if event.is_full(registration_count):
        return ActionState.FULL
    return ActionState.AVAILABLE
