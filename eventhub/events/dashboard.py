"""
The dashboard is one of two variants, chosen once from the viewer's role.
"""

from dataclasses import dataclass, field

from accounts.models import Role
from registrations import ledger

from . import catalog
from .presentation import build_cards


@dataclass
class AttendeeDashboard:
    registered: list = field(default_factory=list)
    available: list = field(default_factory=list)

    template_name = "events/dashboard_attendee.html"


@dataclass
class OrganiserDashboard:
    events: list = field(default_factory=list)
    total_events: int = 0
    total_registrations: int = 0

    template_name = "events/dashboard_organiser.html"


def build_attendee_dashboard(user):
    registered_ids = ledger.registered_event_ids(user.pk)
    events = catalog.list_all()
    counts = ledger.counts_by_event(e.pk for e in events)
    cards = build_cards(events, counts, registered_ids)
    return AttendeeDashboard(
        registered=[c for c in cards if c.is_registered],
        available=[c for c in cards if not c.is_registered],
    )


def build_organiser_dashboard(user):
    events = catalog.list_by_organiser(user.pk)
    counts = ledger.counts_by_event(e.pk for e in events)
    return OrganiserDashboard(
        events=build_cards(events, counts),
        total_events=len(events),
        total_registrations=ledger.count_for_many(e.pk for e in events),
    )


def build_dashboard(user, role):
    if role == Role.ORGANISER:
        return build_organiser_dashboard(user)
    return build_attendee_dashboard(user)
