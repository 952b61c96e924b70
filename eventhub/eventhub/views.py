from django.conf import settings
from django.shortcuts import render

from accounts.session import current_session
from events import catalog
from events.presentation import build_cards
from registrations import ledger

from .exceptions import EventHubError
from .notifications import notify_error


def index(request):
    """Landing page with a preview of the next few events."""
    session = current_session(request)
    cards = []
    try:
        events = catalog.list_upcoming(settings.EVENTHUB_PREVIEW_LIMIT)
        counts = ledger.counts_by_event(e.pk for e in events)
        registered = ledger.registered_event_ids(session.identity_id)
        cards = build_cards(events, counts, registered)
    except EventHubError as exc:
        notify_error(request, "Could not load events", exc)
    return render(request, "eventhub/index.html", {"cards": cards})


def permission_denied_view(request, exception):
    message = str(exception) or "You do not have permission to access this page."

    context = {"error_message": message}
    return render(request, "eventhub/403.html", context, status=403)


def page_not_found_view(request, exception):
    return render(request, "eventhub/404.html", status=404)
