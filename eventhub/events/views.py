import logging
from functools import wraps

from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect, render
from django.urls import reverse
from django.utils.http import urlencode
from django.views.decorators.http import require_http_methods, require_POST

from accounts.models import Role
from accounts.session import current_session, login_required_redirect
from eventhub.exceptions import EventHubError, EventNotFound
from eventhub.notifications import notify_error, notify_success
from registrations import ledger

from . import catalog
from .dashboard import AttendeeDashboard, OrganiserDashboard, build_dashboard
from .forms import EventForm
from .presentation import format_moment, registration_action

logger = logging.getLogger(__name__)


# --- Auth / role decorators -------------------------------------------------


def organiser_required(view_func):
    @wraps(view_func)
    def _wrapped_view(request, *args, **kwargs):
        if current_session(request).role != Role.ORGANISER:
            raise PermissionDenied("You must be an organiser to perform this action.")
        return view_func(request, *args, **kwargs)

    return _wrapped_view


def _detail_url(event_id):
    return reverse("events:event_detail", args=[event_id])


def _sign_in_first(request, event_id):
    notify_error(request, "Sign in required", "Please sign in to register for events.")
    query = urlencode({"next": _detail_url(event_id)})
    return redirect(f"{reverse('accounts:auth')}?{query}")


# --- Views ------------------------------------------------------------------


@login_required_redirect
def dashboard(request):
    session = current_session(request)
    role = session.role or Role.ATTENDEE
    try:
        view = build_dashboard(session.user, role)
    except EventHubError as exc:
        notify_error(request, "Could not load dashboard", exc)
        view = OrganiserDashboard() if role == Role.ORGANISER else AttendeeDashboard()
    return render(request, view.template_name, {"dashboard": view})


def event_detail(request, event_id):
    session = current_session(request)
    try:
        event = catalog.get_by_id(event_id)
    except EventNotFound:
        return render(request, "events/event_not_found.html", status=404)

    count = 0
    registered = False
    try:
        count = ledger.count_for(event.pk)
        registered = ledger.is_registered(event.pk, session.identity_id)
    except EventHubError as exc:
        notify_error(request, "Could not load registrations", exc)

    action = registration_action(session.user, event, count, registered)
    return render(
        request,
        "events/event_detail.html",
        {
            "event": event,
            "registration_count": count,
            "is_registered": registered,
            "is_full": event.is_full(count),
            "action": action,
            "starts_at": format_moment(event.start_date),
            "ends_at": format_moment(event.end_date),
            "sign_in_url": f"{reverse('accounts:auth')}?{urlencode({'next': _detail_url(event.pk)})}",
        },
    )


@require_POST
def register(request, event_id):
    session = current_session(request)
    if not session.is_authenticated:
        return _sign_in_first(request, event_id)

    try:
        event = catalog.get_by_id(event_id)
        if event.is_owned_by(session.user):
            raise PermissionDenied("Organisers cannot register for their own event.")
        ledger.register(event.pk, session.identity_id)
    except PermissionDenied as exc:
        notify_error(request, "Registration failed", str(exc))
    except EventHubError as exc:
        notify_error(request, "Registration failed", exc)
    else:
        notify_success(request, "Successfully registered!", "You're all set for this event.")
    return redirect(_detail_url(event_id))


@require_POST
def unregister(request, event_id):
    session = current_session(request)
    if not session.is_authenticated:
        return _sign_in_first(request, event_id)

    try:
        ledger.unregister(event_id, session.identity_id)
    except EventHubError as exc:
        notify_error(request, "Failed to unregister", exc)
    else:
        notify_success(request, "Unregistered", "You've been unregistered from this event.")
    return redirect(_detail_url(event_id))


@login_required_redirect
@organiser_required
@require_http_methods(["GET", "POST"])
def create_event(request):
    session = current_session(request)
    if request.method == "POST":
        form = EventForm(request.POST, request.FILES)
        if form.is_valid():
            try:
                fields = dict(form.cleaned_data)
                fields["image"] = fields.get("image") or None
                event = catalog.create_event(session.user, **fields)
            except EventHubError as exc:
                notify_error(request, "Could not create event", exc)
            else:
                notify_success(request, "Event created successfully!")
                return redirect(_detail_url(event.pk))
        else:
            notify_error(request, "Could not create event", "Please fix the errors below.")
    else:
        form = EventForm()
    return render(request, "events/create_event.html", {"form": form})
