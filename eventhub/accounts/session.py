"""
Per-request view of the authenticated identity.

Views and templates read ``request.eventhub_session`` (or the ``session``
template variable) instead of poking at ``request.user`` and the role table
on their own. The role is looked up lazily, once per request.
"""

from dataclasses import dataclass, field
from functools import wraps
from urllib.parse import urlencode

from django.conf import settings
from django.contrib.auth import REDIRECT_FIELD_NAME
from django.shortcuts import redirect, resolve_url

from .models import Role
from .roles import resolve_role


@dataclass
class SessionContext:
    user: object = None
    _role: object = field(default=None, repr=False)
    _role_loaded: bool = field(default=False, repr=False)

    @property
    def is_authenticated(self):
        return bool(self.user is not None and self.user.is_authenticated)

    @property
    def identity_id(self):
        return self.user.pk if self.is_authenticated else None

    @property
    def display_name(self):
        if not self.is_authenticated:
            return ""
        return self.user.first_name or self.user.email or self.user.get_username()

    @property
    def role(self):
        """Stored role, or ``None`` when unset."""
        if not self._role_loaded:
            self._role = resolve_role(self.user) if self.is_authenticated else None
            self._role_loaded = True
        return self._role

    @property
    def is_organiser(self):
        return self.role == Role.ORGANISER


def current_session(request):
    """Return the ``SessionContext`` for ``request``, building it on first use."""
    ctx = getattr(request, "eventhub_session", None)
    if ctx is None:
        user = getattr(request, "user", None)
        ctx = SessionContext(user=user if user is not None and user.is_authenticated else None)
        request.eventhub_session = ctx
    return ctx


def login_required_redirect(view_func=None, redirect_field_name=REDIRECT_FIELD_NAME, login_url=None):
    """
    Send visitors without an identity to the sign-in page with ``?next=``.

    The check runs before the wrapped view, so nothing is fetched for an
    anonymous visitor.
    """

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if current_session(request).is_authenticated:
                return view_func(request, *args, **kwargs)

            resolved_login_url = resolve_url(login_url or settings.LOGIN_URL)
            query = urlencode({redirect_field_name: request.get_full_path()})
            return redirect(f"{resolved_login_url}?{query}")

        return _wrapped_view

    if view_func:
        return decorator(view_func)
    return decorator
