# accounts/signals.py
import logging

from django.contrib.auth.signals import (
    user_logged_in,
    user_logged_out,
    user_login_failed,
)
from django.dispatch import receiver

logger = logging.getLogger(__name__)


def _reset_session_context(request):
    if request is not None and hasattr(request, "eventhub_session"):
        del request.eventhub_session


@receiver(user_logged_in)
def on_sign_in(sender, user, request, **kwargs):
    """
    A new identity is attached to the request; drop the session context
    built for the previous one so the rest of the request sees the change.
    """
    _reset_session_context(request)
    logger.info("User %s signed in", user.pk)


@receiver(user_logged_out)
def on_sign_out(sender, user, request, **kwargs):
    _reset_session_context(request)
    logger.info("User %s signed out", getattr(user, "pk", None))


@receiver(user_login_failed)
def on_sign_in_failed(sender, credentials, request=None, **kwargs):
    logger.info("Failed sign-in for %s", credentials.get("username", ""))
