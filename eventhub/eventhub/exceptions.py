"""
Errors surfaced to the user as a dismissible notification.

Three families, all handled the same way by the views:

- ``AuthError``: bad credentials, duplicate email.
- ``DataError``: constraint violations and missing rows.
- ``NetworkError``: the database could not be reached.

None of them is retried. Absence of a role or a registration is a valid
state and is never reported through these classes.
"""

import logging
from contextlib import contextmanager

from django.db import InterfaceError, OperationalError

logger = logging.getLogger(__name__)


class EventHubError(Exception):
    default_message = "Something went wrong."

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(EventHubError):
    default_message = "Authentication failed."


class InvalidCredentials(AuthError):
    default_message = "Invalid email or password."


class DuplicateEmail(AuthError):
    default_message = "An account with this email already exists."


class DataError(EventHubError):
    default_message = "The request could not be completed."


class EventNotFound(DataError):
    default_message = "Event not found."


class AlreadyRegistered(DataError):
    default_message = "You are already registered for this event."


class NotRegistered(DataError):
    default_message = "You are not registered for this event."


class EventFull(DataError):
    default_message = "This event is full."


class NetworkError(EventHubError):
    default_message = "Could not reach the server. Please try again."


@contextmanager
def translate_store_errors():
    """Re-raise database transport failures as ``NetworkError``."""
    try:
        yield
    except (OperationalError, InterfaceError) as exc:
        logger.error("Database unavailable: %s", exc)
        raise NetworkError() from exc
