import pytest
from django.contrib.messages import get_messages
from django.contrib.messages.storage.fallback import FallbackStorage
from django.contrib.sessions.middleware import SessionMiddleware
from django.db import IntegrityError, InterfaceError, OperationalError
from django.test import RequestFactory

from eventhub.exceptions import (
    DataError,
    EventFull,
    EventHubError,
    NetworkError,
    translate_store_errors,
)
from eventhub.notifications import notify_error, notify_success


@pytest.mark.parametrize("error", [OperationalError("down"), InterfaceError("closed")])
def test_transport_failures_become_network_errors(error):
    with pytest.raises(NetworkError) as exc:
        with translate_store_errors():
            raise error
    assert exc.value.__cause__ is error
    assert exc.value.message == NetworkError.default_message


def test_other_database_errors_pass_through():
    with pytest.raises(IntegrityError):
        with translate_store_errors():
            raise IntegrityError("dup")


def test_custom_message_overrides_default():
    err = EventFull("No seats left")
    assert isinstance(err, DataError)
    assert isinstance(err, EventHubError)
    assert str(err) == "No seats left"
    assert EventFull().message == "This event is full."


def _request():
    request = RequestFactory().get("/")
    SessionMiddleware(lambda r: None).process_request(request)
    request._messages = FallbackStorage(request)
    return request


def test_notifications_are_flashed():
    request = _request()
    notify_success(request, "Saved")
    notify_error(request, "Registration failed", EventFull())
    notify_error(request, "Sign up failed", "Enter a valid email address.")

    texts = [(m.level_tag, m.message) for m in get_messages(request)]
    assert texts == [
        ("success", "Saved"),
        ("danger", "Registration failed: This event is full."),
        ("danger", "Sign up failed: Enter a valid email address."),
    ]
