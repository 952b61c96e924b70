from django.contrib import messages


def notify_success(request, title, description=""):
    messages.success(request, f"{title} {description}".strip())


def notify_error(request, title, error):
    """
    Flash a dismissible error notification.

    ``error`` may be an ``EventHubError`` (its ``message`` is shown) or a
    plain string.
    """
    description = getattr(error, "message", None) or str(error)
    messages.error(request, f"{title}: {description}")
