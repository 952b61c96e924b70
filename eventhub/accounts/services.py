import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction

from eventhub.exceptions import DuplicateEmail, translate_store_errors

from .roles import assign_role

logger = logging.getLogger(__name__)


def normalise_email(email):
    return (email or "").strip().lower()


def sign_up(*, email, password, full_name, role):
    """
    Create an identity and its role row in one transaction.

    The email doubles as the username. Raises ``DuplicateEmail`` when the
    address is already taken.
    """
    User = get_user_model()
    email = normalise_email(email)
    with translate_store_errors():
        try:
            with transaction.atomic():
                user = User.objects.create_user(
                    username=email,
                    email=email,
                    password=password,
                    first_name=(full_name or "").strip(),
                )
                assign_role(user, role)
        except IntegrityError as exc:
            raise DuplicateEmail() from exc
    logger.info("Created user %s with role %s", user.pk, role)
    return user
