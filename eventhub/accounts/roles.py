import logging

from django.db import DatabaseError

from .models import Role, UserRole

logger = logging.getLogger(__name__)


def resolve_role(user):
    """
    Return the stored role of ``user`` or ``None`` when it is unset.

    A missing row and a failed lookup are both treated as "unset" so that
    rendering never blocks on the role.
    """
    if user is None or not user.is_authenticated:
        return None
    try:
        row = UserRole.objects.only("role").get(user_id=user.pk)
    except UserRole.DoesNotExist:
        logger.info("No role stored for user %s", user.pk)
        return None
    except DatabaseError as exc:
        logger.warning("Role lookup failed for user %s: %s", user.pk, exc)
        return None
    return Role(row.role)


def effective_role(user):
    return resolve_role(user) or Role.ATTENDEE


def assign_role(user, role):
    if role not in Role.values:
        raise ValueError(f"Unknown role: {role!r}")
    return UserRole.objects.create(user=user, role=role)
