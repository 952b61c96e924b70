# accounts/context_processors.py
from .session import current_session


def session_context(request):
    """
    Injects the session context into every template:
    - session: the SessionContext (identity + lazily resolved role)
    """
    return {"session": current_session(request)}
