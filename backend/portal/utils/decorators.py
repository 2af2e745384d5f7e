from functools import wraps
from flask import g
from portal.application.access import require_admin
from portal.domain.exceptions import QueryFailure, RecordNotFound
from portal.store import get_store

def admin_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        g.current_session = require_admin(get_store())
        return fn(*args, **kwargs)
    return wrapper

def notify_on_failure(message):
    """Attach the view's toast text to store failures raised inside it."""
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except (QueryFailure, RecordNotFound) as error:
                if error.notification is None:
                    error.notification = message
                raise
        return wrapper
    return decorator
