from typing import Any, Dict, Optional

from portal.domain.exceptions import AuthDenied, AuthRequired, RecordNotFound
from portal.store import ContentStore, eq

ADMIN_ROLE = "admin"


def current_session(store: ContentStore) -> Optional[Dict[str, Any]]:
    return store.get_current_session()


def is_admin(store: ContentStore, session: Optional[Dict[str, Any]]) -> bool:
    """A session is admin when a user_roles row grants it the admin role."""
    if not session:
        return False

    try:
        store.query_one(
            "user_roles",
            [eq("user_id", session["user_id"]), eq("role", ADMIN_ROLE)],
        )
    except RecordNotFound:
        return False
    return True


def require_admin(store: ContentStore) -> Dict[str, Any]:
    session = current_session(store)

    if not session:
        raise AuthRequired()

    if not is_admin(store, session):
        raise AuthDenied()

    return session


def authenticate(store: ContentStore, *, email: str, password: str) -> Dict[str, Any]:
    session = store.sign_in(email, password)
    session["is_admin"] = is_admin(store, session)
    return session
