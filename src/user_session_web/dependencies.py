from typing import Any, MutableMapping, Optional

from fastapi import Depends, Request

from user_session_web.models.store import UserStore
from user_session_web.models.user import User, UserId

SESSION_USER_KEY = "user_id"


class SessionContext:
    """
    Explicit view of the signed session cookie for one request.
    """

    def __init__(self, session: MutableMapping[str, Any]):
        self._session = session

    @property
    def user_id(self) -> Optional[UserId]:
        return self._session.get(SESSION_USER_KEY)

    def log_in(self, user: User) -> None:
        self._session[SESSION_USER_KEY] = user.id

    def clear(self) -> None:
        self._session.clear()


def get_user_store(request: Request) -> UserStore:
    return request.app.state.user_store


def get_session(request: Request) -> SessionContext:
    return SessionContext(request.session)


def get_current_user(
    session: SessionContext = Depends(get_session),
    store: UserStore = Depends(get_user_store),
) -> Optional[User]:
    """
    The logged-in user, or None for anonymous visitors and for sessions
    pointing at a user the store does not know.
    """
    user_id = session.user_id
    if user_id is None:
        return None
    return store.find(user_id)
