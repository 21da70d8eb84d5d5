import logging
from typing import Optional

from fastapi import FastAPI
from starlette.middleware.sessions import SessionMiddleware

from user_session_web.config import Settings, get_settings
from user_session_web.middleware import MethodOverrideMiddleware
from user_session_web.models.credentials import credential_for, ids_for
from user_session_web.models.store import UserStore
from user_session_web.routers.auth import router as auth_router
from user_session_web.routers.pages import debug_router, router as pages_router


def build_store(settings: Settings) -> UserStore:
    return UserStore(
        credential=credential_for(settings.credential_scheme, rounds=settings.bcrypt_rounds),
        next_id=ids_for(settings.user_id_scheme),
    )


def create_app(settings: Optional[Settings] = None, store: Optional[UserStore] = None) -> FastAPI:
    """
    Build the web app around one user store.

    The store is created from the settings unless one is passed in.
    """
    settings = settings or get_settings()
    if settings.uses_default_secret:
        logging.warning("SESSION_SECRET is not set; session cookies are signed with the built-in key")

    app = FastAPI(debug=settings.debug)
    app.state.settings = settings
    app.state.user_store = store if store is not None else build_store(settings)

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie,
    )
    app.add_middleware(MethodOverrideMiddleware)

    # Include page and auth routers
    app.include_router(pages_router)
    app.include_router(auth_router)
    if settings.users_json_enabled:
        app.include_router(debug_router)

    return app
