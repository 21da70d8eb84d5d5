from typing import List, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from user_session_web.dependencies import get_current_user, get_user_store
from user_session_web.models.store import UserStore
from user_session_web.models.user import User
from user_session_web.templating import templates

router = APIRouter()

# Mounted only when USERS_JSON_ENABLED is on.
debug_router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home(request: Request, user: Optional[User] = Depends(get_current_user)):
    return templates.TemplateResponse(request, "home.html", {"user": user})


@debug_router.get("/users.json", response_model=List[User])
async def list_users(store: UserStore = Depends(get_user_store)):
    """
    Every registered user, stored credential included. Not authenticated.
    """
    return store.all()
