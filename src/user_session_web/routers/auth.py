import logging

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from user_session_web.dependencies import SessionContext, get_session, get_user_store
from user_session_web.models.store import UserStore
from user_session_web.templating import templates

router = APIRouter()


def redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_302_FOUND)


@router.get("/register", response_class=HTMLResponse)
async def register_form(request: Request):
    return templates.TemplateResponse(request, "auth/register.html")


@router.post("/register")
async def register(
    email: str = Form(""),
    password: str = Form(""),
    password_confirm: str = Form("", alias="passwordConfirm"),
    store: UserStore = Depends(get_user_store),
    session: SessionContext = Depends(get_session),
):
    """
    Register a new user from the sign-up form.

    Any empty field or a confirmation that does not match sends the visitor
    back to the form with no message. On success the new user is logged in
    and redirected home.
    """
    try:
        if not email or not password or not password_confirm or password != password_confirm:
            return redirect("/register")

        user = store.register(email, password)
        session.log_in(user)
        return redirect("/")
    except HTTPException:
        raise
    except Exception as e:
        logging.error(e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/login", response_class=HTMLResponse)
async def login_form(request: Request):
    return templates.TemplateResponse(request, "auth/login.html")


@router.post("/login")
async def login(
    email: str = Form(""),
    password: str = Form(""),
    store: UserStore = Depends(get_user_store),
    session: SessionContext = Depends(get_session),
):
    """
    Login endpoint to authenticate a user with email and password.

    Missing fields and bad credentials both redirect back to /login without
    saying which check failed.
    """
    try:
        if not email or not password:
            return redirect("/login")

        user = store.login(email, password)
        if not user:
            logging.info("Login failed")
            return redirect("/login")

        session.log_in(user)
        logging.info(f"User {user.id} logged in")
        return redirect("/")
    except HTTPException:
        raise
    except Exception as e:
        logging.error(e, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error"
        )


@router.get("/logout")
async def logout(session: SessionContext = Depends(get_session)):
    user_id = session.user_id
    session.clear()
    if user_id is not None:
        logging.info(f"User {user_id} logged out")
    return redirect("/")
