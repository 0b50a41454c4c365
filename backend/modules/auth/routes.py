"""
Session API endpoints.

Login, registration and logout for the session named by the X-Session-ID
header. Clients without a session ID get one minted and returned in the
response body.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_session_store

from .models import LoginRequest, RegistrationProfile, SessionState
from .service import SessionStore

router = APIRouter()


@router.post("/login", response_model=SessionState)
async def login(
    request: LoginRequest,
    session: SessionStore = Depends(get_session_store),
) -> SessionState:
    """
    Log in with email and password.

    The identity stays attached to the returned session_id until logout.
    """
    await session.login(request.email, request.password)
    return session.state()


@router.post("/register", response_model=SessionState, status_code=201)
async def register(
    profile: RegistrationProfile,
    session: SessionStore = Depends(get_session_store),
) -> SessionState:
    """Create an account and log it in."""
    await session.register(profile)
    return session.state()


@router.post("/logout", response_model=SessionState)
async def logout(
    session: SessionStore = Depends(get_session_store),
) -> SessionState:
    """Log out. Logging out an anonymous session is not an error."""
    session.logout()
    return session.state()


@router.get("/me", response_model=SessionState)
async def me(
    session: SessionStore = Depends(get_session_store),
) -> SessionState:
    """Current identity and capability flags."""
    return session.state()
