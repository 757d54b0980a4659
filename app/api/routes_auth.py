"""
Authentication routes
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.schemas.user import SignupRequest, SigninRequest
from app.services.auth_service import AuthService
from app.utils.responses import success_response
from app.utils.security import get_auth_service, get_bearer_token

router = APIRouter()

@router.post("/signup")
async def signup(body: SignupRequest, auth: AuthService = Depends(get_auth_service)):
    """Register a user account; returns {user, session, profile}"""
    return auth.signup(
        email=body.email,
        password=body.password,
        name=body.name,
        category=body.category,
        is_admin=body.is_admin,
    )

@router.post("/signin")
async def signin(body: SigninRequest, auth: AuthService = Depends(get_auth_service)):
    """Log in as a user, or as an admin when isAdmin/loginType says so"""
    return auth.login(
        email=body.email,
        password=body.password,
        login_type="admin" if body.wants_admin else "user",
    )

@router.get("/session")
async def get_session(
    token: Optional[str] = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
):
    profile = auth.validate_session(token)
    return {"user": profile.to_json(), "isAdmin": profile.is_admin}

@router.post("/signout")
async def signout(
    token: Optional[str] = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
):
    auth.signout(token)
    return success_response(message="Logged out successfully")
