"""
Security utilities and authentication dependencies
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import Settings, get_settings
from app.schemas.user import UserProfile
from app.services.auth_service import AuthService, ensure_admin
from app.services.kv_store import KeyValueStore, get_store

# auto_error is off so a missing header surfaces as our own 401 payload
security = HTTPBearer(auto_error=False)

def get_auth_service(
    store: KeyValueStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> AuthService:
    return AuthService(store, settings)

def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Extract the bearer token, if any"""
    return credentials.credentials if credentials else None

def get_current_user(
    token: Optional[str] = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
) -> UserProfile:
    """Resolve the caller's profile or raise Unauthenticated"""
    return auth.validate_session(token)

def get_current_admin(user: UserProfile = Depends(get_current_user)) -> UserProfile:
    return ensure_admin(user)
