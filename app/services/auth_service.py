"""
Authentication service: accounts, logins and bearer sessions
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from app.core.config import Settings
from app.schemas.user import UserProfile
from app.services.errors import Conflict, Forbidden, InvalidInput, Unauthenticated
from app.services.kv_store import KeyValueStore
from app.services.repositories import IdentityRepo, UserRepo, new_id, utc_now_iso
from app.utils.crypto import generate_token, hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


class AuthService:
    """Service for signup, login and session validation"""

    def __init__(self, store: KeyValueStore, settings: Settings):
        self.settings = settings
        self.identities = IdentityRepo(store)
        self.users = UserRepo(store)

    # -------- accounts --------

    def signup(
        self,
        email: str,
        password: str,
        name: str = "",
        category: str = "",
        is_admin: bool = False,
    ) -> Dict[str, Any]:
        """Register a regular user and open a session for them"""
        email = (email or "").strip().lower()
        if not email or not password:
            raise InvalidInput("Email and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidInput(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        if is_admin:
            raise Forbidden("Admin signup is not allowed through this endpoint")
        if email == self.settings.ADMIN_EMAIL.strip().lower():
            raise Conflict("DuplicateEmail: this email is reserved")
        if self.identities.get_credential(email):
            raise Conflict("DuplicateEmail: an account with this email already exists")

        profile = self._create_account(email, password, name.strip() or email.split("@")[0], category, "user")
        logger.info("User %s signed up", profile.id)
        return self._session_payload(profile)

    def _create_account(self, email: str, password: str, name: str, category: str, role: str) -> UserProfile:
        profile = UserProfile(
            id=new_id("user"),
            email=email,
            name=name,
            category=category,
            role=role,
            created_at=utc_now_iso(),
        )
        credential = {
            "userId": profile.id,
            "email": email,
            "passwordHash": hash_password(password, iterations=self.settings.PASSWORD_HASH_ITERATIONS),
        }
        self.identities.create_account(credential, profile)
        return profile

    def _ensure_bootstrap_admin(self) -> None:
        """Provision the configured admin identity the first time it logs in"""
        if self.identities.get_credential(self.settings.ADMIN_EMAIL):
            return
        profile = self._create_account(
            self.settings.ADMIN_EMAIL.strip().lower(),
            self.settings.ADMIN_PASSWORD,
            "Admin",
            "",
            "admin",
        )
        logger.info("Provisioned admin account %s", profile.id)

    # -------- login --------

    def login(self, email: str, password: str, login_type: str = "user") -> Dict[str, Any]:
        email = (email or "").strip().lower()
        if not email or not password:
            raise InvalidInput("Email and password are required")

        if login_type == "admin" and email == self.settings.ADMIN_EMAIL.lower() \
                and password == self.settings.ADMIN_PASSWORD:
            self._ensure_bootstrap_admin()

        profile = self._verify_credentials(email, password)

        if login_type == "admin" and not profile.is_admin:
            logger.warning("Non-admin account %s attempted admin login", profile.id)
            raise Forbidden("Invalid admin credentials")
        if login_type != "admin" and profile.is_admin:
            logger.warning("Admin account %s attempted user login", profile.id)
            raise Forbidden("Admin accounts must use the admin login")

        logger.info("%s %s logged in", profile.role.capitalize(), profile.id)
        return self._session_payload(profile)

    def _verify_credentials(self, email: str, password: str) -> UserProfile:
        credential = self.identities.get_credential(email)
        if not credential or not verify_password(password, credential.get("passwordHash", "")):
            raise Unauthenticated("Invalid credentials")
        profile = self.users.get(credential["userId"])
        if profile is None:
            raise Unauthenticated("Invalid credentials")
        return profile

    # -------- sessions --------

    def _session_payload(self, profile: UserProfile) -> Dict[str, Any]:
        now = datetime.now(timezone.utc)
        purged = self.identities.purge_expired_sessions(now)
        if purged:
            logger.info("Purged %d expired sessions", purged)

        token = generate_token()
        expires_at = now + timedelta(seconds=self.settings.SESSION_TTL_SECONDS)
        self.identities.save_session(token, {
            "token": token,
            "userId": profile.id,
            "expiresAt": expires_at.isoformat(),
        })
        return {
            "user": {"id": profile.id, "email": profile.email},
            "session": {
                "access_token": token,
                "token_type": "bearer",
                "expires_at": expires_at.isoformat(),
            },
            "profile": profile.to_json(),
            "isAdmin": profile.is_admin,
        }

    def validate_session(self, token: Optional[str]) -> UserProfile:
        """Resolve a bearer token to the profile it belongs to"""
        if not token or token == self.settings.PUBLIC_ANON_KEY:
            raise Unauthenticated("No access token provided")

        session = self.identities.get_session(token)
        if not session:
            raise Unauthenticated("Invalid session")

        if datetime.fromisoformat(session["expiresAt"]) <= datetime.now(timezone.utc):
            self.identities.delete_session(token)
            logger.warning("Expired session for user %s removed", session.get("userId"))
            raise Unauthenticated("Session expired")

        profile = self.users.get(session["userId"])
        if profile is None:
            raise Unauthenticated("Invalid session")
        return profile

    def signout(self, token: Optional[str]) -> None:
        if not token or not self.identities.get_session(token):
            raise Unauthenticated("Invalid session")
        self.identities.delete_session(token)


def ensure_admin(user: UserProfile) -> UserProfile:
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user


def ensure_self_or_admin(user: UserProfile, user_id: str) -> UserProfile:
    if user.id != user_id and not user.is_admin:
        raise Forbidden("Not allowed to access another user's records")
    return user
