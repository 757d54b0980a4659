"""
User profile administration
"""

from typing import List

from app.schemas.user import UserProfile, UserUpdate
from app.services.auth_service import ensure_admin, ensure_self_or_admin
from app.services.errors import Forbidden, NotFound
from app.services.kv_store import KeyValueStore
from app.services.repositories import UserRepo, apply_update


class UserService:
    def __init__(self, store: KeyValueStore):
        self.users = UserRepo(store)

    def list(self, user: UserProfile) -> List[UserProfile]:
        ensure_admin(user)
        return self.users.list()

    def update(self, user: UserProfile, user_id: str, data: UserUpdate) -> UserProfile:
        ensure_self_or_admin(user, user_id)
        if data.role is not None and not user.is_admin:
            raise Forbidden("Only admins can change roles")

        profile = self.users.get(user_id)
        if profile is None:
            raise NotFound.for_resource("User", user_id)
        return self.users.save(apply_update(profile, data))
