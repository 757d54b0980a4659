"""
User profile routes
"""

from fastapi import APIRouter, Depends

from app.schemas.user import UserProfile, UserUpdate
from app.services.kv_store import KeyValueStore, get_store
from app.services.user_service import UserService
from app.utils.security import get_current_user

router = APIRouter()

def get_user_service(store: KeyValueStore = Depends(get_store)) -> UserService:
    return UserService(store)

@router.get("")
async def list_users(
    user: UserProfile = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    return {"users": [u.to_json() for u in users.list(user)]}

@router.put("/{user_id}")
async def update_user(
    user_id: str,
    body: UserUpdate,
    user: UserProfile = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
):
    return {"user": users.update(user, user_id, body).to_json()}
