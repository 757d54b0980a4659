"""
Admin back-office routes
"""

from fastapi import APIRouter, Depends

from app.schemas.user import UserProfile
from app.services.analytics_service import AnalyticsService
from app.services.kv_store import KeyValueStore, get_store
from app.utils.security import get_current_admin

router = APIRouter()

def get_analytics_service(store: KeyValueStore = Depends(get_store)) -> AnalyticsService:
    return AnalyticsService(store)

@router.get("/analytics")
async def get_analytics(
    admin: UserProfile = Depends(get_current_admin),
    analytics: AnalyticsService = Depends(get_analytics_service),
):
    """Counts, revenue and per-category/city tallies across the whole store"""
    return analytics.summary(admin)
