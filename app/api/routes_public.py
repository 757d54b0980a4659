"""
Public API routes - no authentication required
"""

from fastapi import APIRouter, Depends

from app.services.kv_store import KeyValueStore, get_store
from app.services.seed_service import SeedService
from app.utils.responses import success_response

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.post("/init")
async def initialize_data(store: KeyValueStore = Depends(get_store)):
    """Seed the demo catalogue when no events exist yet"""
    result = SeedService(store).initialize()
    return success_response(message=result["message"], data={"seeded": result["seeded"]})
