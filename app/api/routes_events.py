"""
Event catalogue routes; reads are public, writes require an admin
"""

from typing import Optional

from fastapi import APIRouter, Depends

from app.schemas.event import EventCreate, EventUpdate
from app.schemas.user import UserProfile
from app.services.event_service import EventService
from app.services.kv_store import KeyValueStore, get_store
from app.utils.responses import success_response
from app.utils.security import get_current_user

router = APIRouter()

def get_event_service(store: KeyValueStore = Depends(get_store)) -> EventService:
    return EventService(store)

@router.get("")
async def list_events(
    city: Optional[str] = None,
    category: Optional[str] = None,
    events: EventService = Depends(get_event_service),
):
    """List events, optionally filtered by city and category"""
    return {"events": [e.to_json() for e in events.list(city=city, category=category)]}

@router.get("/{event_id}")
async def get_event(event_id: str, events: EventService = Depends(get_event_service)):
    return {"event": events.get(event_id).to_json()}

@router.post("", status_code=201)
async def create_event(
    body: EventCreate,
    user: UserProfile = Depends(get_current_user),
    events: EventService = Depends(get_event_service),
):
    return {"event": events.create(user, body).to_json()}

@router.put("/{event_id}")
async def update_event(
    event_id: str,
    body: EventUpdate,
    user: UserProfile = Depends(get_current_user),
    events: EventService = Depends(get_event_service),
):
    return {"event": events.update(user, event_id, body).to_json()}

@router.delete("/{event_id}")
async def delete_event(
    event_id: str,
    user: UserProfile = Depends(get_current_user),
    events: EventService = Depends(get_event_service),
):
    events.delete(user, event_id)
    return success_response(message="Event deleted", data={"id": event_id})
