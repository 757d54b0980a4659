"""
Event catalogue operations
"""

import logging
from typing import List, Optional

from app.schemas.event import Event, EventCreate, EventUpdate
from app.schemas.user import UserProfile
from app.services.auth_service import ensure_admin
from app.services.errors import NotFound
from app.services.kv_store import KeyValueStore
from app.services.repositories import EventRepo, apply_update, new_id, utc_now_iso

logger = logging.getLogger(__name__)


def _matches(value: str, wanted: Optional[str]) -> bool:
    return not wanted or value.strip().lower() == wanted.strip().lower()


class EventService:
    def __init__(self, store: KeyValueStore):
        self.events = EventRepo(store)

    def list(self, city: Optional[str] = None, category: Optional[str] = None) -> List[Event]:
        """All events, optionally narrowed to a city and/or category"""
        return [
            event for event in self.events.list()
            if _matches(event.city, city) and _matches(event.category, category)
        ]

    def get(self, event_id: str) -> Event:
        event = self.events.get(event_id)
        if event is None:
            raise NotFound.for_resource("Event", event_id)
        return event

    def create(self, user: UserProfile, data: EventCreate) -> Event:
        ensure_admin(user)
        event = Event(id=new_id("event"), created_at=utc_now_iso(), **data.model_dump())
        self.events.save(event)
        logger.info("Event %s created by %s", event.id, user.id)
        return event

    def update(self, user: UserProfile, event_id: str, data: EventUpdate) -> Event:
        ensure_admin(user)
        event = apply_update(self.get(event_id), data)
        return self.events.save(event)

    def delete(self, user: UserProfile, event_id: str) -> None:
        ensure_admin(user)
        self.get(event_id)
        self.events.delete(event_id)
        logger.info("Event %s deleted by %s", event_id, user.id)
