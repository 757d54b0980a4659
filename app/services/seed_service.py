"""
Demo catalogue seeding
"""

import logging
from typing import Any, Dict, List

from app.schemas.event import Event, EventCreate
from app.services.kv_store import KeyValueStore
from app.services.repositories import EventRepo, new_id, utc_now_iso

logger = logging.getLogger(__name__)

DEMO_EVENTS: List[Dict[str, Any]] = [
    {
        "title": "Sunburn Arena",
        "description": "An evening of electronic music under the stars.",
        "fullDescription": "Headline DJs, a full light show and food trucks across the arena grounds.",
        "category": "Music",
        "city": "Mumbai",
        "venue": "Jio World Garden",
        "venueAddress": "Bandra Kurla Complex, Mumbai",
        "date": "2025-12-20",
        "time": "18:00",
        "price": "₹1,499",
        "tags": ["edm", "live"],
        "features": ["Food court", "Parking"],
        "language": "English",
        "ageRestriction": "18+",
    },
    {
        "title": "Stand-up Saturday",
        "description": "Three comics, one mic.",
        "fullDescription": "A rotating line-up of the city's sharpest stand-up comedians.",
        "category": "Comedy",
        "city": "Pune",
        "venue": "The Comedy Loft",
        "venueAddress": "Koregaon Park, Pune",
        "date": "2025-11-15",
        "time": "20:00",
        "price": "₹499",
        "tags": ["comedy"],
        "features": ["Bar"],
        "language": "Hindi",
        "ageRestriction": "16+",
    },
    {
        "title": "Photography Challenge: Monsoon",
        "description": "Capture the monsoon in a single frame.",
        "fullDescription": "Open competition; entries are reviewed by a panel and winners exhibited.",
        "category": "Competition",
        "city": "Bengaluru",
        "venue": "Online",
        "date": "2025-09-30",
        "time": "23:59",
        "price": "Free",
        "tags": ["photography", "contest"],
        "features": ["Certificate", "Prizes"],
        "language": "English",
    },
    {
        "title": "Design Thinking Workshop",
        "description": "A hands-on workshop for product teams.",
        "fullDescription": "Learn to frame problems, prototype quickly and test with users.",
        "category": "Workshop",
        "city": "Delhi",
        "venue": "Innov8 Hub",
        "venueAddress": "Connaught Place, New Delhi",
        "date": "2025-10-05",
        "time": "10:00",
        "price": "₹2,000",
        "tags": ["design", "learning"],
        "features": ["Lunch", "Materials"],
        "language": "English",
    },
]


class SeedService:
    def __init__(self, store: KeyValueStore):
        self.events = EventRepo(store)

    def initialize(self) -> Dict[str, Any]:
        """Seed demo events only if the catalogue is empty"""
        if self.events.list():
            return {"message": "Data already initialized", "seeded": 0}

        now = utc_now_iso()
        for data in DEMO_EVENTS:
            fields = EventCreate.model_validate(data).model_dump()
            self.events.save(Event(id=new_id("event"), created_at=now, **fields))

        logger.info("Seeded %d demo events", len(DEMO_EVENTS))
        return {"message": "Demo data initialized", "seeded": len(DEMO_EVENTS)}
