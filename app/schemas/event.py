"""
Event-related Pydantic schemas
"""

from typing import List, Optional
from pydantic import Field

from app.schemas.common import CamelModel, StoredRecord, UpdateModel

class EventFields(CamelModel):
    """Descriptive fields shared by event bodies and records"""
    title: str = Field(..., min_length=1)
    description: str = ""
    full_description: str = ""
    category: str = ""
    city: str = ""
    venue: str = ""
    venue_address: str = ""
    date: str = ""
    time: str = ""
    price: str = ""
    image: str = ""
    tags: List[str] = Field(default_factory=list)
    features: List[str] = Field(default_factory=list)
    language: str = ""
    age_restriction: str = ""

class EventCreate(EventFields):
    """Schema for creating an event"""

class EventUpdate(UpdateModel):
    """Schema for updating an event"""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    full_description: Optional[str] = None
    category: Optional[str] = None
    city: Optional[str] = None
    venue: Optional[str] = None
    venue_address: Optional[str] = None
    date: Optional[str] = None
    time: Optional[str] = None
    price: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    features: Optional[List[str]] = None
    language: Optional[str] = None
    age_restriction: Optional[str] = None

class Event(StoredRecord, EventFields):
    """Stored event"""
