"""
Booking-related Pydantic schemas
"""

from typing import Literal, Optional
from pydantic import EmailStr, Field

from app.schemas.common import CamelModel, StoredRecord, UpdateModel

BookingStatus = Literal["Confirmed", "Cancelled"]

class BookingCreate(CamelModel):
    """Checkout body"""
    event_id: str = Field(..., min_length=1)
    user_id: Optional[str] = None
    event_name: Optional[str] = None
    contact_name: str = Field(..., min_length=1)
    contact_email: EmailStr
    contact_phone: str = ""
    ticket_count: int = Field(..., ge=1)
    total_amount: str = Field(..., min_length=1)
    payment_method: str = ""

class BookingStatusUpdate(UpdateModel):
    status: BookingStatus

class Booking(StoredRecord):
    """Stored booking, kept under a user index key and an event index key"""
    user_id: str
    event_id: str
    event_name: str = ""
    contact_name: str
    contact_email: str
    contact_phone: str = ""
    ticket_count: int
    total_amount: str
    payment_method: str = ""
    status: BookingStatus = "Confirmed"
