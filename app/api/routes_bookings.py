"""
Booking routes
"""

from fastapi import APIRouter, Depends

from app.schemas.booking import BookingCreate, BookingStatusUpdate
from app.schemas.user import UserProfile
from app.services.booking_service import BookingService
from app.services.kv_store import KeyValueStore, get_store
from app.utils.security import get_current_user

router = APIRouter()

def get_booking_service(store: KeyValueStore = Depends(get_store)) -> BookingService:
    return BookingService(store)

@router.get("")
async def list_bookings(
    user: UserProfile = Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    """All bookings (admin)"""
    return {"bookings": [b.to_json() for b in bookings.list_all(user)]}

@router.get("/user/{user_id}")
async def list_user_bookings(
    user_id: str,
    user: UserProfile = Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    return {"bookings": [b.to_json() for b in bookings.list_for_user(user, user_id)]}

@router.get("/event/{event_id}")
async def list_event_bookings(
    event_id: str,
    user: UserProfile = Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    return {"bookings": [b.to_json() for b in bookings.list_for_event(user, event_id)]}

@router.post("", status_code=201)
async def create_booking(
    body: BookingCreate,
    user: UserProfile = Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    return {"booking": bookings.create(user, body).to_json()}

@router.put("/{booking_id}")
async def update_booking_status(
    booking_id: str,
    body: BookingStatusUpdate,
    user: UserProfile = Depends(get_current_user),
    bookings: BookingService = Depends(get_booking_service),
):
    return {"booking": bookings.update_status(user, booking_id, body).to_json()}
