"""
Ticket booking operations
"""

import logging
from typing import List

from app.schemas.booking import Booking, BookingCreate, BookingStatusUpdate
from app.schemas.user import UserProfile
from app.services.auth_service import ensure_admin, ensure_self_or_admin
from app.services.errors import Forbidden, NotFound
from app.services.kv_store import KeyValueStore
from app.services.repositories import BookingRepo, EventRepo, apply_update, new_id, utc_now_iso

logger = logging.getLogger(__name__)


class BookingService:
    def __init__(self, store: KeyValueStore):
        self.bookings = BookingRepo(store)
        self.events = EventRepo(store)

    def create(self, user: UserProfile, data: BookingCreate) -> Booking:
        """Record a checkout for ``user`` (admins may book on behalf of others)"""
        owner_id = data.user_id or user.id
        ensure_self_or_admin(user, owner_id)

        event = self.events.get(data.event_id)
        if event is None:
            raise NotFound.for_resource("Event", data.event_id)

        booking = Booking(
            id=new_id("booking"),
            created_at=utc_now_iso(),
            user_id=owner_id,
            event_id=event.id,
            event_name=data.event_name or event.title,
            contact_name=data.contact_name,
            contact_email=data.contact_email,
            contact_phone=data.contact_phone,
            ticket_count=data.ticket_count,
            total_amount=data.total_amount,
            payment_method=data.payment_method,
            status="Confirmed",
        )
        self.bookings.save(booking)
        logger.info("Booking %s created for event %s (%d tickets)", booking.id, event.id, booking.ticket_count)
        return booking

    def list_for_user(self, user: UserProfile, user_id: str) -> List[Booking]:
        ensure_self_or_admin(user, user_id)
        return self.bookings.list_for_user(user_id)

    def list_for_event(self, user: UserProfile, event_id: str) -> List[Booking]:
        ensure_admin(user)
        return self.bookings.list_for_event(event_id)

    def list_all(self, user: UserProfile) -> List[Booking]:
        ensure_admin(user)
        return self.bookings.list_all()

    def update_status(self, user: UserProfile, booking_id: str, data: BookingStatusUpdate) -> Booking:
        """Admins set any status; owners may only cancel their own booking"""
        booking = self.bookings.get(booking_id)
        if booking is None:
            raise NotFound.for_resource("Booking", booking_id)

        if not user.is_admin:
            if booking.user_id != user.id:
                raise Forbidden("Not allowed to modify another user's booking")
            if data.status != "Cancelled":
                raise Forbidden("Only admins can change a booking to that status")

        updated = apply_update(booking, data)
        self.bookings.save(updated)
        logger.info("Booking %s status %s -> %s", booking_id, booking.status, updated.status)
        return updated
