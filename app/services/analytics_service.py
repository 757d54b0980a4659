"""
Back-office analytics, recomputed from the store on every call
"""

import re
from collections import Counter
from typing import Any, Dict

from app.schemas.user import UserProfile
from app.services.auth_service import ensure_admin
from app.services.kv_store import KeyValueStore
from app.services.repositories import BookingRepo, EventRepo, SubmissionRepo, UserRepo

RECENT_BOOKINGS_LIMIT = 5

_NON_NUMERIC = re.compile(r"[^0-9.\-]")


def parse_amount(amount: Any) -> float:
    """Parse a currency-formatted amount such as ``"₹1,050"``; garbage counts as 0"""
    if isinstance(amount, (int, float)):
        return float(amount)
    cleaned = _NON_NUMERIC.sub("", str(amount or ""))
    try:
        return float(cleaned)
    except ValueError:
        return 0.0


class AnalyticsService:
    def __init__(self, store: KeyValueStore):
        self.events = EventRepo(store)
        self.bookings = BookingRepo(store)
        self.submissions = SubmissionRepo(store)
        self.users = UserRepo(store)

    def summary(self, user: UserProfile) -> Dict[str, Any]:
        ensure_admin(user)

        events = self.events.list()
        bookings = self.bookings.list_all()
        submissions = self.submissions.list_all()
        users = self.users.list()

        confirmed = [b for b in bookings if b.status != "Cancelled"]
        recent = sorted(bookings, key=lambda b: b.created_at, reverse=True)[:RECENT_BOOKINGS_LIMIT]

        return {
            "totalEvents": len(events),
            "totalBookings": len(bookings),
            "totalSubmissions": len(submissions),
            "totalUsers": len(users),
            "totalRevenue": sum(parse_amount(b.total_amount) for b in confirmed),
            "totalTickets": sum(b.ticket_count for b in confirmed),
            "categoryStats": dict(Counter(e.category or "Uncategorized" for e in events)),
            "cityStats": dict(Counter(e.city or "Unknown" for e in events)),
            "submissionStats": dict(Counter(s.status for s in submissions)),
            "recentBookings": [b.to_json() for b in recent],
        }
