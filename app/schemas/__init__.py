"""
Pydantic schemas package
"""

from .common import *
from .event import *
from .booking import *
from .submission import *
from .user import *

__all__ = [
    "StandardResponse",
    "ErrorResponse",
    "EventCreate",
    "EventUpdate",
    "Event",
    "BookingCreate",
    "BookingStatusUpdate",
    "Booking",
    "SubmissionCreate",
    "SubmissionStatusUpdate",
    "Submission",
    "UserProfile",
    "UserUpdate",
    "SignupRequest",
    "SigninRequest",
]
