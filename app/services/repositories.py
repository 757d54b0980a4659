"""
Repository layer mapping records onto composite keys in the key-value store.
"""

from __future__ import annotations

import secrets
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, TypeVar

from app.schemas.booking import Booking
from app.schemas.common import StoredRecord, UpdateModel
from app.schemas.event import Event
from app.schemas.submission import Submission
from app.schemas.user import UserProfile
from app.services.kv_store import KeyValueStore

R = TypeVar("R", bound=StoredRecord)


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def new_id(tag: str) -> str:
    """``<tag>_<epoch millis>_<random hex>``"""
    return f"{tag}_{int(time.time() * 1000)}_{secrets.token_hex(5)}"


def apply_update(record: R, update: UpdateModel) -> R:
    """Merge the fields set on ``update`` onto ``record``.

    ``id`` and ``created_at`` are never touched; ``updated_at`` is stamped
    and ``version`` bumped.
    """
    changes = update.changes()
    changes.pop("id", None)
    changes.pop("created_at", None)
    changes["updated_at"] = utc_now_iso()
    changes["version"] = record.version + 1
    return record.model_validate({**record.model_dump(), **changes})


def _load(model: Type[R], values: List[Any]) -> List[R]:
    return [model.model_validate(value) for value in values if value is not None]


# -------- User repository --------

class UserRepo:
    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def key(user_id: str) -> str:
        return f"user:{user_id}"

    def get(self, user_id: str) -> Optional[UserProfile]:
        value = self.store.get(self.key(user_id))
        return UserProfile.model_validate(value) if value else None

    def save(self, profile: UserProfile) -> UserProfile:
        self.store.set(self.key(profile.id), profile.to_json())
        return profile

    def list(self) -> List[UserProfile]:
        return _load(UserProfile, self.store.get_by_prefix("user:"))


# -------- Identity repository (credentials and sessions) --------

class IdentityRepo:
    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def credential_key(email: str) -> str:
        return f"auth:email:{email.strip().lower()}"

    @staticmethod
    def session_key(token: str) -> str:
        return f"session:{token}"

    def get_credential(self, email: str) -> Optional[Dict[str, Any]]:
        return self.store.get(self.credential_key(email))

    def create_account(self, credential: Dict[str, Any], profile: UserProfile) -> None:
        """Credential and profile land together"""
        self.store.mset({
            self.credential_key(credential["email"]): credential,
            UserRepo.key(profile.id): profile.to_json(),
        })

    def get_session(self, token: str) -> Optional[Dict[str, Any]]:
        return self.store.get(self.session_key(token))

    def save_session(self, token: str, session: Dict[str, Any]) -> None:
        self.store.set(self.session_key(token), session)

    def delete_session(self, token: str) -> None:
        self.store.delete(self.session_key(token))

    def purge_expired_sessions(self, now: datetime) -> int:
        """Drop every session whose ``expiresAt`` is in the past; returns the count"""
        expired = []
        for session in self.store.get_by_prefix("session:"):
            token = session.get("token")
            expires_at = session.get("expiresAt")
            if not token or not expires_at:
                continue
            if datetime.fromisoformat(expires_at) <= now:
                expired.append(self.session_key(token))
        if expired:
            self.store.mdel(expired)
        return len(expired)


# -------- Event repository --------

class EventRepo:
    def __init__(self, store: KeyValueStore):
        self.store = store

    @staticmethod
    def key(event_id: str) -> str:
        return f"event:{event_id}"

    def get(self, event_id: str) -> Optional[Event]:
        value = self.store.get(self.key(event_id))
        return Event.model_validate(value) if value else None

    def save(self, event: Event) -> Event:
        self.store.set(self.key(event.id), event.to_json())
        return event

    def delete(self, event_id: str) -> None:
        self.store.delete(self.key(event_id))

    def list(self) -> List[Event]:
        return _load(Event, self.store.get_by_prefix("event:"))


# -------- Dual-indexed repositories (bookings, submissions) --------

class DualIndexRepo:
    """Records stored twice: under ``<kind>:user:<uid>:<id>`` and
    ``<kind>:event:<eid>:<id>``. Both copies are written in one ``mset``.
    """

    kind = ""
    model: Type[StoredRecord] = StoredRecord

    def __init__(self, store: KeyValueStore):
        self.store = store

    def event_id_of(self, record) -> str:
        raise NotImplementedError

    def user_key(self, user_id: str, record_id: str) -> str:
        return f"{self.kind}:user:{user_id}:{record_id}"

    def event_key(self, event_id: str, record_id: str) -> str:
        return f"{self.kind}:event:{event_id}:{record_id}"

    def keys_for(self, record) -> List[str]:
        return [
            self.user_key(record.user_id, record.id),
            self.event_key(self.event_id_of(record), record.id),
        ]

    def save(self, record):
        value = record.to_json()
        self.store.mset({key: value for key in self.keys_for(record)})
        return record

    def list_all(self) -> list:
        # every record has exactly one user-indexed copy
        return _load(self.model, self.store.get_by_prefix(f"{self.kind}:user:"))

    def list_for_user(self, user_id: str) -> list:
        return _load(self.model, self.store.get_by_prefix(f"{self.kind}:user:{user_id}:"))

    def list_for_event(self, event_id: str) -> list:
        return _load(self.model, self.store.get_by_prefix(f"{self.kind}:event:{event_id}:"))

    def get(self, record_id: str):
        for record in self.list_all():
            if record.id == record_id:
                return record
        return None

    def get_by_user_index(self, user_id: str, record_id: str):
        value = self.store.get(self.user_key(user_id, record_id))
        return self.model.model_validate(value) if value else None

    def get_by_event_index(self, event_id: str, record_id: str):
        value = self.store.get(self.event_key(event_id, record_id))
        return self.model.model_validate(value) if value else None


class BookingRepo(DualIndexRepo):
    kind = "booking"
    model = Booking

    def event_id_of(self, record: Booking) -> str:
        return record.event_id


class SubmissionRepo(DualIndexRepo):
    kind = "submission"
    model = Submission

    def event_id_of(self, record: Submission) -> str:
        return record.competition_id
