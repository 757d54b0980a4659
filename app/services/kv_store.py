"""
Key-value store adapters.

Records are kept as JSON values under string keys in a single table
(SQLAlchemy) or collection (Firestore). Secondary lookups are expressed as
composite keys and served by prefix scans.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import quote

from fastapi import Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import get_db
from app.models import KvEntry
from app.services.firebase_client import get_firestore_client

logger = logging.getLogger(__name__)


class KeyValueStore:
    """Interface shared by the storage backends"""

    def get(self, key: str) -> Optional[Any]:
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key: str) -> None:
        raise NotImplementedError

    def mget(self, keys: Iterable[str]) -> List[Optional[Any]]:
        raise NotImplementedError

    def mset(self, items: Dict[str, Any]) -> None:
        """Write every item or none of them"""
        raise NotImplementedError

    def mdel(self, keys: Iterable[str]) -> None:
        raise NotImplementedError

    def get_by_prefix(self, prefix: str) -> List[Any]:
        """Values whose key starts with ``prefix``, ordered by key"""
        raise NotImplementedError


# -------- SQLAlchemy backend --------

class SqlKeyValueStore(KeyValueStore):
    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[Any]:
        entry = self.db.get(KvEntry, key)
        return entry.value if entry else None

    def set(self, key: str, value: Any) -> None:
        self.mset({key: value})

    def delete(self, key: str) -> None:
        self.mdel([key])

    def mget(self, keys: Iterable[str]) -> List[Optional[Any]]:
        keys = list(keys)
        if not keys:
            return []
        rows = self.db.query(KvEntry).filter(KvEntry.key.in_(keys)).all()
        by_key = {row.key: row.value for row in rows}
        return [by_key.get(key) for key in keys]

    def mset(self, items: Dict[str, Any]) -> None:
        try:
            for key, value in items.items():
                self.db.merge(KvEntry(key=key, value=value))
            self.db.commit()
        except Exception:
            self.db.rollback()
            logger.warning("Rolled back write of %d keys", len(items))
            raise

    def mdel(self, keys: Iterable[str]) -> None:
        keys = list(keys)
        if not keys:
            return
        try:
            for key in keys:
                entry = self.db.get(KvEntry, key)
                if entry is not None:
                    self.db.delete(entry)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def get_by_prefix(self, prefix: str) -> List[Any]:
        rows = self.db.query(KvEntry).filter(
            KvEntry.key.startswith(prefix, autoescape=True)
        ).order_by(KvEntry.key).all()
        # SQLite LIKE ignores case
        return [row.value for row in rows if row.key.startswith(prefix)]


# -------- Firestore backend --------

class FirestoreKeyValueStore(KeyValueStore):
    """Documents in one collection. The raw key is kept in the ``key`` field;
    the document id is the percent-encoded key, since ``/`` is a path
    separator in Firestore.
    """

    def __init__(self, client, collection: str = "kv_store"):
        self.client = client
        self.collection = client.collection(collection)

    @staticmethod
    def doc_id(key: str) -> str:
        return quote(key, safe="")

    def _ref(self, key: str):
        return self.collection.document(self.doc_id(key))

    def get(self, key: str) -> Optional[Any]:
        doc = self._ref(key).get()
        return doc.to_dict().get("value") if doc.exists else None

    def set(self, key: str, value: Any) -> None:
        self._ref(key).set({"key": key, "value": value})

    def delete(self, key: str) -> None:
        self._ref(key).delete()

    def mget(self, keys: Iterable[str]) -> List[Optional[Any]]:
        keys = list(keys)
        if not keys:
            return []
        found = {}
        for doc in self.client.get_all([self._ref(key) for key in keys]):
            if doc.exists:
                data = doc.to_dict()
                found[data["key"]] = data.get("value")
        return [found.get(key) for key in keys]

    def mset(self, items: Dict[str, Any]) -> None:
        batch = self.client.batch()
        for key, value in items.items():
            batch.set(self._ref(key), {"key": key, "value": value})
        batch.commit()

    def mdel(self, keys: Iterable[str]) -> None:
        batch = self.client.batch()
        for key in keys:
            batch.delete(self._ref(key))
        batch.commit()

    def get_by_prefix(self, prefix: str) -> List[Any]:
        docs = (
            self.collection.where("key", ">=", prefix)
            .where("key", "<", prefix + "\uf8ff")
            .order_by("key")
            .stream()
        )
        return [doc.to_dict().get("value") for doc in docs]


def use_firestore() -> bool:
    return settings.USE_FIREBASE is True


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """FastAPI dependency selecting the configured backend"""
    if use_firestore():
        return FirestoreKeyValueStore(get_firestore_client(), settings.FIRESTORE_COLLECTION)
    return SqlKeyValueStore(db)
