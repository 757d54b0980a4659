"""
Key-value row model
"""

from datetime import datetime
from sqlalchemy import Column, String, DateTime, JSON

from app.core.db import Base

class KvEntry(Base):
    __tablename__ = "kv_store"
    
    key = Column(String(512), primary_key=True)
    value = Column(JSON, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
