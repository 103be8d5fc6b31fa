"""SQLAlchemy models — portable across SQLite and PostgreSQL."""

import time
import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, String, Text

from echoday.database import Base


def utcnow():
    return datetime.now(timezone.utc)


def new_webhook_id():
    return f"webhook_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


# ── Key/Value blob ──────────────────────────────────────
class KeyValueEntry(Base):
    """One named blob of serialized application state."""

    __tablename__ = "kv_store"

    key = Column(String(200), primary_key=True)
    value = Column(Text, nullable=False, default="")
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)
