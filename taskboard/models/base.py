from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite keeps no offset so none is stored."""

    return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
    """Base declarative class for SQLAlchemy models."""


class CreatedAtMixin:
    """Mixin providing an immutable creation timestamp."""

    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
