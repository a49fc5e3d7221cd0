import uuid

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskboard.models.base import Base, CreatedAtMixin


def _new_owner_id() -> str:
    return uuid.uuid4().hex


class Project(CreatedAtMixin, Base):
    """Board project grouping a set of tasks."""

    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    # No auth yet: every project gets a fresh opaque owner reference.
    owner_id: Mapped[str] = mapped_column(String(64), default=_new_owner_id, nullable=False)
