from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from taskboard.models.task import TaskStatus
from taskboard.schemas.base import CamelModel, as_utc


class TaskCreate(CamelModel):
    project_id: int
    title: str = Field(min_length=1)
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    position: int = 0

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("description")
    @classmethod
    def _blank_description(cls, value: Optional[str]) -> str:
        return value or ""


class TaskUpdate(CamelModel):
    """Partial update; position and project cannot be changed here."""

    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value


class TaskOut(CamelModel):
    id: int
    project_id: int
    title: str
    description: str
    status: TaskStatus
    position: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
