from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from taskboard.schemas.base import CamelModel, as_utc


class ProjectCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None

    @field_validator("description")
    @classmethod
    def _blank_description(cls, value: Optional[str]) -> str:
        return value or ""


class ProjectOut(CamelModel):
    id: int
    name: str
    description: str
    owner_id: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def _created_utc(cls, value: datetime) -> datetime:
        return as_utc(value)
