"""Request/response bodies for the /api/ai endpoints.

Tasks arrive already materialized by the client; they are coerced into
``TaskSnapshot`` here so the insight service can assume well-formed input.
"""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from taskboard.models.task import TaskStatus


class TaskSnapshot(BaseModel):
    title: str = Field(min_length=1)
    description: str = ""
    status: TaskStatus

    @field_validator("description", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @field_validator("status", mode="before")
    @classmethod
    def _lowercase_status(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


class SummarizeRequest(BaseModel):
    tasks: list[TaskSnapshot] = Field(default_factory=list)

    @field_validator("tasks", mode="before")
    @classmethod
    def _none_to_list(cls, value):
        return [] if value is None else value


class AskRequest(SummarizeRequest):
    question: str = ""


class SummaryResponse(BaseModel):
    summary: str


class AnswerResponse(BaseModel):
    answer: str
