"""Pytest configuration and fixtures."""

from __future__ import annotations

from typing import Iterator, List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from taskboard.api.deps import get_insight_service
from taskboard.db import get_session
from taskboard.errors import GenerationError
from taskboard.main import app
from taskboard.models.base import Base
from taskboard.models.task import TaskStatus
from taskboard.schemas.insight import TaskSnapshot
from taskboard.services.insight import InsightService


class FakeGenerator:
    """Stands in for GeminiClient and records the prompts it receives."""

    def __init__(self, reply: str = "Generated insight", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []
        self.keys: List[str] = []

    def __call__(self, api_key: str) -> "FakeGenerator":
        self.keys.append(api_key)
        return self

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def failing_generator() -> FakeGenerator:
    return FakeGenerator(error=GenerationError("connection reset"))


@pytest.fixture
def sample_tasks() -> List[TaskSnapshot]:
    """Eight tasks: five todo, two in progress, one done."""
    return [
        TaskSnapshot(title="Write docs", description="API reference", status=TaskStatus.TODO),
        TaskSnapshot(title="Fix bug", description="", status=TaskStatus.IN_PROGRESS),
        TaskSnapshot(title="Ship v1", description="Release build", status=TaskStatus.DONE),
        TaskSnapshot(title="Design logo", status=TaskStatus.TODO),
        TaskSnapshot(title="Set up CI", status=TaskStatus.TODO),
        TaskSnapshot(title="Write tests", status=TaskStatus.IN_PROGRESS),
        TaskSnapshot(title="Plan sprint", status=TaskStatus.TODO),
        TaskSnapshot(title="Review PRs", status=TaskStatus.TODO),
    ]


@pytest.fixture
def db_session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session: Session) -> Iterator[TestClient]:
    """Test client on an in-memory database with AI insights disabled."""

    def _get_session():
        yield db_session

    app.dependency_overrides[get_session] = _get_session
    app.dependency_overrides[get_insight_service] = lambda: InsightService(None)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
