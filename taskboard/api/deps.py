from fastapi import Depends
from sqlalchemy.orm import Session

from taskboard.config import Settings, get_settings
from taskboard.db import get_session
from taskboard.services.insight import InsightService
from taskboard.services.store import ProjectStore, TaskStore


def get_project_store(db: Session = Depends(get_session)) -> ProjectStore:
    return ProjectStore(db)


def get_task_store(db: Session = Depends(get_session)) -> TaskStore:
    return TaskStore(db)


def get_insight_service(settings: Settings = Depends(get_settings)) -> InsightService:
    return InsightService(
        settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
    )
