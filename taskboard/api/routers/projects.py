"""
Projects API routes
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taskboard.api.deps import get_project_store
from taskboard.schemas.projects import ProjectCreate, ProjectOut
from taskboard.services.store import ProjectStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_failure(store: ProjectStore, message: str) -> JSONResponse:
    logger.exception(message)
    store.session.rollback()
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@router.get("", response_model=List[ProjectOut])
def list_projects(store: ProjectStore = Depends(get_project_store)):
    """List all projects, newest first"""
    try:
        projects = store.list()
    except SQLAlchemyError:
        return _store_failure(store, "Failed to get projects")
    return [ProjectOut.model_validate(p) for p in projects]


@router.post("", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
def create_project(data: ProjectCreate, store: ProjectStore = Depends(get_project_store)):
    """Create a new project"""
    try:
        project = store.create(data)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to create project")
    logger.info("Created project %s", project.id)
    return ProjectOut.model_validate(project)


@router.delete("/{project_id}")
def delete_project(project_id: int, store: ProjectStore = Depends(get_project_store)):
    """Delete a project and all of its tasks"""
    try:
        store.delete(project_id)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to delete project")
    logger.info("Deleted project %s", project_id)
    return {"message": "Project deleted"}
