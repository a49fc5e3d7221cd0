"""
Tasks API routes
"""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from taskboard.api.deps import get_task_store
from taskboard.schemas.tasks import TaskCreate, TaskOut, TaskUpdate
from taskboard.services.store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()


def _store_failure(store: TaskStore, message: str) -> JSONResponse:
    logger.exception(message)
    store.session.rollback()
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": message})


@router.get("/{project_id}", response_model=List[TaskOut])
def list_tasks(project_id: int, store: TaskStore = Depends(get_task_store)):
    """List tasks of a project ordered by position"""
    try:
        tasks = store.list_for_project(project_id)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to get tasks")
    return [TaskOut.model_validate(t) for t in tasks]


@router.post("", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(data: TaskCreate, store: TaskStore = Depends(get_task_store)):
    """Create a task inside an existing project"""
    try:
        task = store.create(data)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to create task")
    return TaskOut.model_validate(task)


@router.put("/{task_id}", response_model=TaskOut)
def update_task(task_id: int, data: TaskUpdate, store: TaskStore = Depends(get_task_store)):
    """Update title, description or status of a task"""
    try:
        task = store.update(task_id, data)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to update task")
    return TaskOut.model_validate(task)


@router.delete("/{task_id}")
def delete_task(task_id: int, store: TaskStore = Depends(get_task_store)):
    try:
        store.delete(task_id)
    except SQLAlchemyError:
        return _store_failure(store, "Failed to delete task")
    return {"message": "Task deleted"}
