from __future__ import annotations

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from taskboard.errors import NotFoundError
from taskboard.models.project import Project
from taskboard.models.task import Task
from taskboard.schemas.projects import ProjectCreate
from taskboard.schemas.tasks import TaskCreate, TaskUpdate


class ProjectStore:
    """Persistence for projects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self) -> List[Project]:
        stmt = select(Project).order_by(Project.created_at.desc(), Project.id.desc())
        return list(self.session.scalars(stmt))

    def get(self, project_id: int) -> Project:
        project = self.session.get(Project, project_id)
        if not project:
            raise NotFoundError("Project not found")
        return project

    def create(self, data: ProjectCreate) -> Project:
        project = Project(name=data.name, description=data.description or "")
        self.session.add(project)
        self.session.commit()
        self.session.refresh(project)
        return project

    def delete(self, project_id: int) -> None:
        """Delete the project and every task that belongs to it."""

        project = self.get(project_id)
        self.session.execute(delete(Task).where(Task.project_id == project_id))
        self.session.delete(project)
        self.session.commit()


class TaskStore:
    """Persistence for tasks, scoped by project."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_project(self, project_id: int) -> List[Task]:
        stmt = select(Task).where(Task.project_id == project_id).order_by(Task.position.asc(), Task.id.asc())
        return list(self.session.scalars(stmt))

    def get(self, task_id: int) -> Task:
        task = self.session.get(Task, task_id)
        if not task:
            raise NotFoundError("Task not found")
        return task

    def create(self, data: TaskCreate) -> Task:
        # Plain existence check, a concurrent project delete can still orphan the task.
        ProjectStore(self.session).get(data.project_id)
        task = Task(
            project_id=data.project_id,
            title=data.title,
            description=data.description or "",
            status=data.status,
            position=data.position,
        )
        self.session.add(task)
        self.session.commit()
        self.session.refresh(task)
        return task

    def update(self, task_id: int, data: TaskUpdate) -> Task:
        task = self.get(task_id)
        if data.title is not None:
            task.title = data.title
        if data.description is not None:
            task.description = data.description
        if data.status is not None:
            task.status = data.status
        self.session.commit()
        self.session.refresh(task)
        return task

    def delete(self, task_id: int) -> None:
        task = self.get(task_id)
        self.session.delete(task)
        self.session.commit()
