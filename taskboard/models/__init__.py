from taskboard.models.base import Base
from taskboard.models.project import Project
from taskboard.models.task import Task, TaskStatus

__all__ = ["Base", "Project", "Task", "TaskStatus"]
