# src/taskbook/__init__.py

"""In-memory task tracker: projects holding active/completed task buckets."""

from .tasks.task_models import Priority, ProjectStats, ProjectTask, Task
from .tasks.task_store import TaskStore

__all__ = ["Priority", "ProjectStats", "ProjectTask", "Task", "TaskStore"]
