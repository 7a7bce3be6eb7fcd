# src/taskbook/tasks/__init__.py

from .helpers import priority_rank, start_of_today
from .ids import TaskIdGenerator
from .task_models import Priority, ProjectStats, ProjectTask, Task
from .task_store import TaskStore

__all__ = [
    "Priority",
    "ProjectStats",
    "ProjectTask",
    "Task",
    "TaskIdGenerator",
    "TaskStore",
    "priority_rank",
    "start_of_today",
]
