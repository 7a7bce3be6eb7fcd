# src/taskbook/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """Task priority. Ordering is defined by helpers.priority_rank, not by value."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def coerce(cls, raw: Priority | str) -> Priority:
        # Raises ValueError for anything outside low/medium/high.
        if isinstance(raw, cls):
            return raw
        return cls(str(raw).strip().lower())


@dataclass(frozen=True, slots=True)
class Task:
    id: str
    title: str
    completed: bool
    priority: Priority
    due_date: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "completed": self.completed,
            "priority": self.priority.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
        }


@dataclass(frozen=True, slots=True)
class ProjectTask(Task):
    """A Task annotated with the name of the project that owns it."""

    project: str = ""

    @classmethod
    def from_task(cls, task: Task, project: str) -> ProjectTask:
        return cls(
            id=task.id,
            title=task.title,
            completed=task.completed,
            priority=task.priority,
            due_date=task.due_date,
            project=project,
        )

    def to_dict(self) -> dict[str, Any]:
        out = Task.to_dict(self)
        out["project"] = self.project
        return out


def _zero_counts() -> dict[Priority, int]:
    return {Priority.HIGH: 0, Priority.MEDIUM: 0, Priority.LOW: 0}


@dataclass(frozen=True, slots=True)
class ProjectStats:
    total: int = 0
    completed: int = 0
    by_priority: dict[Priority, int] = field(default_factory=_zero_counts)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "completed": self.completed,
            "by_priority": {p.value: n for p, n in self.by_priority.items()},
        }


@dataclass(slots=True)
class ProjectBuckets:
    """Internal per-project storage: insertion-ordered active and completed lists."""

    active: list[Task] = field(default_factory=list)
    completed: list[Task] = field(default_factory=list)
