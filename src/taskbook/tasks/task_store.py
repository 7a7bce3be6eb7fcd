# src/taskbook/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import threading
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING

from .helpers import priority_rank, start_of_today
from .ids import TaskIdGenerator
from .task_models import Priority, ProjectBuckets, ProjectStats, ProjectTask, Task

if TYPE_CHECKING:
    from ..config import Settings

logger = logging.getLogger(__name__)


class TaskStore:
    """
    In-memory task store.

    Layout:
    - project name -> ProjectBuckets(active=[...], completed=[...])
    - projects are created on first add_task and never removed
    - buckets keep insertion order; completing a task appends it to `completed`

    Unknown projects / task ids never raise: queries return [], zero stats
    or False. Callers cannot tell "no such project" from "nothing matched".

    Thread-safety:
    - every public method holds one instance-wide RLock (unless thread_safe=False)
    """

    def __init__(
        self,
        *,
        id_generator: TaskIdGenerator | None = None,
        thread_safe: bool = True,
    ) -> None:
        self._projects: dict[str, ProjectBuckets] = {}
        self._ids = id_generator or TaskIdGenerator()
        self._lock: contextlib.AbstractContextManager[object]
        self._lock = threading.RLock() if thread_safe else contextlib.nullcontext()
        logger.info("TaskStore ready thread_safe=%s", thread_safe)

    @classmethod
    def from_settings(cls, settings: Settings) -> TaskStore:
        return cls(thread_safe=settings.thread_safe)

    # ---- low-level helpers ----

    def _get_or_create_project(self, name: str) -> ProjectBuckets:
        buckets = self._projects.get(name)
        if buckets is None:
            buckets = ProjectBuckets()
            self._projects[name] = buckets
            logger.debug("Project created name=%r", name)
        return buckets

    def _iter_project_tasks(self, *, active_only: bool = False) -> list[ProjectTask]:
        out: list[ProjectTask] = []
        for project, buckets in self._projects.items():
            out.extend(ProjectTask.from_task(t, project) for t in buckets.active)
            if not active_only:
                out.extend(ProjectTask.from_task(t, project) for t in buckets.completed)
        return out

    @staticmethod
    def _priority_sort_key(t: ProjectTask) -> tuple[int, int, datetime, str]:
        # Priority desc, then due date asc (missing due dates last), then id asc.
        if t.due_date is None:
            return (-priority_rank(t.priority), 1, datetime.min, t.id)
        return (-priority_rank(t.priority), 0, t.due_date, t.id)

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._lock:
            return sum(len(b.active) + len(b.completed) for b in self._projects.values())

    def project_names(self) -> list[str]:
        with self._lock:
            return list(self._projects)

    def add_task(
        self,
        project_name: str,
        *,
        title: str,
        completed: bool = False,
        priority: Priority | str = Priority.MEDIUM,
        due_date: datetime | None = None,
    ) -> str:
        """
        Add a task and return its generated id.

        A task passed in with completed=True is accepted as-is and lands
        directly in the completed bucket.
        """
        prio = Priority.coerce(priority)

        with self._lock:
            task_id = self._ids.next_id()
            task = Task(
                id=task_id,
                title=title,
                completed=bool(completed),
                priority=prio,
                due_date=due_date,
            )
            buckets = self._get_or_create_project(project_name)
            if task.completed:
                buckets.completed.append(task)
            else:
                buckets.active.append(task)

        logger.debug(
            "Task added id=%s project=%r priority=%s completed=%s due_date=%s",
            task_id,
            project_name,
            prio.value,
            task.completed,
            due_date,
        )
        return task_id

    def get_tasks(self, project_name: str, completed: bool | None = None) -> list[Task]:
        """
        Tasks of one project as a fresh list.

        completed=True  -> completed bucket only
        completed=False -> active bucket only
        completed=None  -> active followed by completed
        """
        with self._lock:
            buckets = self._projects.get(project_name)
            if buckets is None:
                return []
            if completed is True:
                return list(buckets.completed)
            if completed is False:
                return list(buckets.active)
            return [*buckets.active, *buckets.completed]

    def get_all_tasks_by_priority(self) -> list[ProjectTask]:
        """
        Every task of every project (active and completed), highest priority first.

        Ties: earlier due date first, tasks without a due date after dated ones,
        then ascending id.
        """
        with self._lock:
            tasks = self._iter_project_tasks()
        tasks.sort(key=self._priority_sort_key)
        return tasks

    def complete_task(self, project_name: str, task_id: str) -> bool:
        with self._lock:
            buckets = self._projects.get(project_name)
            if buckets is None:
                logger.debug("complete_task: unknown project=%r id=%s", project_name, task_id)
                return False

            idx = next((i for i, t in enumerate(buckets.active) if t.id == task_id), None)
            if idx is None:
                # Already completed or never existed.
                logger.debug("complete_task: no active task project=%r id=%s", project_name, task_id)
                return False

            task = buckets.active.pop(idx)
            buckets.completed.append(replace(task, completed=True))

        logger.debug("Task completed id=%s project=%r", task_id, project_name)
        return True

    def get_project_stats(self, project_name: str) -> ProjectStats:
        with self._lock:
            buckets = self._projects.get(project_name)
            if buckets is None:
                return ProjectStats()

            all_tasks = [*buckets.active, *buckets.completed]
            completed = len(buckets.completed)

        by_priority = {Priority.HIGH: 0, Priority.MEDIUM: 0, Priority.LOW: 0}
        for t in all_tasks:
            by_priority[t.priority] += 1

        return ProjectStats(total=len(all_tasks), completed=completed, by_priority=by_priority)

    def get_overdue_tasks(self, *, now: datetime | None = None) -> list[ProjectTask]:
        """
        Active tasks across all projects whose due date falls before today.

        "Before today" means strictly earlier than local midnight of `now`
        (defaults to the current time). Completed and undated tasks never qualify.
        Earliest due date first.
        """
        cutoff = start_of_today(now)
        with self._lock:
            candidates = self._iter_project_tasks(active_only=True)

        out = [t for t in candidates if t.due_date is not None and t.due_date < cutoff]
        out.sort(key=lambda t: t.due_date)  # type: ignore[arg-type, return-value]
        return out
