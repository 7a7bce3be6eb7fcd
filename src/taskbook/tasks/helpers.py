# src/taskbook/tasks/helpers.py

from __future__ import annotations

from datetime import datetime

from .task_models import Priority

# Higher rank sorts first in the priority view.
_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 3,
    Priority.MEDIUM: 2,
    Priority.LOW: 1,
}


def priority_rank(priority: Priority | str) -> int:
    return _PRIORITY_RANK[Priority.coerce(priority)]


def start_of_today(now: datetime | None = None) -> datetime:
    """Midnight (local, naive) of the calendar day containing `now`."""
    if now is None:
        now = datetime.now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)
