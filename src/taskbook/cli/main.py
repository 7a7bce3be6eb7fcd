# src/taskbook/cli/main.py

"""
Demo entrypoint (`taskbook-demo`).

Initializes logging from settings, builds a fresh TaskStore and walks through
the public API once, printing each result. Nothing is persisted.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from ..config import Settings, get_settings
from ..logging_setup import setup_logging
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)

Printer = Callable[[str], None]


def _dump(value: Any) -> str:
    if isinstance(value, list):
        value = [v.to_dict() for v in value]
    elif hasattr(value, "to_dict"):
        value = value.to_dict()
    return json.dumps(value, ensure_ascii=False, indent=2)


def run_demo(store: TaskStore, *, emit: Printer = print, now: datetime | None = None) -> str:
    """Exercise every store operation once; returns the id of the demo task."""
    if now is None:
        now = datetime.now()

    task_id = store.add_task(
        "Website",
        title="Hero copy",
        completed=False,
        priority="high",
        due_date=now + timedelta(days=1),
    )

    emit(f"Website tasks: {_dump(store.get_tasks('Website'))}")
    emit(f"All tasks by priority: {_dump(store.get_all_tasks_by_priority())}")

    store.complete_task("Website", task_id)
    emit(f"Website after completing {task_id}: {_dump(store.get_tasks('Website'))}")

    emit(f"Website stats: {_dump(store.get_project_stats('Website'))}")
    emit(f"Overdue tasks: {_dump(store.get_overdue_tasks(now=now))}")
    return task_id


def main(settings: Settings | None = None) -> None:
    if settings is None:
        settings = get_settings()

    console_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s demo...", settings.app_name)
    store = TaskStore.from_settings(settings)
    try:
        run_demo(store)
    except Exception:
        logger.exception("Demo failed.")
        raise
    logger.info("Done. %d task(s) in %d project(s).", store.count_tasks(), len(store.project_names()))


if __name__ == "__main__":
    main()
