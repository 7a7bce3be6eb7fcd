# tests/conftest.py

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterator
from datetime import datetime

import pytest

from taskbook.logging_setup import _ConsoleNoiseFilter
from taskbook.tasks.ids import TaskIdGenerator
from taskbook.tasks.task_store import TaskStore

ENV_VARS = (
    "TASKBOOK_APP_NAME",
    "TASKBOOK_LOG_LEVEL",
    "TASKBOOK_LOG_DIR",
    "TASKBOOK_THREAD_SAFE",
)


@pytest.fixture()
def fixed_now() -> datetime:
    """Mid-afternoon, so "yesterday" and "tomorrow" never straddle midnight."""
    return datetime(2026, 10, 19, 15, 30, 0)


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def ordered_store() -> TaskStore:
    """
    Store whose ids follow creation order.

    The fake clock ticks once per id, so ids share a length and sort
    lexicographically in the order tasks were added.
    """
    ticks = itertools.count(1_700_000_000_000)
    return TaskStore(id_generator=TaskIdGenerator(clock_ms=lambda: next(ticks)))


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    # Empty values mean "use the default"; monkeypatch restores the originals.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
    return monkeypatch


@pytest.fixture()
def restore_root_logger() -> Iterator[None]:
    """Undo setup_logging(): drop the handlers it installed and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        ):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)
