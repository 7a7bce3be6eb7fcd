# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskbook.logging_setup import LOG_FILE_NAME, _ConsoleNoiseFilter, setup_logging



def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter() -> None:
    f = _ConsoleNoiseFilter()
    assert f.filter(_record("taskbook.tasks.task_store", logging.DEBUG))
    assert f.filter(_record("taskbook", logging.INFO))
    assert not f.filter(_record("taskbookish", logging.INFO))
    assert not f.filter(_record("py.warnings", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.ERROR))
    assert not f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("urllib3", logging.ERROR))


@pytest.mark.usefixtures("restore_root_logger")
def test_console_only_without_log_dir() -> None:
    assert setup_logging(console_level=logging.WARNING) is None

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING


@pytest.mark.usefixtures("restore_root_logger")
def test_file_handler_writes_store_logs(tmp_path: Path) -> None:
    from taskbook.tasks.task_store import TaskStore

    log_file = setup_logging(log_dir=tmp_path / "logs")
    assert log_file == tmp_path / "logs" / LOG_FILE_NAME
    assert len(logging.getLogger().handlers) == 2

    store = TaskStore()
    task_id = store.add_task("Website", title="Hero copy")
    store.complete_task("Website", task_id)

    for h in logging.getLogger().handlers:
        h.flush()
    text = log_file.read_text("utf-8")
    assert "TaskStore ready" in text
    assert f"Task added id={task_id}" in text
    assert f"Task completed id={task_id}" in text


@pytest.mark.usefixtures("restore_root_logger")
def test_repeated_setup_does_not_duplicate_handlers(tmp_path: Path) -> None:
    setup_logging(log_dir=tmp_path)
    setup_logging(log_dir=tmp_path)
    assert len(logging.getLogger().handlers) == 2
