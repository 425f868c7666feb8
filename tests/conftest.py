# tests/conftest.py

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_tracker.cli.bootstrap import create_initial_state
from task_tracker.core.state import AppState
from task_tracker.tasks.task_store import TaskStore

FIXED_NOW = datetime(2024, 5, 1, 9, 30, 15)


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and main().

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    storage_dir = tmp_path / "storage"
    return SimpleNamespace(
        app_name="task-cli-test",
        log_level="WARNING",
        log_file=None,
        storage_dir=storage_dir,
        data_file_name="data.json",
        data_path=storage_dir / "data.json",
        dir_mode=0o755,
        file_mode=0o644,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState with a real, initialized JSON store under tmp_path."""
    return create_initial_state(settings=settings)


@pytest.fixture()
def store(state: AppState) -> TaskStore:
    return state.task_store


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """main() reconfigures the root logger; put pytest's handlers back afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)
