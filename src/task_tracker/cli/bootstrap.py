# src/task_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- builds the TaskStore and creates the storage directory and data file,
- wires both into AppState, which is handed to the command that runs.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _data_path(settings) -> Path:
    data_path = getattr(settings, "data_path", None)
    if data_path is not None:
        return Path(data_path)
    return Path(settings.storage_dir) / settings.data_file_name


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    Raises StorageError if the storage directory or data file cannot be created.
    """
    if settings is None:
        settings = get_settings()

    store = TaskStore(
        _data_path(settings),
        dir_mode=settings.dir_mode,
        file_mode=settings.file_mode,
    )
    store.initialize()
    logger.debug("Storage initialized at %s", store.resolve_path())

    return AppState(settings=settings, task_store=store)
