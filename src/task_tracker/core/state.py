# src/task_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings this state was built from (a Settings, or a stand-in in tests).
    settings: object

    # Initialized storage handle, shared by whichever action runs.
    task_store: TaskStore
