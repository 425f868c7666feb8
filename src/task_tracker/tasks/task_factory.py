# src/task_tracker/tasks/task_factory.py

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .task_models import Task, TaskStatus, format_timestamp
from .validators import id_exists


def next_id(tasks: Sequence[Task]) -> int:
    """
    Next free id: 1 for an empty store, otherwise max + 1.

    The probe loop only matters for task lists built in memory; a loaded
    store has unique ids, so max + 1 is always free there.
    """
    if not tasks:
        return 1

    candidate = max(int(t.id) for t in tasks) + 1
    while id_exists(tasks, candidate):
        candidate += 1
    return candidate


def create_task(
    description: str,
    tasks: Sequence[Task],
    *,
    id: int | None = None,
    status: TaskStatus = TaskStatus.TODO,
    created_at: str | None = None,
    updated_at: str | None = None,
    now: datetime | None = None,
) -> Task:
    stamp = format_timestamp(now or datetime.now())
    return Task(
        id=next_id(tasks) if id is None else int(id),
        description=description,
        status=status,
        created_at=created_at or stamp,
        updated_at=updated_at or stamp,
    )
