# src/task_tracker/tasks/task_api.py

"""
Task actions.

Every mutating action is one read-modify-write cycle against the store:
validate -> load -> transform -> save. Nothing is written when validation fails.
"""

from __future__ import annotations

import logging
from datetime import datetime

from .task_factory import create_task
from .task_models import Task, TaskStatus, format_timestamp
from .task_store import TaskStore
from .validators import parse_status, parse_task_id, require_description, require_id_exists

logger = logging.getLogger(__name__)


def add_task(store: TaskStore, description: str | None, *, now: datetime | None = None) -> Task:
    text = require_description(description)

    tasks = store.load_all()
    task = create_task(text, tasks, now=now)
    tasks.append(task)
    store.save_all(tasks)

    logger.info("Task added id=%s", task.id)
    return task


def update_task(
    store: TaskStore,
    task_id: int | str | None,
    description: str | None,
    *,
    now: datetime | None = None,
) -> Task:
    tid = parse_task_id(task_id)
    text = require_description(description)

    tasks = store.load_all()
    task = require_id_exists(tasks, tid)
    task.description = text
    task.updated_at = format_timestamp(now or datetime.now())
    store.save_all(tasks)

    logger.info("Task updated id=%s", task.id)
    return task


def delete_task(store: TaskStore, task_id: int | str | None) -> Task:
    tid = parse_task_id(task_id)

    tasks = store.load_all()
    task = require_id_exists(tasks, tid)
    remaining = [t for t in tasks if t is not task]
    store.save_all(remaining)

    logger.info("Task deleted id=%s remaining=%d", task.id, len(remaining))
    return task


def set_status(
    store: TaskStore,
    task_id: int | str | None,
    status: TaskStatus,
    *,
    now: datetime | None = None,
) -> Task:
    tid = parse_task_id(task_id)

    tasks = store.load_all()
    task = require_id_exists(tasks, tid)
    task.status = status
    task.updated_at = format_timestamp(now or datetime.now())
    store.save_all(tasks)

    logger.info("Task status changed id=%s status=%s", task.id, status.value)
    return task


def mark_in_progress(store: TaskStore, task_id: int | str | None, *, now: datetime | None = None) -> Task:
    return set_status(store, task_id, TaskStatus.IN_PROGRESS, now=now)


def mark_done(store: TaskStore, task_id: int | str | None, *, now: datetime | None = None) -> Task:
    return set_status(store, task_id, TaskStatus.DONE, now=now)


def list_tasks(store: TaskStore, status: TaskStatus | str | None = None) -> list[Task]:
    """All tasks in store order, or only those with the given status."""
    wanted = None if status is None else parse_status(status)
    tasks = store.load_all()
    if wanted is None:
        return tasks
    return [t for t in tasks if t.status == wanted]
