# src/task_tracker/tasks/validators.py

from __future__ import annotations

from collections.abc import Sequence

from .errors import InvalidDescriptionError, InvalidStatusError, InvalidTaskIdError, TaskNotFoundError
from .task_models import Task, TaskStatus


def require_description(text: str | None) -> str:
    """Return the stripped description, or fail if nothing is left."""
    cleaned = (text or "").strip()
    if not cleaned:
        raise InvalidDescriptionError("Task description is required")
    return cleaned


def parse_task_id(raw: str | int | None) -> int:
    if raw is None or str(raw).strip() == "":
        raise InvalidTaskIdError("Task ID is required")
    try:
        task_id = int(str(raw).strip())
    except ValueError:
        raise InvalidTaskIdError(f"Invalid task ID: {raw}") from None
    if task_id < 1:
        raise InvalidTaskIdError(f"Invalid task ID: {raw}")
    return task_id


def parse_status(raw: str | None) -> TaskStatus:
    try:
        return TaskStatus.from_raw(raw)
    except ValueError:
        allowed = ", ".join(s.value for s in TaskStatus)
        raise InvalidStatusError(f"Invalid status: {raw} (expected one of: {allowed})") from None


def id_exists(tasks: Sequence[Task], task_id: int | str) -> bool:
    # Compared as strings so "1" and 1 are the same id.
    wanted = str(task_id)
    return any(str(t.id) == wanted for t in tasks)


def require_id_exists(tasks: Sequence[Task], task_id: int | str) -> Task:
    wanted = str(task_id)
    for t in tasks:
        if str(t.id) == wanted:
            return t
    raise TaskNotFoundError(task_id)
