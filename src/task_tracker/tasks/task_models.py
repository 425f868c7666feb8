# src/task_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from .errors import StorageError

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(moment: datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def _decode_id(raw: Any) -> int:
    """Stored ids are positive integers; numeric strings like "3" are accepted."""
    if isinstance(raw, bool):
        task_id = None
    elif isinstance(raw, int):
        task_id = raw
    elif isinstance(raw, str) and raw.strip().isdigit():
        task_id = int(raw.strip())
    else:
        task_id = None

    if task_id is None or task_id < 1:
        raise StorageError(f"Task record has an invalid id: {raw!r}")
    return task_id


class TaskStatus(StrEnum):
    """Task lifecycle status, stored on disk by value."""

    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"

    @classmethod
    def from_raw(cls, raw: str | None) -> TaskStatus:
        """Parse a stored or user-supplied status; raises ValueError when unknown."""
        if not raw:
            raise ValueError("status is required")
        return cls(str(raw).strip().lower())


@dataclass(slots=True)
class Task:
    id: int
    description: str
    status: TaskStatus
    created_at: str
    updated_at: str

    def to_dict(self) -> dict[str, Any]:
        """JSON shape of a task; key order is the order written to disk."""
        return {
            "id": self.id,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Decode one stored record.

        A record missing any field, with a non-integer id or an unknown
        status means the store is corrupt.
        """
        if not isinstance(raw, dict):
            raise StorageError(f"Task record is not an object: {raw!r}")

        missing = [k for k in ("id", "description", "status", "createdAt", "updatedAt") if k not in raw]
        if missing:
            raise StorageError(f"Task record is missing fields {missing}: {raw!r}")

        task_id = _decode_id(raw["id"])

        description = raw["description"]
        if not isinstance(description, str) or not description.strip():
            raise StorageError(f"Task {task_id} has an empty or invalid description: {description!r}")

        try:
            status = TaskStatus.from_raw(raw["status"])
        except ValueError as exc:
            raise StorageError(f"Task {task_id} has an unknown status: {raw['status']!r}") from exc

        return cls(
            id=task_id,
            description=description,
            status=status,
            created_at=str(raw["createdAt"]),
            updated_at=str(raw["updatedAt"]),
        )
