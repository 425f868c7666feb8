# src/task_tracker/tasks/errors.py

from __future__ import annotations


class TaskTrackerError(Exception):
    """Base class for every error the CLI reports with a non-zero exit."""


class StorageError(TaskTrackerError):
    """The data file could not be created, read, written or decoded."""


class ValidationError(TaskTrackerError):
    pass


class InvalidDescriptionError(ValidationError):
    pass


class InvalidTaskIdError(ValidationError):
    pass


class InvalidStatusError(ValidationError):
    pass


class TaskNotFoundError(ValidationError):
    def __init__(self, task_id: int | str) -> None:
        super().__init__(f"Task not found (ID: {task_id})")
        self.task_id = task_id


class UsageError(TaskTrackerError):
    """Unknown command or wrong arguments for a known one."""
