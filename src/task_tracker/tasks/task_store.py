# src/task_tracker/tasks/task_store.py

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .errors import StorageError
from .task_models import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON file task store.

    The whole store is one JSON array:
    - every read loads and decodes the full file
    - every write replaces the full file (temp file + os.replace)

    There is no locking: concurrent CLI runs against the same file race,
    last writer wins.
    """

    def __init__(
        self,
        data_path: str | Path,
        *,
        dir_mode: int = 0o755,
        file_mode: int = 0o644,
    ) -> None:
        self._data_path = Path(data_path)
        self._dir_mode = dir_mode
        self._file_mode = file_mode

    # ---- setup ----

    def resolve_path(self) -> Path:
        return self._data_path

    def ensure_directory(self) -> None:
        directory = self._data_path.parent
        if directory.is_dir():
            return
        try:
            directory.mkdir(parents=True, exist_ok=True)
            # mkdir(mode=...) is masked by the umask; set the mode explicitly.
            os.chmod(directory, self._dir_mode)
        except OSError as exc:
            raise StorageError(f"Failed to create storage directory {directory}: {exc}") from exc
        logger.info("Created storage directory %s mode=%o", directory, self._dir_mode)

    def ensure_file(self) -> None:
        if self._data_path.is_file():
            return
        if self._data_path.exists():
            raise StorageError(
                f"Failed to create data file {self._data_path}: path exists and is not a regular file"
            )
        try:
            self._data_path.touch(exist_ok=True)
            os.chmod(self._data_path, self._file_mode)
        except OSError as exc:
            raise StorageError(f"Failed to create data file {self._data_path}: {exc}") from exc
        logger.info("Created data file %s mode=%o", self._data_path, self._file_mode)

    def initialize(self) -> None:
        """Create directory and data file if missing. Call once per process."""
        self.ensure_directory()
        self.ensure_file()
        logger.debug("TaskStore ready path=%s", self._data_path)

    # ---- public API ----

    def load_all(self) -> list[Task]:
        """
        Read and decode every task.

        Empty content and a JSON null both mean "no tasks yet".
        Anything else that is not an array of valid task records is an error.
        """
        try:
            raw = self._data_path.read_text("utf-8")
        except OSError as exc:
            raise StorageError(f"Failed to read {self._data_path}: {exc}") from exc

        if not raw.strip():
            return []

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Data file {self._data_path} is not valid JSON: {exc}") from exc

        if data is None:
            return []
        if not isinstance(data, list):
            raise StorageError(
                f"Data file {self._data_path} must contain a JSON array, got {type(data).__name__}"
            )

        tasks = [Task.from_dict(item) for item in data]

        seen: set[int] = set()
        for t in tasks:
            if t.id in seen:
                raise StorageError(f"Data file {self._data_path} has duplicate task id {t.id}")
            seen.add(t.id)

        logger.debug("Loaded %d tasks from %s", len(tasks), self._data_path)
        return tasks

    def save_all(self, tasks: Iterable[Task]) -> None:
        payload = [t.to_dict() for t in tasks]
        text = json.dumps(payload, ensure_ascii=False, indent=4)

        tmp = self._data_path.with_name(self._data_path.name + ".tmp")
        try:
            tmp.write_text(text, "utf-8")
            os.replace(tmp, self._data_path)
            os.chmod(self._data_path, self._file_mode)
        except OSError as exc:
            tmp.unlink(missing_ok=True)
            raise StorageError(f"Failed to write {self._data_path}: {exc}") from exc
        logger.debug("Saved %d tasks to %s", len(payload), self._data_path)
