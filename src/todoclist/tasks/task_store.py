# src/todoclist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Callable
from pathlib import Path

from .errors import AlreadyExistsError, NotInitializedError, StorageError, TaskParseError
from .task_models import TaskList

logger = logging.getLogger(__name__)

InitListener = Callable[[Path], None]


class TaskStore:
    """
    JSON-file task list store.

    The whole list is the unit of persistence:
    - init creates the file exclusively (never overwrites)
    - load reads and validates the whole file
    - save rewrites the whole file through a temp file + os.replace

    No locking: two processes saving at the same time can lose an update.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.exists()

    def init(self) -> TaskList:
        task_list = TaskList()
        try:
            with open(self._path, "x", encoding="utf-8") as f:
                f.write(task_list.to_json())
        except FileExistsError as e:
            raise AlreadyExistsError(f'"{self._path.name}" already exists!') from e
        except OSError as e:
            raise StorageError(f"cannot create {self._path}: {e.strerror or e}") from e
        logger.info("Initialized task list path=%s", self._path)
        return task_list

    def load(self, *, auto_init: bool = False, on_init: InitListener | None = None) -> TaskList:
        if not self._path.exists():
            if not auto_init:
                raise NotInitializedError(
                    f"File {self._path.name} doesn't exist, please use the \"init\" "
                    "subcommand or the \"--auto-init\" flag"
                )
            task_list = self.init()
            if on_init is not None:
                on_init(self._path)
            return task_list

        try:
            text = self._path.read_text("utf-8")
        except UnicodeDecodeError as e:
            raise TaskParseError(f"{self._path.name} is not UTF-8 text") from e
        except OSError as e:
            raise StorageError(f"cannot read {self._path}: {e.strerror or e}") from e

        task_list = TaskList.from_json(text)
        logger.debug("Loaded task list path=%s total=%s", self._path, len(task_list))
        return task_list

    def save(self, task_list: TaskList) -> None:
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp.write_text(task_list.to_json(), "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink()
            raise StorageError(f"cannot write {self._path}: {e.strerror or e}") from e
        logger.debug("Saved task list path=%s total=%s", self._path, len(task_list))
