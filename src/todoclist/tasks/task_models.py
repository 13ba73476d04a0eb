# src/todoclist/tasks/task_models.py

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from .errors import InvalidDescriptionError, TaskNotFoundError, TaskParseError


def _is_int(value: Any) -> bool:
    # bool is an int subclass; a true/false timestamp is a malformed file.
    return isinstance(value, int) and not isinstance(value, bool)


def _is_timestamp(value: Any) -> bool:
    if not _is_int(value):
        return False
    try:
        datetime.fromtimestamp(value, tz=UTC).astimezone()
    except (OverflowError, OSError, ValueError):
        return False
    return True


@dataclass(slots=True)
class Task:
    """
    One todo item.

    Notes:
    - `completed` is None while the task is open, otherwise the Unix time it was done.
    - `author` is part of the file format but no command sets it.
    """

    name: str
    creation: int
    completed: int | None = None
    author: str | None = None

    @classmethod
    def new(cls, name: str, now: int) -> Task:
        if not name or not name.strip():
            raise InvalidDescriptionError("Task description can't be empty")
        return cls(name=name, creation=int(now))

    @property
    def is_completed(self) -> bool:
        return self.completed is not None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name}
        if self.author is not None:
            out["author"] = self.author
        out["creation"] = self.creation
        if self.completed is not None:
            out["completed"] = self.completed
        return out

    @classmethod
    def from_dict(cls, raw: Any, *, position: int) -> Task:
        if not isinstance(raw, dict):
            raise TaskParseError(f"task #{position} is not an object")

        name = raw.get("name")
        if not isinstance(name, str):
            raise TaskParseError(f"task #{position} has no string 'name'")

        creation = raw.get("creation")
        if not _is_timestamp(creation):
            raise TaskParseError(f"task #{position} has no valid integer 'creation'")

        author = raw.get("author")
        if author is not None and not isinstance(author, str):
            raise TaskParseError(f"task #{position} has a non-string 'author'")

        completed = raw.get("completed")
        if completed is not None and not _is_timestamp(completed):
            raise TaskParseError(f"task #{position} has an invalid 'completed'")
        # Older files wrote 0 for tasks that were never completed.
        if completed == 0:
            completed = None

        return cls(name=name, creation=creation, completed=completed, author=author)


@dataclass(slots=True)
class TaskList:
    """
    Ordered tasks; a task's id is its 1-based position in `tasks`.

    Ids are recomputed on every load, so deleting a task shifts the ids of
    everything after it.
    """

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def _index(self, task_id: int) -> int:
        if task_id < 1 or task_id > len(self.tasks):
            raise TaskNotFoundError(task_id)
        return task_id - 1

    def add_task(self, task: Task) -> int:
        self.tasks.append(task)
        return len(self.tasks)

    def get(self, task_id: int) -> Task:
        return self.tasks[self._index(task_id)]

    def complete(self, task_id: int, now: int) -> Task:
        task = self.get(task_id)
        task.completed = int(now)
        return task

    def remove(self, task_id: int) -> Task:
        return self.tasks.pop(self._index(task_id))

    def pending(self) -> list[tuple[int, Task]]:
        """Open tasks with their ids in the full list (not renumbered)."""
        return [(i, t) for i, t in enumerate(self.tasks, start=1) if not t.is_completed]

    # ---- serialization ----

    def to_dict(self) -> dict[str, Any]:
        return {"tasks": [t.to_dict() for t in self.tasks]}

    @classmethod
    def from_dict(cls, data: Any) -> TaskList:
        if not isinstance(data, dict):
            raise TaskParseError("top level is not an object")
        raw_tasks = data.get("tasks")
        if not isinstance(raw_tasks, list):
            raise TaskParseError("missing 'tasks' array")
        return cls(tasks=[Task.from_dict(raw, position=i) for i, raw in enumerate(raw_tasks, start=1)])

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2) + "\n"

    @classmethod
    def from_json(cls, text: str) -> TaskList:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise TaskParseError(f"invalid JSON: {e}") from e
        return cls.from_dict(data)
