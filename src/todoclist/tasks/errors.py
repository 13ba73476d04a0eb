# src/todoclist/tasks/errors.py

from __future__ import annotations


class TodoError(Exception):
    """Base class for failures reported to the user (stderr + non-zero exit)."""


class AlreadyExistsError(TodoError):
    """`init` was asked to create a task list where a file already exists."""


class NotInitializedError(TodoError):
    """No task list file and auto-init is off."""


class StorageError(TodoError):
    """Reading or writing the task list file failed at the OS level."""


class TaskParseError(TodoError):
    """The task list file is not valid JSON or does not have the expected shape."""


class InvalidTaskIdError(TodoError):
    """A task id argument is not a positive integer."""


class TaskNotFoundError(TodoError):
    """A task id points outside the current list."""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task #{task_id} doesn't exist")
        self.task_id = task_id


class InvalidDescriptionError(TodoError):
    """A new task was given an empty description."""
