# src/todoclist/cli/commands.py

from __future__ import annotations

import logging
from argparse import Namespace
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..core.state import AppState
from ..tasks.errors import (
    AlreadyExistsError,
    InvalidTaskIdError,
    StorageError,
    TaskParseError,
    TodoError,
)
from ..tasks.task_models import Task, TaskList
from .render import say, say_error, task_text

CommandHandler = Callable[[AppState, Namespace], int]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: CommandHandler
    help_text: str
    aliases: tuple[str, ...] = ()
    # Positional arguments as (name, help) pairs, in order.
    arguments: tuple[tuple[str, str], ...] = ()


class CommandRegistry:
    """Subcommand registry; the argparse front-end is generated from it."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}
        self._lookup: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        arguments: list[tuple[str, str]] | None = None,
    ) -> None:
        spec = CommandSpec(
            name=name.lower(),
            handler=handler,
            help_text=help_text,
            aliases=tuple(a.lower() for a in aliases or []),
            arguments=tuple(arguments or []),
        )
        self._commands[spec.name] = spec
        self._lookup[spec.name] = spec
        for alias in spec.aliases:
            self._lookup[alias] = spec

    def commands(self) -> list[CommandSpec]:
        return list(self._commands.values())

    def handle(self, state: AppState, name: str | None, args: Namespace) -> int:
        """
        Run the handler registered for `name`.
        Returns the process exit code; user-facing errors are printed, not raised.
        """
        spec = self._lookup.get(name.lower()) if name else None
        if spec is None:
            say_error(state.err_console, f"Invalid subcommand, please use '{state.prog} help'")
            return 1

        try:
            return spec.handler(state, args)
        except TodoError as e:
            logger.debug("Command %s failed path=%s", spec.name, state.list_path, exc_info=True)
            say_error(state.err_console, str(e))
            return 1

    def build_help(self, prog: str) -> str:
        lines = [f"Usage: {prog} [-i] [-p PATH] <command> [args]", "", "Available commands:"]
        for spec in self._commands.values():
            usage = " ".join([spec.name, *(f"<{arg}>" for arg, _ in spec.arguments)])
            lines.append(f"  {usage:<16} {spec.help_text}")
        lines += [
            "",
            "Options:",
            "  -i, --auto-init  Auto initialize the file before any command",
            "  -p, --path PATH  Path to the directory containing the task list",
        ]
        return "\n".join(lines)


registry = CommandRegistry()


# ---- helpers ----


def parse_task_id(raw: str) -> int:
    """Parse a user-supplied 1-based task id."""
    raw = raw.strip()
    if not raw.isascii() or not raw.isdigit():
        raise InvalidTaskIdError("The id should be numeric")
    try:
        task_id = int(raw)
    except ValueError as e:
        # longer than the interpreter's int-string conversion limit
        raise InvalidTaskIdError("The id should be numeric") from e
    if task_id == 0:
        raise InvalidTaskIdError("Task #0 doesn't exist")
    return task_id


def _report_init(state: AppState, path: Path) -> None:
    say(state.console, f'Initialized new todolist at "{path}"')


def _open_list(state: AppState) -> TaskList:
    try:
        return state.task_store.load(
            auto_init=state.auto_init,
            on_init=lambda path: _report_init(state, path),
        )
    except AlreadyExistsError as e:
        raise AlreadyExistsError(f"Error initializing the todolist: {e}") from e
    except (StorageError, TaskParseError) as e:
        raise type(e)(f"Error loading the todolist: {e}") from e


def _save(state: AppState, task_list: TaskList, error_prefix: str) -> bool:
    try:
        state.task_store.save(task_list)
    except StorageError as e:
        logger.debug("Save failed path=%s", state.list_path, exc_info=True)
        say_error(state.err_console, f"{error_prefix}: {e}")
        return False
    return True


# ---- handlers ----


def cmd_init(state: AppState, args: Namespace) -> int:
    try:
        state.task_store.init()
    except TodoError as e:
        say_error(state.err_console, f"Error initializing the todolist: {e}")
        return 1
    _report_init(state, state.list_path)
    return 0


def cmd_add(state: AppState, args: Namespace) -> int:
    task = Task.new(args.description, state.clock())
    task_list = _open_list(state)
    task_id = task_list.add_task(task)
    if not _save(state, task_list, "Error saving task"):
        return 1
    logger.info("Task added id=%s path=%s", task_id, state.list_path)
    say(state.console, f'Added task "{task.name}" with id #{task_id}')
    return 0


def cmd_list(state: AppState, args: Namespace) -> int:
    task_list = _open_list(state)
    pending = task_list.pending()
    if not pending:
        say(state.console, "List empty, good job!")
        return 0
    for task_id, task in pending:
        say(state.console, task_text(task_id, task))
    return 0


def cmd_complete(state: AppState, args: Namespace) -> int:
    task_id = parse_task_id(args.id)
    task_list = _open_list(state)
    task_list.complete(task_id, state.clock())
    if not _save(state, task_list, "Error completing task"):
        return 1
    logger.info("Task completed id=%s path=%s", task_id, state.list_path)
    say(state.console, f"Completed task #{task_id}, very nice!")
    return 0


def cmd_delete(state: AppState, args: Namespace) -> int:
    task_id = parse_task_id(args.id)
    task_list = _open_list(state)
    task = task_list.remove(task_id)
    if not _save(state, task_list, "Error deleting task"):
        return 1
    logger.info("Task deleted id=%s path=%s", task_id, state.list_path)
    say(state.console, f"Deleted task #{task_id}: {task.name}")
    return 0


def cmd_help(state: AppState, args: Namespace) -> int:
    say(state.console, registry.build_help(state.prog))
    return 0


registry.register("init", cmd_init, help_text="Initialize a project")
registry.register(
    "add", cmd_add, help_text="Add a new task", arguments=[("description", "Task description")]
)
registry.register("list", cmd_list, help_text="List all tasks")
registry.register(
    "complete", cmd_complete, help_text="Complete a task by its id", arguments=[("id", "Task id")]
)
registry.register(
    "delete", cmd_delete, help_text="Delete a task by its id", arguments=[("id", "Task id")]
)
registry.register("help", cmd_help, help_text="Show available commands")
