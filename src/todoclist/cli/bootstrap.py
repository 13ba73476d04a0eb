# src/todoclist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- takes the settings loaded once in main,
- resolves the absolute task-list path from --path and the working directory,
- wires the TaskStore, consoles and clock into AppState.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from ..config import get_settings
from ..core.paths import resolve_list_path
from ..core.state import AppState, Clock, unix_now
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(
    *,
    settings=None,
    directory: str | Path | None = None,
    auto_init: bool = False,
    console: Console | None = None,
    err_console: Console | None = None,
    clock: Clock | None = None,
    prog: str = "todoclist",
) -> AppState:
    """
    Create AppState for one invocation.

    Keeping settings and consoles injectable makes the commands easy to test.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    list_path = resolve_list_path(
        directory,
        file_name=settings.file_name,
        default_dir=settings.default_dir,
    )
    logger.debug("Resolved task list path=%s auto_init=%s", list_path, auto_init)

    return AppState(
        settings=settings,
        task_store=TaskStore(list_path),
        auto_init=auto_init,
        console=console if console is not None else Console(),
        err_console=err_console if err_console is not None else Console(stderr=True),
        clock=clock if clock is not None else unix_now,
        prog=prog,
    )
