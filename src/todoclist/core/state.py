# src/todoclist/core/state.py

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

from ..tasks.task_store import TaskStore

Clock = Callable[[], int]


def unix_now() -> int:
    return int(time.time())


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same fields).
    settings: object

    task_store: TaskStore
    auto_init: bool

    console: Console
    err_console: Console

    clock: Clock = field(default=unix_now)
    prog: str = "todoclist"

    @property
    def list_path(self) -> Path:
        return self.task_store.path
