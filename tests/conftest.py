# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todoclist.cli.bootstrap import create_initial_state
from todoclist.core.state import AppState

from .fakes import FakeClock, buffer_console


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI.

    We intentionally use a SimpleNamespace rather than the real config,
    so tests never read the environment or a .env file.
    """
    return SimpleNamespace(
        app_name="todoclist",
        file_name="todoclist.json",
        default_dir=tmp_path,
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def list_path(tmp_path: Path) -> Path:
    return tmp_path / "todoclist.json"


@pytest.fixture()
def state(settings: SimpleNamespace, clock: FakeClock) -> AppState:
    """AppState writing into StringIO consoles, with a fixed clock."""
    return create_initial_state(
        settings=settings,
        console=buffer_console(),
        err_console=buffer_console(),
        clock=clock,
    )
