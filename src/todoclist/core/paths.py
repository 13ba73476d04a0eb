# src/todoclist/core/paths.py

from __future__ import annotations

from pathlib import Path


def absoluteify(root: str | Path, value: str | Path) -> Path:
    """Return `value` unchanged if absolute, otherwise joined onto `root`."""
    value = Path(value).expanduser()
    if value.is_absolute():
        return value
    return Path(root) / value


def resolve_list_path(
    directory: str | Path | None,
    *,
    file_name: str,
    default_dir: str | Path = ".",
    cwd: str | Path | None = None,
) -> Path:
    """
    Absolute path of the task-list file inside `directory`.

    `directory` falls back to `default_dir`; relative values are taken from
    `cwd` (the process working directory when not given).
    """
    root = Path.cwd() if cwd is None else Path(cwd)
    return absoluteify(root, directory if directory is not None else default_dir) / file_name
