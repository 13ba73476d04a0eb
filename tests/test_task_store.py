# tests/test_task_store.py

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from todoclist.tasks.errors import (
    AlreadyExistsError,
    NotInitializedError,
    StorageError,
    TaskParseError,
)
from todoclist.tasks.task_models import Task, TaskList
from todoclist.tasks.task_store import TaskStore


def test_init_creates_empty_list(list_path: Path) -> None:
    store = TaskStore(list_path)
    task_list = store.init()

    assert len(task_list) == 0
    assert json.loads(list_path.read_text("utf-8")) == {"tasks": []}


def test_init_twice_keeps_first_file(list_path: Path) -> None:
    store = TaskStore(list_path)
    task_list = store.init()
    task_list.add_task(Task.new("keep me", 1))
    store.save(task_list)
    before = list_path.read_text("utf-8")

    with pytest.raises(AlreadyExistsError, match="todoclist.json"):
        store.init()

    assert list_path.read_text("utf-8") == before


def test_load_missing_without_auto_init(list_path: Path) -> None:
    store = TaskStore(list_path)
    with pytest.raises(NotInitializedError, match='"init" subcommand'):
        store.load()
    assert not list_path.exists()


def test_load_missing_with_auto_init_creates_file(list_path: Path) -> None:
    seen: list[Path] = []
    store = TaskStore(list_path)

    task_list = store.load(auto_init=True, on_init=seen.append)

    assert len(task_list) == 0
    assert list_path.exists()
    assert seen == [list_path]


def test_auto_init_not_triggered_for_existing_file(list_path: Path) -> None:
    seen: list[Path] = []
    store = TaskStore(list_path)
    store.init()

    store.load(auto_init=True, on_init=seen.append)

    assert seen == []


def test_save_overwrites_whole_file(list_path: Path) -> None:
    store = TaskStore(list_path)
    task_list = store.init()
    task_list.add_task(Task.new("a", 1))
    task_list.add_task(Task.new("b", 2))
    store.save(task_list)

    task_list.remove(1)
    store.save(task_list)

    loaded = store.load()
    assert [t.name for t in loaded.tasks] == ["b"]
    assert not list_path.with_name(list_path.name + ".tmp").exists()


def test_load_malformed_file_raises_parse_error(list_path: Path) -> None:
    list_path.write_text('{"tasks": [', "utf-8")
    with pytest.raises(TaskParseError):
        TaskStore(list_path).load()


def test_save_into_missing_directory_raises_storage_error(tmp_path: Path) -> None:
    store = TaskStore(tmp_path / "missing" / "todoclist.json")
    with pytest.raises(StorageError):
        store.init()
    with pytest.raises(StorageError):
        store.save(TaskList())


def test_failed_save_keeps_previous_file(list_path: Path, monkeypatch) -> None:
    store = TaskStore(list_path)
    task_list = store.init()
    task_list.add_task(Task.new("keep me", 1))
    store.save(task_list)
    before = list_path.read_bytes()

    def fail_replace(src, dst):
        raise OSError(13, "Permission denied")

    monkeypatch.setattr(os, "replace", fail_replace)
    task_list.add_task(Task.new("lost", 2))

    with pytest.raises(StorageError, match="Permission denied"):
        store.save(task_list)

    assert list_path.read_bytes() == before
    assert not list_path.with_name(list_path.name + ".tmp").exists()
