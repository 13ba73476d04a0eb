# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

import pytest

from todoclist.cli.main import build_parser, main


def test_end_to_end_in_path_directory(settings, tmp_path: Path, capsys) -> None:
    target = tmp_path / "proj"
    target.mkdir()

    assert main(["-p", str(target), "init"], settings=settings) == 0
    assert main(["add", "buy milk", "--path", str(target)], settings=settings) == 0
    assert main(["add", "walk dog", "-p", str(target)], settings=settings) == 0
    assert main(["-p", str(target), "complete", "1"], settings=settings) == 0
    assert main(["-p", str(target), "list"], settings=settings) == 0

    out = capsys.readouterr().out
    assert 'Added task "walk dog" with id #2' in out
    assert "#2: walk dog" in out
    assert "#1: buy milk" not in out

    data = json.loads((target / "todoclist.json").read_text("utf-8"))
    assert [t["name"] for t in data["tasks"]] == ["buy milk", "walk dog"]
    assert "completed" in data["tasks"][0]
    assert "completed" not in data["tasks"][1]


def test_default_directory_is_working_directory(settings, tmp_path: Path, monkeypatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    settings.default_dir = Path(".")

    assert main(["-i", "add", "x"], settings=settings) == 0

    assert (tmp_path / "todoclist.json").exists()
    assert "Initialized new todolist" in capsys.readouterr().out


def test_auto_init_flag_after_subcommand(settings, tmp_path: Path, capsys) -> None:
    assert main(["list", "--auto-init"], settings=settings) == 0
    assert "List empty, good job!" in capsys.readouterr().out
    assert (tmp_path / "todoclist.json").exists()


def test_missing_list_is_an_error(settings, capsys) -> None:
    assert main(["list"], settings=settings) == 1
    assert "doesn't exist" in capsys.readouterr().err


def test_no_subcommand_prints_hint(settings, capsys) -> None:
    assert main([], settings=settings) == 1
    assert "Invalid subcommand, please use" in capsys.readouterr().err


def test_unknown_subcommand_exits_non_zero(settings, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["frobnicate"], settings=settings)
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_required_arguments(settings) -> None:
    with pytest.raises(SystemExit):
        main(["add"], settings=settings)
    with pytest.raises(SystemExit):
        main(["delete"], settings=settings)


def test_invalid_id_exits_with_error(settings, tmp_path: Path, capsys) -> None:
    main(["init"], settings=settings)
    capsys.readouterr()

    assert main(["complete", "abc"], settings=settings) == 1
    assert "The id should be numeric" in capsys.readouterr().err


def test_parser_global_flag_defaults() -> None:
    args = build_parser().parse_args(["list"])
    assert args.auto_init is False
    assert args.path is None
    assert args.command == "list"
