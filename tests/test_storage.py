from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest

from storage import Storage
from todo_list import TodoList

from .helpers import read_saved, task_entry


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    assert Storage(tmp_path / "nope.json").load_tasks() == []


def test_blank_file_loads_empty(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    path.write_text("  \n", encoding="utf-8")
    assert Storage(path).load_tasks() == []


def test_malformed_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        Storage(path).load_tasks()


def test_non_array_document_raises(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    path.write_text('{"task": "x"}', encoding="utf-8")
    with pytest.raises(ValueError, match="JSON array"):
        Storage(path).load_tasks()


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    tasks = [
        task_entry("write report", due_date="2024-05-01"),
        task_entry("買い物", category="未分類", done=True, completed_at="2024-04-30"),
    ]
    storage = Storage(tmp_path / "todos.json")
    storage.save_tasks(tasks)

    assert storage.load_tasks() == tasks
    # reloading through the in-memory list keeps the exact JSON shape
    assert TodoList(storage.load_tasks()).to_dicts() == tasks


def test_save_is_pretty_printed_utf8(tmp_path: Path) -> None:
    path = tmp_path / "todos.json"
    tasks = [task_entry("買い物")]
    Storage(path).save_tasks(tasks)

    text = path.read_text(encoding="utf-8")
    assert text == json.dumps(tasks, indent=2, ensure_ascii=False)
    assert '\n  {\n    "task": "買い物",' in text


def test_save_creates_parent_and_overwrites(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "todos.json"
    storage = Storage(path)
    storage.save_tasks([task_entry("a")])
    storage.save_tasks([task_entry("b")])

    assert [p.name for p in path.parent.iterdir()] == ["todos.json"]
    assert storage.load_tasks() == [task_entry("b")]


def test_save_keeps_file_mode(make_app, data_file: Path) -> None:
    data_file.write_text("[]", encoding="utf-8")
    os.chmod(data_file, 0o644)

    make_app().test_client().post("/add", data={"task": "keep my mode"})

    assert stat.S_IMODE(data_file.stat().st_mode) == 0o644
    assert read_saved(data_file)[0]["task"] == "keep my mode"


def test_save_writes_through_symlink(tmp_path: Path) -> None:
    target = tmp_path / "real.json"
    target.write_text("[]", encoding="utf-8")
    link = tmp_path / "todos.json"
    link.symlink_to(target)

    Storage(link).save_tasks([task_entry("a")])

    assert link.is_symlink()
    assert read_saved(target) == [task_entry("a")]


def test_create_app_fails_on_malformed_file(make_app, data_file: Path) -> None:
    data_file.write_text("not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        make_app()
