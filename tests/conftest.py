from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable

import pytest
from flask import Flask

from app import create_app
from config import Settings


@pytest.fixture()
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "todos.json"


@pytest.fixture()
def make_app(data_file: Path) -> Callable[..., Flask]:
    """
    Build an app over a temp data file, optionally seeded with tasks.

    Settings are constructed directly so tests never read the real
    environment or a local .env.
    """

    def _make(tasks: list[dict[str, Any]] | None = None) -> Flask:
        if tasks is not None:
            data_file.write_text(json.dumps(tasks, indent=2), encoding="utf-8")
        app = create_app(Settings(data_file=data_file))
        app.config["TESTING"] = True
        return app

    return _make


@pytest.fixture()
def client(make_app):
    return make_app().test_client()
