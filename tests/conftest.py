# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from app import create_app, socketio
from config import Config
from core import state
from core.store import JsonFileTaskStore


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "tasks.json"


@pytest.fixture()
def config(tasks_file: Path) -> Config:
    """Config pointing at a per-test task file; env defaults are ignored."""
    return Config(TASKS_FILE=str(tasks_file), CORS_ORIGINS="*", EVENT_LOG_SIZE=50)


@pytest.fixture()
def app(config: Config):
    app = create_app(config)
    app.config["TESTING"] = True
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def ws_client(app):
    c = socketio.test_client(app)
    yield c
    if c.is_connected():
        c.disconnect()


@pytest.fixture()
def store(app) -> JsonFileTaskStore:
    return state.STORE
