from __future__ import annotations

import itertools

import pytest

from src.classroom_attendance.classroom_attendance.main import create_app
from src.classroom_attendance.classroom_attendance.storage.memory_storage import InMemoryStorage
from src.classroom_attendance.classroom_attendance.store import build_store


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"id{next(counter)}"


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def store(storage, sequential_ids):
    return build_store(storage, id_generator=sequential_ids)


@pytest.fixture
def app(storage):
    app = create_app("config.testing", storage=storage)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_store(app):
    return app.extensions["classroom_attendance"].store
