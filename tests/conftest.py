import pytest
from fastapi.testclient import TestClient

from todo_app.app import create_app
from todo_app.config import Settings
from todo_app.store import TodoStore


@pytest.fixture()
def store():
    return TodoStore()


@pytest.fixture()
def client(store):
    app = create_app(Settings(_env_file=None, seed_todos=False), store=store)
    with TestClient(app) as test_client:
        yield test_client
