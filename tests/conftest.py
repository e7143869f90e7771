"""
Pytest configuration and fixtures for the checklist backend tests.
"""

import copy
import os
import pytest
from itertools import count

# Keep tests independent from a developer's .env
os.environ.pop("FIREBASE_SERVICE_ACCOUNT_KEY_JSON", None)
os.environ["ENABLE_DESTINATION_OVERRIDES"] = "true"
os.environ["FREE_PLAN_CHECKLIST_LIMIT"] = "5"

from core.config import settings
from schemas.checklist_schema import ChecklistItem, Destination, DestinationType


class FakeReference:
    """Subset of firebase_admin.db.Reference backed by a nested dict."""

    def __init__(self, database, path):
        self.database = database
        self.parts = [part for part in path.split("/") if part]

    def get(self, shallow=False):
        node = self.database.data
        for part in self.parts:
            if not isinstance(node, dict) or part not in node:
                return None
            node = node[part]
        if shallow and isinstance(node, dict):
            return {key: True for key in node}
        return copy.deepcopy(node)

    def set(self, value):
        node = self.database.data
        for part in self.parts[:-1]:
            node = node.setdefault(part, {})
        node[self.parts[-1]] = copy.deepcopy(value)

    def delete(self):
        node = self.database.data
        for part in self.parts[:-1]:
            node = node.get(part, {})
        node.pop(self.parts[-1], None)


class FakeDatabase:
    def __init__(self):
        self.data = {}

    def reference(self, path="/"):
        return FakeReference(self, path)


@pytest.fixture
def fake_db(monkeypatch):
    """In-memory replacement for the Firebase Realtime Database module."""
    database = FakeDatabase()
    monkeypatch.setattr("services.checklist_service.db", database)
    monkeypatch.setattr("services.plan_service.db", database)
    return database


@pytest.fixture
def free_limit(monkeypatch):
    monkeypatch.setattr(settings, "FREE_PLAN_CHECKLIST_LIMIT", 5)
    return 5


@pytest.fixture
def sequential_ids():
    """Deterministic id generator: id-1, id-2, ..."""
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def current_user():
    return {"uid": "user-1", "email": "ana@example.com", "name": "Ana"}


@pytest.fixture
def client(fake_db, current_user):
    """TestClient with authentication replaced by a fixed user."""
    from fastapi.testclient import TestClient
    from main import app
    from core.security import get_current_user

    app.dependency_overrides[get_current_user] = lambda: current_user
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_checklist():
    """Small saved checklist: two categories, one item done."""
    return Destination(
        id="chk-1",
        name="Paris",
        type=DestinationType.INTERNATIONAL,
        items=[
            ChecklistItem(id="item-1", name="Passaporte", category="Documentos", done=True),
            ChecklistItem(id="item-2", name="Adaptador de tomada", category="Eletrônicos"),
        ],
    )
