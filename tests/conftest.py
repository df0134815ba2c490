"""Shared fixtures: in-memory stores standing in for MongoDB collections."""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient

from ride_hailing.api.app import create_app
from ride_hailing.bootstrap import ENTITIES


class InMemoryDocumentStore:
    """Dict-backed DocumentStore keyed by each document's ``id``."""

    def __init__(self, acknowledge: bool = True) -> None:
        self.documents: dict[str, dict[str, Any]] = {}
        self.acknowledge = acknowledge

    def insert_one(self, document: dict[str, Any]) -> bool:
        if not self.acknowledge:
            return False
        self.documents[document["id"]] = copy.deepcopy(document)
        return True

    def find_by_id(self, record_id: str) -> dict[str, Any] | None:
        document = self.documents.get(record_id)
        return copy.deepcopy(document) if document is not None else None

    def find_all(self) -> list[dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self.documents.values()]

    def update_by_id(self, record_id: str, fields: dict[str, Any]) -> int:
        if record_id not in self.documents:
            return 0
        self.documents[record_id].update(fields)
        return 1

    def delete_by_id(self, record_id: str) -> int:
        return 1 if self.documents.pop(record_id, None) is not None else 0

    def health_check(self) -> bool:
        return True


class BrokenDocumentStore(InMemoryDocumentStore):
    """Store whose every operation fails, like an unreachable server."""

    def _fail(self, *args: Any, **kwargs: Any) -> Any:
        raise ConnectionError("store unavailable")

    insert_one = _fail
    find_by_id = _fail
    find_all = _fail
    update_by_id = _fail
    delete_by_id = _fail

    def health_check(self) -> bool:
        return False


class VanishingDocumentStore(InMemoryDocumentStore):
    """Store where a record is deleted between an update and its read-back."""

    def update_by_id(self, record_id: str, fields: dict[str, Any]) -> int:
        matched = super().update_by_id(record_id, fields)
        self.documents.pop(record_id, None)
        return matched


@pytest.fixture
def stores() -> dict[str, InMemoryDocumentStore]:
    """One empty in-memory store per entity."""
    return {entity: InMemoryDocumentStore() for entity in ENTITIES}


@pytest.fixture
def client(stores):
    """Create a test client over in-memory stores."""
    with TestClient(create_app(stores)) as test_client:
        yield test_client
