"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import pytest
from fastapi.testclient import TestClient

from food_tracker.api.app import create_app
from food_tracker.config import Settings
from food_tracker.containers import AppContainer
from food_tracker.services.persistence import FoodListStore
from food_tracker.services.storage import KeyValueStore
from food_tracker.services.tracker import TrackerService


@dataclass
class RecordingKeyValueStore(KeyValueStore):
    """In-memory store that records every write."""

    values: dict[str, str] = field(default_factory=dict)
    writes: list[tuple[str, str]] = field(default_factory=list)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.writes.append(("set", key))
        self.values[key] = value

    def delete(self, key: str) -> None:
        self.writes.append(("delete", key))
        self.values.pop(key, None)


@dataclass
class FailingKeyValueStore(KeyValueStore):
    """Store that serves existing values but fails every write."""

    values: dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        raise OSError("disk full")

    def delete(self, key: str) -> None:
        raise OSError("disk full")


@dataclass
class SequentialIds:
    """Deterministic UUID factory."""

    issued: int = 0

    def __call__(self) -> UUID:
        self.issued += 1
        return UUID(int=self.issued)


@pytest.fixture
def settings() -> Settings:
    return Settings(storage_backend="memory")


@pytest.fixture
def key_value_store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def food_store(key_value_store: RecordingKeyValueStore) -> FoodListStore:
    return FoodListStore(key_value_store)


@pytest.fixture
def tracker(food_store: FoodListStore) -> TrackerService:
    return TrackerService.load(food_store, id_factory=SequentialIds())


@pytest.fixture
def container(settings: Settings, tracker: TrackerService) -> AppContainer:
    return AppContainer(settings=settings, tracker_service=tracker)


@pytest.fixture
def client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))
