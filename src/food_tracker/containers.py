"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from food_tracker.adapters.json_file_store import JsonFileKeyValueStore
from food_tracker.adapters.sqlite_store import SqliteKeyValueStore
from food_tracker.config import Settings
from food_tracker.domain.foods import Requirements
from food_tracker.services.persistence import FoodListStore
from food_tracker.services.storage import InMemoryKeyValueStore, KeyValueStore
from food_tracker.services.tracker import TrackerService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    tracker_service: TrackerService


def build_store(settings: Settings) -> KeyValueStore:
    """Create the key-value store selected by settings."""
    if settings.storage_backend == "memory":
        return InMemoryKeyValueStore()
    if settings.storage_backend == "sqlite":
        return SqliteKeyValueStore(settings.storage_path)
    return JsonFileKeyValueStore(settings.storage_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    logger.info(
        "Using %s storage at %s",
        resolved_settings.storage_backend,
        resolved_settings.storage_path,
    )
    food_store = FoodListStore(
        store=build_store(resolved_settings), key=resolved_settings.storage_key
    )
    tracker_service = TrackerService.load(
        food_store,
        requirements=Requirements(
            calorie_req=resolved_settings.default_calorie_req,
            protein_req=resolved_settings.default_protein_req,
        ),
    )
    return AppContainer(settings=resolved_settings, tracker_service=tracker_service)
