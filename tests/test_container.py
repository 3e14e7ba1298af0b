"""Tests for container wiring."""

from pathlib import Path

from food_tracker.adapters.json_file_store import JsonFileKeyValueStore
from food_tracker.adapters.sqlite_store import SqliteKeyValueStore
from food_tracker.config import Settings
from food_tracker.containers import build_container, build_store
from food_tracker.services.storage import InMemoryKeyValueStore


def test_build_container_creates_tracker(settings: Settings) -> None:
    container = build_container(settings)

    assert container.tracker_service.state.foods == ()
    assert container.tracker_service.state.requirements.calorie_req == 2000


def test_build_container_applies_default_requirements() -> None:
    settings = Settings(
        storage_backend="memory", default_calorie_req=1800, default_protein_req=90
    )

    requirements = build_container(settings).tracker_service.state.requirements

    assert requirements.calorie_req == 1800
    assert requirements.protein_req == 90


def test_build_store_selects_backend(tmp_path: Path) -> None:
    path = tmp_path / "store"

    assert isinstance(
        build_store(Settings(storage_backend="memory")), InMemoryKeyValueStore
    )
    assert isinstance(
        build_store(Settings(storage_backend="file", storage_path=path)),
        JsonFileKeyValueStore,
    )
    assert isinstance(
        build_store(Settings(storage_backend="sqlite", storage_path=path)),
        SqliteKeyValueStore,
    )


def test_file_backed_container_reloads_foods(tmp_path: Path) -> None:
    settings = Settings(storage_backend="file", storage_path=tmp_path / "foods.json")
    first = build_container(settings).tracker_service
    for field, value in {
        "name": "Rice",
        "amount": "150",
        "caloriesPerGm": "1.3",
        "proteinsPerGm": "0.027",
    }.items():
        first.change_field(field, value)
    first.submit()

    second = build_container(settings).tracker_service

    assert second.state.foods == first.state.foods
