"""Persistence of the food list in a key-value store."""

import json
import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass
from uuid import UUID

from food_tracker.domain.foods import FoodEntry
from food_tracker.services.storage import KeyValueStore

DEFAULT_STORAGE_KEY = "foods"

logger = logging.getLogger(__name__)


@dataclass
class FoodListStore:
    """Loads and saves the whole food list under a single key."""

    store: KeyValueStore
    key: str = DEFAULT_STORAGE_KEY

    def load(self) -> list[FoodEntry]:
        """Return the stored foods, or an empty list when absent or unreadable."""
        raw = self.store.get(self.key)
        if raw is None:
            return []
        try:
            rows = json.loads(raw)
            if not isinstance(rows, list):
                raise TypeError("stored foods is not a list")
            return [_to_entry(row) for row in rows]
        except (ValueError, TypeError, KeyError):
            logger.warning("Ignoring unreadable food list under key %r", self.key)
            return []

    def save(self, foods: Sequence[FoodEntry]) -> None:
        """Overwrite the stored list."""
        self.store.set(self.key, json.dumps([_to_row(food) for food in foods]))

    def clear(self) -> None:
        """Delete the stored list."""
        self.store.delete(self.key)


def _to_row(food: FoodEntry) -> dict[str, object]:
    return {
        "id": str(food.id),
        "name": food.name,
        "amount": food.amount,
        "caloriesPerGm": food.calories_per_gm,
        "proteinsPerGm": food.proteins_per_gm,
        "totalCalories": food.total_calories,
        "totalProteins": food.total_proteins,
    }


def _to_entry(row: dict[str, object]) -> FoodEntry:
    return FoodEntry(
        id=UUID(str(row["id"])),
        name=str(row["name"]),
        amount=_as_float(row["amount"]),
        calories_per_gm=_as_float(row["caloriesPerGm"]),
        proteins_per_gm=_as_float(row["proteinsPerGm"]),
        total_calories=_as_float(row["totalCalories"]),
        total_proteins=_as_float(row["totalProteins"]),
    )


def _as_float(value: object) -> float:
    # Browsers serialize NaN as null.
    if value is None:
        return math.nan
    return float(value)
