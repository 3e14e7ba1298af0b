"""Tracker state transitions and the session service that persists them."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from food_tracker.domain.errors import EntryNotFoundError, UnknownFieldError
from food_tracker.domain.foods import FoodEntry, FormDraft, Requirements
from food_tracker.domain.state import DRAFT_FIELDS, REQUIREMENT_FIELDS, AppState
from food_tracker.services.parsing import format_number, parse_number
from food_tracker.services.persistence import FoodListStore

logger = logging.getLogger(__name__)

IdFactory = Callable[[], UUID]


def initial_state(
    foods: list[FoodEntry], requirements: Requirements | None = None
) -> AppState:
    """Return the startup state for a loaded food list."""
    return AppState(requirements=requirements or Requirements(), foods=tuple(foods))


def change_field(state: AppState, name: str, value: str) -> AppState:
    """Route a field edit into the requirements or the form draft."""
    if name in REQUIREMENT_FIELDS:
        requirements = replace(
            state.requirements, **{REQUIREMENT_FIELDS[name]: parse_number(value)}
        )
        return replace(state, requirements=requirements)
    if name in DRAFT_FIELDS:
        draft = replace(state.draft, **{DRAFT_FIELDS[name]: value})
        return replace(state, draft=draft)
    raise UnknownFieldError(name)


def submit(state: AppState, id_factory: IdFactory = uuid4) -> AppState:
    """Commit the draft as a new entry or as a replacement for the edited one.

    An incomplete draft leaves the state untouched. An updated entry keeps
    the id of the entry it replaces.
    """
    draft = state.draft
    if not draft.is_complete():
        return state

    editing = state.edit_index is not None and 0 <= state.edit_index < len(
        state.foods
    )
    entry_id = state.foods[state.edit_index].id if editing else id_factory()
    entry = FoodEntry.create(
        id=entry_id,
        name=draft.name,
        amount=parse_number(draft.amount),
        calories_per_gm=parse_number(draft.calories_per_gm),
        proteins_per_gm=parse_number(draft.proteins_per_gm),
    )

    foods = list(state.foods)
    if editing:
        foods[state.edit_index] = entry
    else:
        foods.append(entry)
    return reset(replace(state, foods=tuple(foods)))


def edit(state: AppState, index: int) -> AppState:
    """Load the entry at index into the form and start editing it."""
    if not 0 <= index < len(state.foods):
        raise EntryNotFoundError(index)
    food = state.foods[index]
    draft = FormDraft(
        name=food.name,
        amount=format_number(food.amount),
        calories_per_gm=format_number(food.calories_per_gm),
        proteins_per_gm=format_number(food.proteins_per_gm),
    )
    return replace(state, draft=draft, edit_index=index)


def reset(state: AppState) -> AppState:
    """Clear the form and leave editing mode."""
    return replace(state, draft=FormDraft(), edit_index=None)


def clear_all(state: AppState) -> AppState:
    """Drop every entry and reset the form."""
    return reset(replace(state, foods=()))


@dataclass
class TrackerService:
    """Holds the session state and writes the food list back on every change."""

    store: FoodListStore
    state: AppState
    id_factory: IdFactory = uuid4
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @classmethod
    def load(
        cls,
        store: FoodListStore,
        requirements: Requirements | None = None,
        id_factory: IdFactory = uuid4,
    ) -> "TrackerService":
        """Create a service seeded from persisted foods."""
        foods = store.load()
        logger.info("Loaded %d food entries", len(foods))
        return cls(
            store=store,
            state=initial_state(foods, requirements),
            id_factory=id_factory,
        )

    def change_field(self, name: str, value: str) -> AppState:
        """Update a requirement or form field."""
        return self._apply(lambda state: change_field(state, name, value))

    def submit(self) -> AppState:
        """Commit the current draft."""

        def transition(state: AppState) -> AppState:
            if not state.draft.is_complete():
                logger.debug("Ignoring submission with empty fields")
            return submit(state, self.id_factory)

        return self._apply(transition)

    def edit(self, index: int) -> AppState:
        """Start editing the entry at index."""
        return self._apply(lambda state: edit(state, index))

    def reset(self) -> AppState:
        """Clear the form."""
        return self._apply(reset)

    def clear_all(self) -> AppState:
        """Remove every entry and purge storage."""
        with self._lock:
            self._write(self.store.clear)
            self.state = clear_all(self.state)
            logger.info("Cleared all food entries")
            return self.state

    def _apply(self, transition: Callable[[AppState], AppState]) -> AppState:
        with self._lock:
            updated = transition(self.state)
            if updated.foods != self.state.foods:
                self._write(lambda: self.store.save(updated.foods))
                logger.info("Saved %d food entries", len(updated.foods))
            self.state = updated
            return self.state

    def _write(self, operation: Callable[[], None]) -> None:
        try:
            operation()
        except Exception:
            logger.exception("Failed to write food list")
            raise
