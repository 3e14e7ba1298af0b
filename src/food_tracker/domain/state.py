"""Application state for a tracker session."""

from dataclasses import dataclass, field
from enum import Enum

from food_tracker.domain.foods import FoodEntry, FormDraft, Requirements


class Mode(Enum):
    """Form mode derived from the edit cursor."""

    IDLE = "idle"
    EDITING = "editing"


REQUIREMENT_FIELDS: dict[str, str] = {
    "calorieReq": "calorie_req",
    "proteinReq": "protein_req",
}

DRAFT_FIELDS: dict[str, str] = {
    "name": "name",
    "amount": "amount",
    "caloriesPerGm": "calories_per_gm",
    "proteinsPerGm": "proteins_per_gm",
}


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of requirements, form draft, foods and edit cursor."""

    requirements: Requirements = field(default_factory=Requirements)
    draft: FormDraft = field(default_factory=FormDraft)
    foods: tuple[FoodEntry, ...] = ()
    edit_index: int | None = None

    @property
    def mode(self) -> Mode:
        """Return EDITING when an entry is loaded into the form."""
        return Mode.IDLE if self.edit_index is None else Mode.EDITING
