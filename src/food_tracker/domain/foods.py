"""Domain models for tracked foods."""

from dataclasses import dataclass
from uuid import UUID

DEFAULT_CALORIE_REQ = 2000.0
DEFAULT_PROTEIN_REQ = 100.0


@dataclass(frozen=True)
class Requirements:
    """Daily nutrient targets."""

    calorie_req: float = DEFAULT_CALORIE_REQ
    protein_req: float = DEFAULT_PROTEIN_REQ


@dataclass(frozen=True)
class FoodEntry:
    """Represents a recorded food with totals computed at commit time."""

    id: UUID
    name: str
    amount: float
    calories_per_gm: float
    proteins_per_gm: float
    total_calories: float
    total_proteins: float

    @classmethod
    def create(
        cls,
        id: UUID,  # noqa: A002
        name: str,
        amount: float,
        calories_per_gm: float,
        proteins_per_gm: float,
    ) -> "FoodEntry":
        """Build an entry and derive its totals."""
        return cls(
            id=id,
            name=name,
            amount=amount,
            calories_per_gm=calories_per_gm,
            proteins_per_gm=proteins_per_gm,
            total_calories=amount * calories_per_gm,
            total_proteins=amount * proteins_per_gm,
        )


@dataclass(frozen=True)
class FormDraft:
    """Raw text of the entry form."""

    name: str = ""
    amount: str = ""
    calories_per_gm: str = ""
    proteins_per_gm: str = ""

    def is_complete(self) -> bool:
        """Return True when every field holds some text."""
        return all(
            (self.name, self.amount, self.calories_per_gm, self.proteins_per_gm)
        )
