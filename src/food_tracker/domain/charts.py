"""Domain models for chart-ready nutrient series."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

PALETTE: tuple[str, ...] = (
    "#f87171",
    "#60a5fa",
    "#34d399",
    "#fbbf24",
    "#a78bfa",
    "#f472b6",
    "#10b981",
    "#fb923c",
    "#c084fc",
    "#818cf8",
)


@dataclass(frozen=True)
class MetricSpec:
    """Presentation details for one nutrient chart."""

    key: str
    title: str
    axis_label: str
    reference_color: str


class Metric(Enum):
    """Nutrients that can be charted."""

    CALORIES = MetricSpec("calories", "Calories Intake", "Calories", "#f87171")
    PROTEINS = MetricSpec("proteins", "Proteins Intake", "Proteins", "#60a5fa")

    @classmethod
    def from_key(cls, key: str) -> "Metric":
        """Return the metric for a key such as ``calories``."""
        for metric in cls:
            if metric.value.key == key:
                return metric
        raise ValueError(f"Unknown metric: {key}")


@dataclass(frozen=True)
class SeriesSegment:
    """One food's contribution to a stacked bar."""

    entry_id: UUID
    name: str
    value: float
    color: str


@dataclass(frozen=True)
class SeriesRow:
    """Single aggregate row composed of one segment per food."""

    segments: tuple[SeriesSegment, ...]

    @property
    def values(self) -> dict[str, float]:
        """Return the row keyed by food name."""
        return {segment.name: segment.value for segment in self.segments}

    @property
    def total(self) -> float:
        """Return the sum of every contribution in the row."""
        return sum(segment.value for segment in self.segments)


@dataclass(frozen=True)
class ChartSeries:
    """Stacked bar data with its reference threshold and axis bound."""

    metric: Metric
    row: SeriesRow
    requirement: float
    upper_bound: float
    reference_dash: str = "5 5"
    reference_label: str = "Requirement"
