"""Aggregation of the food list into stacked bar series."""

import math
from collections.abc import Sequence

from food_tracker.domain.charts import (
    PALETTE,
    ChartSeries,
    Metric,
    SeriesRow,
    SeriesSegment,
)
from food_tracker.domain.foods import FoodEntry, Requirements


def build_series(foods: Sequence[FoodEntry], metric: Metric) -> SeriesRow:
    """Reduce the foods into a single row with one segment per food."""
    return SeriesRow(
        segments=tuple(
            SeriesSegment(
                entry_id=food.id,
                name=food.name,
                value=_metric_value(food, metric),
                color=segment_color(index),
            )
            for index, food in enumerate(foods)
        )
    )


def axis_upper_bound(requirement: float, row: SeriesRow) -> float:
    """Return the larger of the requirement and the row total.

    A NaN requirement (blank or non-numeric input) leaves the bound at the
    row total. A NaN total makes the bound NaN.
    """
    total = row.total
    if math.isnan(total):
        return math.nan
    if math.isnan(requirement):
        return total
    return max(requirement, total)


def build_chart(
    foods: Sequence[FoodEntry], requirements: Requirements, metric: Metric
) -> ChartSeries:
    """Build the chart for one nutrient against its requirement."""
    row = build_series(foods, metric)
    requirement = requirement_for(requirements, metric)
    return ChartSeries(
        metric=metric,
        row=row,
        requirement=requirement,
        upper_bound=axis_upper_bound(requirement, row),
    )


def segment_color(index: int) -> str:
    """Return the palette colour for a list position."""
    return PALETTE[index % len(PALETTE)]


def requirement_for(requirements: Requirements, metric: Metric) -> float:
    """Return the target for a metric."""
    if metric is Metric.CALORIES:
        return requirements.calorie_req
    return requirements.protein_req


def _metric_value(food: FoodEntry, metric: Metric) -> float:
    if metric is Metric.CALORIES:
        return food.total_calories
    return food.total_proteins
