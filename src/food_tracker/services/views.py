"""Presentation view models for the tracker page."""

import math
from dataclasses import dataclass
from uuid import UUID

from food_tracker.domain.charts import ChartSeries, Metric
from food_tracker.domain.state import AppState, Mode
from food_tracker.services.aggregation import build_chart
from food_tracker.services.parsing import format_number

ADD_LABEL = "Add Entry"
UPDATE_LABEL = "Update Entry"


@dataclass(frozen=True)
class TableRow:
    """One row of the entry table."""

    index: int
    id: UUID
    name: str
    total_calories: str
    total_proteins: str


@dataclass(frozen=True)
class SegmentView:
    """A bar segment positioned relative to the axis bound."""

    name: str
    value: float | None
    color: str
    width_percent: float


@dataclass(frozen=True)
class ChartView:
    """A stacked bar chart with its dashed reference line."""

    metric: str
    title: str
    axis_label: str
    requirement: float | None
    upper_bound: float | None
    reference_percent: float
    reference_color: str
    reference_dash: str
    reference_label: str
    segments: list[SegmentView]


@dataclass(frozen=True)
class TrackerView:
    """Everything the page needs to render one state."""

    fields: dict[str, str]
    mode: str
    edit_index: int | None
    submit_label: str
    show_list: bool
    rows: list[TableRow]
    charts: list[ChartView]


def build_view(state: AppState) -> TrackerView:
    """Project the application state into a renderable view."""
    requirements = state.requirements
    draft = state.draft
    return TrackerView(
        fields={
            "calorieReq": format_number(requirements.calorie_req),
            "proteinReq": format_number(requirements.protein_req),
            "name": draft.name,
            "amount": draft.amount,
            "caloriesPerGm": draft.calories_per_gm,
            "proteinsPerGm": draft.proteins_per_gm,
        },
        mode=state.mode.value,
        edit_index=state.edit_index,
        submit_label=UPDATE_LABEL if state.mode is Mode.EDITING else ADD_LABEL,
        show_list=bool(state.foods),
        rows=[
            TableRow(
                index=index,
                id=food.id,
                name=food.name,
                total_calories=format_total(food.total_calories),
                total_proteins=format_total(food.total_proteins),
            )
            for index, food in enumerate(state.foods)
        ],
        charts=[
            build_chart_view(build_chart(state.foods, requirements, metric))
            for metric in Metric
        ],
    )


def build_chart_view(chart: ChartSeries) -> ChartView:
    """Convert chart series into percentages of the axis bound."""
    spec = chart.metric.value
    bound = chart.upper_bound
    return ChartView(
        metric=spec.key,
        title=spec.title,
        axis_label=spec.axis_label,
        requirement=_finite_or_none(chart.requirement),
        upper_bound=_finite_or_none(bound),
        reference_percent=_percent_of(chart.requirement, bound),
        reference_color=spec.reference_color,
        reference_dash=chart.reference_dash,
        reference_label=chart.reference_label,
        segments=[
            SegmentView(
                name=segment.name,
                value=_finite_or_none(segment.value),
                color=segment.color,
                width_percent=_percent_of(segment.value, bound),
            )
            for segment in chart.row.segments
        ],
    )


def format_total(value: float) -> str:
    """Format a total with two decimals."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.2f}"


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


def _percent_of(value: float, bound: float) -> float:
    if not (math.isfinite(value) and math.isfinite(bound)) or bound <= 0:
        return 0.0
    return min(max(value / bound * 100, 0.0), 100.0)
