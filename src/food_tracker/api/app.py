"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from food_tracker.api.models import FieldChange
from food_tracker.api.page import PAGE_HTML
from food_tracker.app_logging import configure_logging
from food_tracker.containers import AppContainer
from food_tracker.domain.charts import Metric
from food_tracker.domain.errors import EntryNotFoundError, UnknownFieldError
from food_tracker.domain.state import AppState
from food_tracker.services.aggregation import build_chart
from food_tracker.services.tracker import TrackerService
from food_tracker.services.views import build_chart_view, build_view


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Food Tracker")
    app.state.container = container
    logger.info(
        "Tracker ready with %d entries", len(container.tracker_service.state.foods)
    )

    def _tracker(request: Request) -> TrackerService:
        state_container: AppContainer = request.app.state.container
        return state_container.tracker_service

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def page() -> HTMLResponse:
        """Single-page tracker UI that consumes the JSON API."""
        return HTMLResponse(PAGE_HTML)

    @app.get("/api/state")
    async def get_state(request: Request) -> dict[str, object]:
        """Return the current view."""
        return _view(_tracker(request).state)

    @app.post("/api/fields")
    async def change_field(change: FieldChange, request: Request) -> dict[str, object]:
        """Update a requirement or form field."""
        try:
            state = _tracker(request).change_field(change.field, change.value)
        except UnknownFieldError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
            ) from exc
        return _view(state)

    @app.post("/api/entries")
    async def submit_entry(request: Request) -> dict[str, object]:
        """Commit the form draft as a new or updated entry."""
        return _view(_tracker(request).submit())

    @app.post("/api/entries/{index}/edit")
    async def edit_entry(index: int, request: Request) -> dict[str, object]:
        """Load an entry into the form for editing."""
        try:
            state = _tracker(request).edit(index)
        except EntryNotFoundError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        return _view(state)

    @app.post("/api/form/reset")
    async def reset_form(request: Request) -> dict[str, object]:
        """Clear the form and leave editing mode."""
        return _view(_tracker(request).reset())

    @app.delete("/api/entries")
    async def clear_entries(request: Request) -> dict[str, object]:
        """Remove every entry and purge storage."""
        return _view(_tracker(request).clear_all())

    @app.get("/api/charts/{metric}")
    async def get_chart(metric: str, request: Request) -> dict[str, object]:
        """Return one nutrient chart."""
        try:
            resolved = Metric.from_key(metric)
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
            ) from exc
        state = _tracker(request).state
        chart = build_chart(state.foods, state.requirements, resolved)
        return asdict(build_chart_view(chart))

    return app


def _view(state: AppState) -> dict[str, object]:
    return asdict(build_view(state))
