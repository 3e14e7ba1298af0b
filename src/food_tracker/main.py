"""Command-line entrypoint."""

import uvicorn

from food_tracker.config import Settings


def main() -> None:
    """Run the ASGI app with uvicorn."""
    settings = Settings()
    print(f"Food Tracker on http://{settings.host}:{settings.port}")
    uvicorn.run(
        "food_tracker.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
