"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from macro_tracker.api.auth import router as auth_router
from macro_tracker.api.entries import router as entries_router
from macro_tracker.api.errors import register_error_handlers
from macro_tracker.api.foods import router as foods_router
from macro_tracker.api.goals import router as goals_router
from macro_tracker.api.stats import router as stats_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Macro Tracker")
    app.state.container = container
    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(goals_router)
    app.include_router(entries_router)
    app.include_router(stats_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info(
        "Application created", extra={"environment": container.settings.environment}
    )
    return app
