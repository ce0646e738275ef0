"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from flexlog.api.routes import router
from flexlog.app_logging import configure_logging
from flexlog.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="FlexLog")
    app.state.container = container
    app.include_router(router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    logger.info("FlexLog API ready (environment=%s)", container.settings.environment)
    return app
