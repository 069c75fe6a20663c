"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitin.api.admin import router as admin_router
from fitin.api.calculator import router as calculator_router
from fitin.api.details import router as details_router
from fitin.app_logging import configure_logging
from fitin.containers import AppContainer
from fitin.domain.errors import ValidationError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(calculator_router)
    app.include_router(details_router)
    app.include_router(admin_router)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logger.info("Rejected details: field=%s reason=%s", exc.field, exc.message)
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": {"field": exc.field, "message": exc.message}},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
