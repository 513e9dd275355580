"""FastAPI application setup."""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.api.controller import get_product_service, product_router
from src.services import InvalidDataError, ResourceNotFoundError, ServiceError

logger = logging.getLogger(__name__)


def _error_response(status: int, error: str, exc: ServiceError, request: Request) -> JSONResponse:
    """Build the standard error payload."""
    return JSONResponse(
        status_code=status,
        content={
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "status": status,
            "error": error,
            "message": str(exc),
            "path": request.url.path,
        },
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Product API",
        description="REST API for product management",
        version="1.0.0",
    )

    app.include_router(product_router)

    @app.exception_handler(ResourceNotFoundError)
    async def resource_not_found(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
        return _error_response(404, "Resource not found", exc, request)

    @app.exception_handler(InvalidDataError)
    async def invalid_data(request: Request, exc: InvalidDataError) -> JSONResponse:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc}")
        return _error_response(422, "Invalid data", exc, request)

    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


__all__ = ["create_app", "get_product_service"]
