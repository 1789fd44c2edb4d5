"""Main FastAPI application entry point."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.logging import RequestLoggingMiddleware
from api.middleware.request_id import RequestIDMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_notification_service
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown tasks."""

    async def notification_cleanup_loop(interval: int) -> None:
        """Periodically delete invite notifications past their expiry."""
        while True:
            await asyncio.sleep(interval)
            try:
                deleted = await get_notification_service().cleanup_expired()
                if deleted > 0:
                    logger.info("notification_cleanup_completed", deleted_count=deleted)
            except Exception:
                logger.exception("notification_cleanup_failed")

    cleanup_task = None
    if settings.notification_cleanup_interval_seconds > 0:
        cleanup_task = asyncio.create_task(
            notification_cleanup_loop(settings.notification_cleanup_interval_seconds)
        )
    yield
    if cleanup_task is not None:
        cleanup_task.cancel()
        with suppress(asyncio.CancelledError):
            await cleanup_task


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        default_response_class=ORJSONResponse,
        lifespan=lifespan,
        title=settings.app_name,
        description=(
            "## Project Collaboration Invites\n\n"
            "Invite collaborators to a project by email, track pending invites, "
            "resend or revoke them, and accept an invite by its token.\n\n"
            "### Identity\n"
            "Requests are authenticated upstream. The authenticated account id "
            "is forwarded in the `X-User-Id` header."
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {
                "name": "health",
                "description": "Health check endpoints",
            },
            {
                "name": "invites",
                "description": "Project invite lifecycle",
            },
            {
                "name": "notifications",
                "description": "In-app notifications of the current user",
            },
        ],
    )

    # Tracking middleware (LIFO order - last added = outermost).
    # Request IDs are assigned before the logging middleware binds them.
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    logger.debug("app_created", environment=settings.app_env)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
