"""Main FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from users_api.config import Settings, get_settings
from users_api.middleware import get_cors_headers, setup_middleware
from users_api.routes import api_router, users_router_no_prefix
from users_api.services import build_user_service

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred."


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Interactive docs are only served in development environments.

    Args:
        settings: Application settings, read from the environment when omitted

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()
    logging.getLogger().setLevel(settings.log_level.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Handle application lifespan events."""
        logger.info(f"{settings.app_name} v{settings.app_version} started")
        logger.info(f"Environment: {settings.environment}")
        logger.info(f"Log level: {settings.log_level}")

        yield

        logger.info(f"{settings.app_name} shutting down")

    docs_enabled = settings.is_development
    app = FastAPI(
        title=settings.app_name,
        description="In-memory user management API",
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
        debug=settings.debug,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )

    # Setup middleware (must be before exception handlers)
    setup_middleware(app, ui_url=settings.ui_url, environment=settings.environment)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Turn unhandled errors into a generic 500 response."""
        logger.error("Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True)

        origin = request.headers.get("origin")
        cors_headers = get_cors_headers(origin, ui_url=settings.ui_url, environment=settings.environment)

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": UNEXPECTED_ERROR},
            headers=cors_headers,
        )

    # Each app owns its store; route dependencies see the settings it was built with
    app.state.user_service = build_user_service(seed_users=settings.seed_users)
    app.dependency_overrides[get_settings] = lambda: settings

    app.include_router(api_router)
    app.include_router(users_router_no_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=_settings.api_host,
        port=_settings.api_port,
        reload=_settings.is_development,
        log_level=_settings.log_level.lower(),
    )
