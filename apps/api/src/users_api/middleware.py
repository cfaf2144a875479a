"""Middleware setup for the FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from users_api.config import DEV_ENVIRONMENTS

logger = logging.getLogger(__name__)


def get_allowed_origins(ui_url: str | None = None, environment: str = "development") -> list[str]:
    """Get the origins allowed to call the API.

    Only the configured UI is allowed. In development the same UI is also
    accepted when addressed as 127.0.0.1 instead of localhost, or the reverse.

    Args:
        ui_url: URL of the UI application
        environment: Environment name

    Returns:
        List of allowed origin URLs, without duplicates
    """
    if not ui_url:
        return []

    origin = ui_url.rstrip("/")
    allowed_origins = [origin]
    if environment.lower() in DEV_ENVIRONMENTS:
        allowed_origins.append(origin.replace("//localhost", "//127.0.0.1", 1))
        allowed_origins.append(origin.replace("//127.0.0.1", "//localhost", 1))

    return list(dict.fromkeys(allowed_origins))


def get_cors_headers(origin: str | None, ui_url: str | None = None, environment: str = "development") -> dict[str, str]:
    """Get CORS headers for a given origin.

    Error responses built by the global exception handler bypass
    CORSMiddleware, so they need these attached by hand.

    Args:
        origin: The origin from the request header
        ui_url: URL of the UI application
        environment: Environment name

    Returns:
        Dictionary of CORS headers, empty if origin is not allowed
    """
    if not origin or origin not in get_allowed_origins(ui_url, environment):
        return {}

    return {
        "Access-Control-Allow-Origin": origin,
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": "*",
        "Access-Control-Allow-Headers": "*",
    }


def setup_middleware(app: FastAPI, ui_url: str | None = None, environment: str = "development") -> None:
    """Setup middleware for the FastAPI application.

    Args:
        app: FastAPI application instance
        ui_url: URL of the UI application for CORS
        environment: Environment name
    """
    allowed_origins = get_allowed_origins(ui_url, environment)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    logger.info("CORS enabled for origins: %s (environment=%s)", allowed_origins, environment)
