"""CORS configuration for browser clients."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from usertask_api.config import Settings

logger = logging.getLogger(__name__)

# Base allowed origins for development
DEV_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]


def allowed_origins(settings: Settings) -> list:
    origins = list(DEV_ORIGINS)
    # Add the configured frontend URL if provided
    if settings.frontend_url and settings.frontend_url not in origins:
        origins.append(settings.frontend_url)
    return origins


def add_cors_middleware(app: FastAPI, settings: Settings) -> None:
    """Add CORS middleware to the FastAPI application."""
    if settings.environment == "production":
        # Only the configured frontend may call the API in production
        origins = [settings.frontend_url]
    else:
        origins = allowed_origins(settings)

    logger.info(f"[CORS] Environment: {settings.environment}, allowed origins: {origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
