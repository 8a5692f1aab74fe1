"""
Application factory for FastAPI.

This module provides a factory function for creating FastAPI application instances.
The factory pattern allows for:
- Easy testing with custom settings
- Multiple app instances with different configurations
- Clear separation of app creation from route definitions

Usage:
    from backend.main import create_app
    from backend.settings import Settings

    # Default app (uses get_settings())
    app = create_app()

    # Test app with custom settings
    test_settings = Settings(environment="test", _env_file=None)
    test_app = create_app(settings=test_settings)
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routers.health import APP_DESCRIPTION, APP_TITLE
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure a FastAPI application instance.

    Args:
        settings: Optional Settings instance. If not provided, uses get_settings()
                  which loads from environment variables.

    Returns:
        Configured FastAPI application instance.
    """
    explicit_settings = settings is not None
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title=APP_TITLE,
        description=APP_DESCRIPTION,
        version="1.0.0",
    )

    _configure_cors(app, settings)
    _include_routers(app)
    if explicit_settings:
        _use_settings(app, settings)
    _log_startup(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Initialize Sentry SDK if DSN is configured."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,  # 10% of transactions for performance monitoring
            profiles_sample_rate=0.1,
            enable_tracing=True,
        )
        logger.info("Sentry initialized for pushup-tracker")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    """Configure CORS middleware for the application."""
    trusted_origins = []
    # Local frontends only outside production
    if not settings.is_production:
        trusted_origins.extend([
            "http://localhost:3000",
            "http://localhost:3001",
        ])
    trusted_origins.extend(settings.cors_origins_list)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=trusted_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    """Include all API routers in the application."""
    from api.routers import (
        health_router,
        dashboard_router,
        calendar_router,
    )

    # Health router (no prefix - /health at root)
    app.include_router(health_router)

    # Screens and their mutations
    app.include_router(dashboard_router)
    app.include_router(calendar_router)


def _use_settings(app: FastAPI, settings: Settings) -> None:
    """Make route dependencies read the settings this app was created with."""
    from api.deps import get_settings as get_settings_dependency

    app.dependency_overrides[get_settings_dependency] = lambda: settings


def _log_startup(settings: Settings) -> None:
    """Log configuration that affects behaviour at startup."""
    if not settings.supabase_url or not settings.supabase_key:
        logger.warning("Supabase credentials not configured; data endpoints will answer 503")
    if not settings.supabase_jwt_secret and not settings.api_keys_list:
        logger.warning("No SUPABASE_JWT_SECRET or API_KEYS configured; every request is anonymous")
    logger.info(
        f"Pushup tracker starting (environment={settings.environment}, "
        f"default_goal={settings.default_daily_goal})"
    )


# Default app instance for uvicorn
# This allows: uvicorn backend.main:app --reload
app = create_app()
