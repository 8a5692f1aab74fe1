"""
FastAPI Dependency Providers for the Pushup Tracker.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with fake implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Repository and service providers create new instances per-request
- Auth providers wrap backend.auth (Supabase session JWT / API key)

Usage in routers:
    from api.deps import get_current_user, get_dashboard_service
    from backend.core.dashboard_service import DashboardService

    @router.get("/dashboard")
    def dashboard(
        user_id: str = Depends(get_current_user),
        service: DashboardService = Depends(get_dashboard_service),
    ):
        return service.load(user_id)

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_record_repo] = lambda: FakePushupRecordRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import GoalRepository, PushupRecordRepository

# Concrete implementations
from infrastructure import SupabaseGoalRepository, SupabasePushupRecordRepository

from backend.core.calendar_service import CalendarService
from backend.core.dashboard_service import DashboardService
from backend.settings import Settings, get_settings as _get_settings

# Auth from existing module (wrap to maintain single source of truth)
from backend.auth import (
    get_current_user as _get_current_user,
    get_optional_user as _get_optional_user,
)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def _create_client(url: str, key: str) -> Client:
    """Create one Supabase client per (url, key) for the lifetime of the process."""
    return create_client(url, key)


def get_supabase_client(settings: Settings = Depends(get_settings)) -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Note: Clients are cached for the lifetime of the process.
    Clear with _create_client.cache_clear() in tests.
    """
    if not settings.supabase_url or not settings.supabase_key:
        return None

    return _create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required(
    client: Optional[Client] = Depends(get_supabase_client),
) -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Repository Providers
# =============================================================================


def get_record_repo(
    client: Client = Depends(get_supabase_client_required),
) -> PushupRecordRepository:
    """
    Get PushupRecordRepository implementation.

    The return type is the Protocol to enable easy faking.
    """
    return SupabasePushupRecordRepository(client)


def get_goal_repo(
    client: Client = Depends(get_supabase_client_required),
) -> GoalRepository:
    """Get GoalRepository implementation."""
    return SupabaseGoalRepository(client)


# =============================================================================
# Service Providers
# =============================================================================


def get_dashboard_service(
    record_repo: PushupRecordRepository = Depends(get_record_repo),
    goal_repo: GoalRepository = Depends(get_goal_repo),
    settings: Settings = Depends(get_settings),
) -> DashboardService:
    """Get DashboardService wired to the record and goal repositories."""
    return DashboardService(
        record_repo,
        goal_repo,
        default_goal=settings.default_daily_goal,
        streak_lookback_days=settings.streak_lookback_days,
    )


def get_calendar_service(
    record_repo: PushupRecordRepository = Depends(get_record_repo),
) -> CalendarService:
    """Get CalendarService wired to the record repository."""
    return CalendarService(record_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


async def get_current_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> str:
    """
    Get the current authenticated user ID.

    Wraps backend.auth.get_current_user for dependency injection.

    Raises:
        HTTPException: 401 if authentication fails
    """
    return await _get_current_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    x_api_key: Optional[str] = Header(None, alias="X-API-Key"),
) -> Optional[str]:
    """
    Get the current user ID if authenticated, None otherwise.

    Screens use this to redirect anonymous visitors to sign-in.
    """
    return await _get_optional_user(
        authorization=authorization,
        x_api_key=x_api_key,
    )


async def get_screen_user(
    user_id: Optional[str] = Depends(get_optional_user),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    Get the user ID for a screen, redirecting anonymous visitors to sign-in.

    Declare this before any data dependency so the redirect is answered
    without touching the database.

    Raises:
        HTTPException: 307 to settings.auth_redirect_url if not authenticated
    """
    if not user_id:
        raise HTTPException(
            status_code=307,
            headers={"Location": settings.auth_redirect_url},
        )
    return user_id


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    # Repositories
    "get_record_repo",
    "get_goal_repo",
    # Services
    "get_dashboard_service",
    "get_calendar_service",
    # Authentication
    "get_current_user",
    "get_optional_user",
    "get_screen_user",
]
