"""
API package for the Pushup Tracker.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_supabase_client,
    get_supabase_client_required,
    get_record_repo,
    get_goal_repo,
    get_dashboard_service,
    get_calendar_service,
    get_current_user,
    get_optional_user,
    get_screen_user,
)

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
