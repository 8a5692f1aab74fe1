"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the repository interfaces
defined in application.ports. These implementations can be injected into services
and routers for clean separation of concerns and testability.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabasePushupRecordRepository,
        SupabaseGoalRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories with injected client
    record_repo = SupabasePushupRecordRepository(client)
    goal_repo = SupabaseGoalRepository(client)
"""

from infrastructure.db.pushup_repository import SupabasePushupRecordRepository
from infrastructure.db.goal_repository import SupabaseGoalRepository

__all__ = [
    # Daily pushup records
    "SupabasePushupRecordRepository",

    # Per-user goal
    "SupabaseGoalRepository",
]
