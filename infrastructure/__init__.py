"""
Infrastructure Layer for the Pushup Tracker.

This package contains concrete implementations of repository interfaces:
- db/: Supabase database implementations
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabasePushupRecordRepository,
    SupabaseGoalRepository,
)

__all__ = [
    "SupabasePushupRecordRepository",
    "SupabaseGoalRepository",
]
