"""
Fake Repository Implementations for Testing.

This package provides in-memory fake implementations of repository interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakePushupRecordRepository, create_record_repo

    # Direct instantiation
    repo = FakePushupRecordRepository()
    repo.seed([{"user_id": "user1", "count": 10, "created_at": "2026-10-19T08:00:00+00:00"}])

    # Factory function with a run of consecutive active days
    repo = create_record_repo(user_id="user1", today=date(2026, 10, 19), streak_days=5)
"""
from datetime import date, timedelta
from typing import Optional

from tests.fakes.pushup_repository import FakePushupRecordRepository
from tests.fakes.goal_repository import FakeGoalRepository


# =============================================================================
# Factory Functions
# =============================================================================


def create_record_repo(
    *,
    user_id: str = "test_user",
    today: Optional[date] = None,
    streak_days: int = 0,
    count_per_day: int = 10,
) -> FakePushupRecordRepository:
    """
    Create a FakePushupRecordRepository with optional consecutive active days.

    Args:
        user_id: Owner of generated records
        today: Last day of the run (defaults to date.today())
        streak_days: Number of consecutive days ending at today to fill
        count_per_day: Count stored for each generated day

    Returns:
        Pre-populated FakePushupRecordRepository
    """
    repo = FakePushupRecordRepository()
    today = today or date.today()
    if streak_days > 0:
        repo.seed_days(
            user_id,
            {today - timedelta(days=i): count_per_day for i in range(streak_days)},
        )
    return repo


def create_goal_repo(
    *,
    user_id: str = "test_user",
    daily_target: Optional[int] = None,
) -> FakeGoalRepository:
    """Create a FakeGoalRepository, optionally holding the user's goal."""
    repo = FakeGoalRepository()
    if daily_target is not None:
        repo.seed([{"user_id": user_id, "daily_target": daily_target}])
    return repo


__all__ = [
    "FakePushupRecordRepository",
    "FakeGoalRepository",
    "create_record_repo",
    "create_goal_repo",
]
